"""Define all tests for Scoped itself."""

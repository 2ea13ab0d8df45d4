"""
Provide test utilities for code that builds on Scoped.
"""

"""
Pytest configuration.
"""

from __future__ import annotations

from logging import DEBUG

import pytest
from _pytest.logging import LogCaptureFixture


@pytest.fixture(autouse=True)
def _capture_debug_logs(caplog: LogCaptureFixture) -> None:
    """
    Capture Scoped's debug log records.
    """
    caplog.set_level(DEBUG, logger="scoped")

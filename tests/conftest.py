"""Pytest configuration and fixtures for all tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ottoperf.core.logging_system import shutdown_logging


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path):
    """Keep log files out of the user's home directory.

    Every test that initializes logging with the platform directory writes
    into its own temporary directory instead.
    """
    log_dir = tmp_path / "logs"
    with patch("ottoperf.core.logging_system.get_platform_log_dir", return_value=log_dir):
        yield log_dir
    shutdown_logging()

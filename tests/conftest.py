import os
from typing import Generator
from unittest.mock import patch

import pytest

from linelog.timestamp import TimestampFormatter

FIXED_HEADER = "2026-10-19 14:02:11"


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """
    Remove LINELOG_* variables for every test.

    Keeps tests independent of the developer's shell and of .env files
    loaded by earlier tests.
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("LINELOG_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def fixed_timestamps() -> TimestampFormatter:
    """
    Timestamp formatter that always renders FIXED_HEADER.

    A pattern without directives is returned verbatim by strftime.
    """
    return TimestampFormatter(pattern=FIXED_HEADER)


@pytest.fixture
def log_dir(tmp_path):
    """Existing, empty directory for log files."""
    path = tmp_path / "logs"
    path.mkdir()
    return path

"""Pytest configuration and fixtures for Kalends tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so kalends can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from kalends._internal.calendar import ordinal_to_ymd  # noqa: E402
from kalends._internal.constants import EPOCH_ORDINAL  # noqa: E402
from kalends.convert import epoch  # noqa: E402


def utc_fields(seconds: int) -> tuple[int, int, int, int, int, int]:
    """Calendar fields for a Unix timestamp, as if the local zone were UTC."""
    days, rem = divmod(seconds, 86400)
    year, month, day = ordinal_to_ymd(EPOCH_ORDINAL + days)
    hour, rem = divmod(rem, 3600)
    minute, second = divmod(rem, 60)
    return (year, month, day, hour, minute, second)


@pytest.fixture
def utc_local(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the local time zone UTC regardless of the host's TZ."""
    monkeypatch.setattr(epoch, "local_fields", utc_fields)

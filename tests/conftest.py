"""Pytest configuration and shared fixtures."""

import pytest

from sports_radar.utils import log


SAMPLE_CSV = (
    "Sport,Overall Score,Athletics Score,Tactics Score,Spectacle Score,Pacing Score,Rules Score\n"
    "Chess,40%,10%,99%,20%,15%,90%\n"
    "Boxing,90%,95%,60%,85%,70%,40%\n"
    "Archery,40%,30%,35%,25%,20%,60%\n"
    "ice hockey,75.5%,88%,70%,92%,85%,55%\n"
)


@pytest.fixture(autouse=True)
def isolated_log(tmp_path):
    """Send diagnostics to a per-test file instead of the user's home directory."""
    path = log.set_log_path(tmp_path / "sports_radar_test.log")
    yield path
    log.set_log_path(None)


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV

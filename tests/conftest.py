"""
Pytest configuration and shared fixtures.

This file contains pytest configuration and reusable test fixtures.
"""

import pytest
from pathlib import Path

import sensorio.config.settings as settings_mod
from sensorio.config.settings import AppSettings
from sensorio.core.models import FlatRecord
from sensorio.core.mutations import TreeEditor
from sensorio.core.session import EditingSession


SAMPLE_CSV = (
    "Brand,Model,Mode,Width,Height,Resolution,NativeAnamorphic,SupportedSqueezes\r\n"
    "Acme,V1,Wide,10.00,5.00,4096 x 2160,False,1.3\r\n"
    "Acme,V1,Tele,10.00,5.00,2048 x 1080,True,\r\n"
    "Acme,V2,Full,36.00,24.00,6000 x 4000,False,1.5;2.0\r\n"
    "Zeta,Z9,Open Gate,27.99,19.22,5760 x 3840,True,1.25;1.3;1.5\r\n"
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Path:
    """
    Point the home directory at a temporary location.
    
    Keeps settings and log files written during tests out of the real
    persistent data directory, and resets the global settings manager.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    settings_mod._settings_manager = None
    yield home
    settings_mod._settings_manager = None


@pytest.fixture
def sample_records() -> list[FlatRecord]:
    """
    Create flat records spanning two brands and three models.
    
    Returns:
        Records in persisted order.
    """
    return [
        FlatRecord("Acme", "V1", "Wide", "10.00", "5.00", "4096 x 2160", "False", "1.3"),
        FlatRecord("Acme", "V1", "Tele", "10.00", "5.00", "2048 x 1080", "True", ""),
        FlatRecord("Acme", "V2", "Full", "36.00", "24.00", "6000 x 4000", "False", "1.5;2.0"),
        FlatRecord("Zeta", "Z9", "Open Gate", "27.99", "19.22", "5760 x 3840", "True", "1.25;1.3;1.5"),
    ]


@pytest.fixture
def sample_csv_text() -> str:
    """CSV text equivalent to sample_records."""
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_file(tmp_path, sample_csv_text) -> Path:
    """Write the sample CSV to disk and return its path."""
    path = tmp_path / "sensors.csv"
    path.write_text(sample_csv_text, encoding="utf-8", newline="")
    return path


@pytest.fixture
def session(sample_records) -> EditingSession:
    """An editing session loaded with the sample records."""
    session = EditingSession()
    session.load_records(sample_records, file_name="sensors.csv")
    return session


@pytest.fixture
def editor(session) -> TreeEditor:
    """A mutation engine bound to the loaded session."""
    return TreeEditor(session)


@pytest.fixture
def test_settings(tmp_path) -> AppSettings:
    """Settings that never touch the network or the real log file."""
    return AppSettings(
        log_to_file=False,
        log_file_path=tmp_path / "log.txt",
        default_dataset_url="https://example.invalid/cameras.csv",
        fetch_timeout=1.0,
    )

"""Shared test fixtures for didi."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest
import yaml

from didi.journal.store import DiaryStore


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep DIDI_* variables and the real home directory out of tests."""
    for key in list(os.environ):
        if key.startswith("DIDI_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    config_data = {
        "paths": {
            "database": os.path.join(tmp_dir, "diary.sqlite"),
        },
        "display": {
            "show_keywords": True,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


class StepClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "diary.sqlite"


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store(db_path, clock):
    s = DiaryStore(db_path, clock=clock)
    s.initialize()
    return s

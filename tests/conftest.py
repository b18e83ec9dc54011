# tests/conftest.py

import os

import pytest

from Rollcmd.metrics import reset_counters


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_counters()
    yield
    reset_counters()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run in an empty directory with no ROLLCMD_* variables set.

    Settings read config.toml and .env from the working directory, so each test
    that loads settings starts from a clean slate.
    """
    for key in list(os.environ):
        if key.upper().startswith("ROLLCMD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def counting_roller():
    """Factory for stateful per-die functions yielding start, start+1, ..."""

    def make(start: int = 1):
        state = {"next": start}

        def roll_one(sides: int) -> int:
            value = state["next"]
            state["next"] += 1
            return value

        return roll_one

    return make

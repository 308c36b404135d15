"""Pytest fixtures for vimotion tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="vimotion-test-config-"))
os.environ.setdefault("VIMOTION_CONFIG_DIR", str(_TEST_CONFIG_DIR))


@pytest.fixture(autouse=True)
def _reset_keymap():
    """Ensure a keymap set by one test does not leak into the next."""
    from vimotion.core.keymap import reset_keymap

    reset_keymap()
    yield
    reset_keymap()


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings store at a fresh file."""
    path = tmp_path / "settings.json"
    monkeypatch.setenv("VIMOTION_SETTINGS_PATH", str(path))
    return path

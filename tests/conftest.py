# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the sgit test suite.
"""

import pytest

from tests.fixtures.recording_executor import RecordingExecutor


@pytest.fixture
def recorder():
    return RecordingExecutor()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point every user config search location at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("SGIT_CONFIG_HOME", raising=False)
    return home


@pytest.fixture
def sgit_config_dir(tmp_path, monkeypatch):
    """Directory picked up through SGIT_CONFIG_HOME; write sgit.yml into it."""
    config_dir = tmp_path / "sgit-config"
    config_dir.mkdir()
    monkeypatch.setenv("SGIT_CONFIG_HOME", str(config_dir))
    return config_dir

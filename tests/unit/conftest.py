"""
Unit test configuration for mdprint.

Every test gets an empty config location and a fresh highlighter singleton,
so a developer's ~/.mdprint/config.yaml never leaks into results.
"""

import pytest

from mdprint import config
from mdprint.highlighter import reset_highlighter


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point CONFIG_PATH at a file that does not exist yet."""
    config_file = tmp_path / "mdprint-home" / "config.yaml"
    monkeypatch.setattr(config, "CONFIG_PATH", config_file)
    yield config_file


@pytest.fixture(autouse=True)
def fresh_highlighter():
    reset_highlighter()
    yield
    reset_highlighter()

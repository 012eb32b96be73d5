"""
E2E fixtures for mdprint.

These tests drive a real headless Chromium through Playwright and are
skipped when it cannot be launched.
"""

import os
from pathlib import Path

import pytest

from mdprint import config

TESTS_DIR = Path(__file__).parent.parent
PROJECT_ROOT = TESTS_DIR.parent
SRC_DIR = PROJECT_ROOT / "src"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the user's config out of E2E runs, in-process and in subprocesses."""
    home = tmp_path / "mdprint-home"
    monkeypatch.setenv("MDPRINT_DIR", str(home))
    monkeypatch.setattr(config, "CONFIG_PATH", home / "config.yaml")
    return home


@pytest.fixture
def subprocess_env(isolated_home):
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return env

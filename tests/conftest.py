"""
Pytest configuration and shared fixtures.

Keeps every test away from the developer's real config and environment:
XDG_CONFIG_HOME points at a temp directory, TERSEID_* variables are
cleared, and the config cache is reset around each test.
"""

import os

import pytest

from terseid.core.config import clear_cache


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Run each test with a clean environment and empty config cache."""
    for name in list(os.environ):
        if name.startswith("TERSEID_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def ids_file(tmp_path):
    """Path to an ID store seeded with a few IDs."""
    path = tmp_path / "ids.txt"
    path.write_text("bd-a7x\nbd-a7y\nbd-b8z9\nbd-a7x.1\n")
    return path

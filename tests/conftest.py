"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "smoke", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(autouse=True)
def tml_home(tmp_path: Path, monkeypatch) -> Path:
    """Point TML_HOME at an empty directory so no user config leaks into tests."""
    home = tmp_path / ".tml"
    home.mkdir()
    monkeypatch.setenv("TML_HOME", str(home))
    return home


@pytest.fixture
def write_config(tml_home: Path):
    """Write a config.json into TML_HOME and return its path."""

    def _write(data) -> Path:
        path = tml_home / "config.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    return _write


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from a scratch working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() so handlers bound to captured streams do not leak."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)

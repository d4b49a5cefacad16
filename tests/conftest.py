"""Shared pytest configuration and fixtures for all tests."""

import os
import time
from collections.abc import Callable
from pathlib import Path

import pytest

from fiso.utils.logger import reset_logging

DAY_SECONDS = 24 * 60 * 60


def pytest_configure(config):
    for marker in ("unit", "integration", "scan", "sort", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def fiso_home(tmp_path: Path, monkeypatch):
    """Point FISO_HOME at a per-test directory and drop log handlers afterwards."""
    home = tmp_path / ".fiso"
    monkeypatch.setenv("FISO_HOME", str(home))
    yield home
    reset_logging()


# =============================================================================
# Command helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture() -> Callable:
    return run_cmd


# =============================================================================
# Filesystem helpers
# =============================================================================


def age_file(path: Path, days: float) -> None:
    """Set a file's access and modification time ``days`` in the past."""
    stamp = time.time() - days * DAY_SECONDS
    os.utime(path, (stamp, stamp))


@pytest.fixture(name="age_file")
def age_file_fixture() -> Callable[[Path, float], None]:
    return age_file


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with a.txt (100 B), b.txt (50 B), c (10 B) and d/e.log (5 B), all fresh."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"a" * 100)
    (root / "b.txt").write_bytes(b"b" * 50)
    (root / "c").write_bytes(b"c" * 10)
    (root / "d").mkdir()
    (root / "d" / "e.log").write_bytes(b"e" * 5)
    return root

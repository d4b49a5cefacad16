"""Unit tests for fiso.api.config.get_home_dir module."""

from pathlib import Path

import pytest

from fiso.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


class TestGetHomeDir:
    """Test get_home_dir function."""

    def test_get_home_dir_with_fiso_home_env(self, monkeypatch, tmp_path):
        custom_home = tmp_path / "custom_fiso"
        monkeypatch.setenv("FISO_HOME", str(custom_home))

        assert get_home_dir() == custom_home.resolve()

    def test_get_home_dir_with_home_env(self, monkeypatch, tmp_path):
        custom_home = tmp_path / "custom_home"
        monkeypatch.delenv("FISO_HOME", raising=False)
        monkeypatch.setenv("HOME", str(custom_home))

        assert get_home_dir() == custom_home / ".fiso"

    def test_get_home_dir_default(self, monkeypatch):
        monkeypatch.delenv("FISO_HOME", raising=False)
        monkeypatch.delenv("HOME", raising=False)

        home_dir = get_home_dir()

        assert isinstance(home_dir, Path)
        assert home_dir.name == ".fiso"

    def test_get_home_dir_with_parts(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FISO_HOME", str(tmp_path))
        assert get_home_dir("config.json") == tmp_path.resolve() / "config.json"

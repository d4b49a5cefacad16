"""Unit tests for fiso.api.scan.walk_entries module."""

import os
from pathlib import Path

import pytest

from fiso.api.scan.RootNotFoundError import RootNotFoundError
from fiso.api.scan.walk_entries import walk_entries

pytestmark = pytest.mark.scan


def _names(root: Path, recursive: bool) -> list[str]:
    return [os.path.relpath(entry.path, root) for entry in walk_entries(root, recursive=recursive)]


class TestWalkEntries:
    """Test walk_entries traversal."""

    def test_flat_yields_direct_children_only(self, sample_tree):
        assert _names(sample_tree, recursive=False) == ["a.txt", "b.txt", "c", "d"]

    def test_recursive_is_depth_first(self, sample_tree):
        """Test a directory is followed by its contents before the next sibling."""
        (sample_tree / "d" / "f").mkdir()
        (sample_tree / "d" / "f" / "g.md").write_text("g")
        (sample_tree / "z.txt").write_text("z")

        assert _names(sample_tree, recursive=True) == [
            "a.txt",
            "b.txt",
            "c",
            "d",
            os.path.join("d", "e.log"),
            os.path.join("d", "f"),
            os.path.join("d", "f", "g.md"),
            "z.txt",
        ]

    def test_root_not_yielded(self, sample_tree):
        paths = [entry.path for entry in walk_entries(sample_tree, recursive=True)]
        assert str(sample_tree) not in paths

    def test_order_is_reproducible(self, sample_tree):
        assert _names(sample_tree, recursive=True) == _names(sample_tree, recursive=True)

    def test_missing_root_raises_immediately(self, tmp_path):
        """Test the error is raised by the call, before any iteration."""
        missing = tmp_path / "missing"
        with pytest.raises(RootNotFoundError) as exc_info:
            walk_entries(missing)
        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    def test_file_root_raises(self, sample_tree):
        with pytest.raises(RootNotFoundError):
            walk_entries(sample_tree / "a.txt", recursive=True)

    def test_root_not_found_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            walk_entries(tmp_path / "missing")

    def test_unreadable_subdirectory_is_skipped(self, sample_tree, monkeypatch):
        """Test a directory that cannot be listed does not stop the walk."""
        (sample_tree / "z.txt").write_text("z")
        blocked = str(sample_tree / "d")
        real_scandir = os.scandir

        def fake_scandir(path):
            if os.fspath(path) == blocked:
                raise PermissionError(13, "Permission denied", blocked)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)

        assert _names(sample_tree, recursive=True) == ["a.txt", "b.txt", "c", "d", "z.txt"]

    def test_unreadable_root_yields_nothing(self, sample_tree, monkeypatch):
        def fake_scandir(path):
            raise PermissionError(13, "Permission denied", os.fspath(path))

        monkeypatch.setattr(os, "scandir", fake_scandir)

        assert list(walk_entries(sample_tree, recursive=True)) == []

    def test_directory_symlinks_not_followed(self, sample_tree):
        (sample_tree / "link").symlink_to(sample_tree / "d", target_is_directory=True)

        names = _names(sample_tree, recursive=True)

        assert "link" in names
        assert os.path.join("link", "e.log") not in names

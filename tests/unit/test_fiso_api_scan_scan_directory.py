"""Unit tests for fiso.api.scan.scan_directory module."""

from datetime import datetime, timedelta, timezone

import pytest

from fiso.api.scan.render_summary import render_summary
from fiso.api.scan.RootNotFoundError import RootNotFoundError
from fiso.api.scan.scan_directory import scan_directory

pytestmark = pytest.mark.scan


class TestScanDirectory:
    """Test scan_directory end to end on real trees."""

    def test_flat_scan(self, sample_tree):
        result = scan_directory(sample_tree)
        summary = result.summary

        assert summary.file_count == 3
        assert summary.directory_count == 1
        assert summary.total_bytes == 160
        assert summary.extensions == {".txt": 2, "Other": 1}
        assert summary.old_files == 0
        assert result.recursive is False
        assert result.root == sample_tree

    def test_recursive_scan(self, sample_tree):
        summary = scan_directory(sample_tree, recursive=True).summary

        assert summary.file_count == 4
        assert summary.directory_count == 1
        assert summary.total_bytes == 165
        assert summary.extensions == {".txt": 2, "Other": 1, ".log": 1}
        assert summary.old_files == 0

    def test_flat_ignores_nested_entries(self, sample_tree):
        nested = sample_tree / "d" / "deeper"
        nested.mkdir()
        (nested / "x.bin").write_bytes(b"x" * 1000)

        flat = scan_directory(sample_tree).summary
        deep = scan_directory(sample_tree, recursive=True).summary

        assert flat.directory_count == 1
        assert flat.total_bytes == 160
        assert deep.directory_count == 2
        assert deep.file_count == 5
        assert deep.total_bytes == 1165

    def test_old_files(self, sample_tree, age_file):
        age_file(sample_tree / "a.txt", 200)
        age_file(sample_tree / "b.txt", 10)

        summary = scan_directory(sample_tree).summary

        assert summary.old_files == 1

    def test_old_file_days_is_configurable(self, sample_tree, age_file):
        age_file(sample_tree / "b.txt", 10)
        assert scan_directory(sample_tree, old_file_days=5).summary.old_files == 1

    def test_reference_time(self, sample_tree):
        """Test the cutoff is taken from the given reference instant."""
        future = datetime.now(timezone.utc) + timedelta(days=365)
        summary = scan_directory(sample_tree, recursive=True, now=future).summary
        assert summary.old_files == 4

    def test_symlinks_are_not_counted(self, sample_tree):
        (sample_tree / "alias.txt").symlink_to(sample_tree / "a.txt")
        (sample_tree / "dlink").symlink_to(sample_tree / "d", target_is_directory=True)

        summary = scan_directory(sample_tree, recursive=True).summary

        assert summary.file_count == 4
        assert summary.directory_count == 1

    def test_invariants(self, sample_tree, age_file):
        age_file(sample_tree / "d" / "e.log", 365)
        summary = scan_directory(sample_tree, recursive=True).summary

        assert summary.file_count == sum(summary.extensions.values())
        assert summary.old_files <= summary.file_count

    def test_missing_root(self, tmp_path):
        with pytest.raises(RootNotFoundError):
            scan_directory(tmp_path / "missing")

    def test_file_root(self, sample_tree):
        with pytest.raises(RootNotFoundError):
            scan_directory(sample_tree / "a.txt")

    def test_expands_user(self, sample_tree, monkeypatch):
        monkeypatch.setenv("HOME", str(sample_tree.parent))
        result = scan_directory("~/root")
        assert result.root == sample_tree
        assert result.summary.file_count == 3

    def test_empty_directory(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        summary = scan_directory(empty, recursive=True).summary
        assert summary.file_count == 0
        assert summary.directory_count == 0

    def test_repeat_scans_render_identically(self, sample_tree):
        """Test an unchanged tree renders the same report apart from timing."""
        first = scan_directory(sample_tree, recursive=True)
        second = scan_directory(sample_tree, recursive=True)

        first_report = render_summary(first.summary, 10, timedelta(0))
        second_report = render_summary(second.summary, 10, timedelta(0))

        assert first_report == second_report

    def test_elapsed_is_measured(self, sample_tree):
        result = scan_directory(sample_tree)
        assert result.elapsed >= timedelta(0)
        assert result.elapsed_ms >= 0

"""
Unit tests for voltakit.core.directory module.

Tests cover:
- Creation of the full directory structure
- Idempotency
- Error handling
"""

from pathlib import Path

import pytest

from voltakit.core.directory import (
    ensure_volta_home,
    layout_directories,
    verify_directory_writable,
)
from voltakit.core.exceptions import DirectoryCreationError, ExitCode


class TestLayoutDirectories:
    """Tests for layout_directories function."""

    def test_root_first(self, layout, volta_root):
        assert layout_directories(layout)[0] == volta_root

    def test_parents_before_children(self, layout):
        directories = layout_directories(layout)
        for index, directory in enumerate(directories):
            for parent in directory.parents:
                if parent in directories:
                    assert directories.index(parent) < index

    def test_no_files_listed(self, layout):
        directories = layout_directories(layout)
        assert Path(layout.user_platform_file()) not in directories
        assert Path(layout.default_shim_executable()) not in directories


class TestEnsureVoltaHome:
    """Tests for ensure_volta_home function."""

    def test_creates_structure(self, layout, volta_root):
        root = ensure_volta_home(layout)

        assert root == volta_root
        for directory in layout_directories(layout):
            assert directory.is_dir(), directory

    def test_expected_directories(self, layout, volta_root):
        ensure_volta_home(layout)

        assert (volta_root / "cache" / "node").is_dir()
        assert (volta_root / "bin").is_dir()
        assert (volta_root / "log").is_dir()
        assert (volta_root / "tools" / "inventory" / "packages").is_dir()
        assert (volta_root / "tools" / "image" / "node").is_dir()
        assert (volta_root / "tools" / "user" / "bins").is_dir()

    def test_creates_no_files(self, layout, volta_root):
        ensure_volta_home(layout)
        files = [p for p in volta_root.rglob("*") if p.is_file()]
        assert files == []

    def test_idempotent(self, layout, volta_root):
        ensure_volta_home(layout)
        marker = volta_root / "tools" / "user" / "platform.json"
        marker.write_text("{}")

        ensure_volta_home(layout)

        assert marker.read_text() == "{}"

    def test_root_is_a_file(self, layout, volta_root):
        volta_root.parent.mkdir(parents=True, exist_ok=True)
        volta_root.write_text("not a directory")

        with pytest.raises(DirectoryCreationError) as exc_info:
            ensure_volta_home(layout)
        assert exc_info.value.exit_code == ExitCode.FILE_SYSTEM_ERROR


class TestVerifyDirectoryWritable:
    """Tests for verify_directory_writable function."""

    def test_writable_directory(self, tmp_path):
        assert verify_directory_writable(tmp_path) is True

    def test_nonexistent_directory(self, tmp_path):
        assert verify_directory_writable(tmp_path / "missing") is False

    def test_file_not_directory(self, tmp_path):
        path = tmp_path / "file"
        path.write_text("x")
        assert verify_directory_writable(path) is False

    def test_no_leftover_test_file(self, tmp_path):
        verify_directory_writable(tmp_path)
        assert list(tmp_path.iterdir()) == []

"""
Unit tests for voltakit.toolchain.shims module.

Tests cover:
- Creating shims that point at the shim executable
- Idempotent creation and deletion
- Protection of built-in shims
- Listing shims
"""

import os
from pathlib import Path

import pytest

from voltakit.core.exceptions import (
    BuiltinShimRemovalError,
    ShimError,
    ShimExecutableNotFoundError,
)
from voltakit.core.filesystem import IS_WINDOWS
from voltakit.core.layout import VoltaLayout
from voltakit.core.shim_resolver import ShimResolver
from voltakit.toolchain.shims import BUILTIN_SHIMS, ShimManager, ShimResult

pytestmark = pytest.mark.skipif(
    IS_WINDOWS, reason="file symbolic links need extra privileges on Windows"
)


@pytest.fixture
def manager(layout, mock_volta_home_with_shim, tmp_path) -> ShimManager:
    resolver = ShimResolver(layout, fallback=tmp_path / "no-system-shim")
    return ShimManager(layout, resolver)


class TestCreate:
    """Tests for ShimManager.create."""

    def test_create_links_to_shim_executable(self, manager, layout, mock_volta_home_with_shim):
        assert manager.create("ember") is ShimResult.CREATED

        shim_file = Path(layout.shim_file("ember"))
        assert shim_file.is_symlink()
        assert Path(os.readlink(shim_file)) == mock_volta_home_with_shim

    def test_create_twice(self, manager):
        manager.create("ember")
        assert manager.create("ember") is ShimResult.ALREADY_EXISTS

    def test_existing_stale_link_left_alone(self, manager, layout, tmp_path):
        shim_file = Path(layout.shim_file("tsc"))
        os.symlink(tmp_path / "gone", shim_file)

        assert manager.create("tsc") is ShimResult.ALREADY_EXISTS
        assert Path(os.readlink(shim_file)) == tmp_path / "gone"

    def test_creates_shim_dir(self, layout, mock_volta_home_with_shim, tmp_path):
        Path(layout.shim_dir()).rmdir()
        manager = ShimManager(layout, ShimResolver(layout, fallback=tmp_path / "none"))

        assert manager.create("ember") is ShimResult.CREATED
        assert Path(layout.shim_file("ember")).is_symlink()

    def test_uses_override(self, layout, mock_volta_home, tmp_path):
        override = tmp_path / "custom-shim"
        override.write_text("custom")
        manager = ShimManager(layout, ShimResolver(layout, override=override))

        manager.create("ember")

        assert Path(os.readlink(layout.shim_file("ember"))) == override

    def test_missing_shim_executable(self, layout, mock_volta_home, tmp_path):
        manager = ShimManager(layout, ShimResolver(layout, fallback=tmp_path / "none"))

        with pytest.raises(ShimExecutableNotFoundError):
            manager.create("ember")
        assert not os.path.lexists(layout.shim_file("ember"))

    def test_missing_override_target(self, layout, mock_volta_home, tmp_path):
        """The override is trusted by the resolver but linking still needs a target."""
        manager = ShimManager(
            layout, ShimResolver(layout, override=tmp_path / "missing-shim")
        )
        with pytest.raises(ShimError):
            manager.create("ember")

    def test_default_resolver(self, layout):
        manager = ShimManager(layout)
        assert isinstance(manager.resolver, ShimResolver)
        assert manager.resolver.layout is layout


class TestDelete:
    """Tests for ShimManager.delete."""

    def test_delete_existing(self, manager, layout, mock_volta_home_with_shim):
        manager.create("ember")

        assert manager.delete("ember") is ShimResult.DELETED
        assert not os.path.lexists(layout.shim_file("ember"))
        assert mock_volta_home_with_shim.exists()

    def test_delete_missing(self, manager):
        assert manager.delete("ember") is ShimResult.DOES_NOT_EXIST

    @pytest.mark.parametrize("name", BUILTIN_SHIMS)
    def test_builtin_shims_protected(self, manager, name):
        manager.create(name)
        with pytest.raises(BuiltinShimRemovalError):
            manager.delete(name)
        assert manager.list() == [name]

    def test_delete_regular_file(self, manager, layout):
        Path(layout.shim_file("ember")).write_text("not a link")
        with pytest.raises(ShimError):
            manager.delete("ember")


class TestList:
    """Tests for ShimManager.list and ensure_builtin_shims."""

    def test_list_sorted(self, manager):
        for name in ("tsc", "ember", "node"):
            manager.create(name)
        assert manager.list() == ["ember", "node", "tsc"]

    def test_list_without_shim_dir(self, tmp_path, linux_x64):
        layout = VoltaLayout(tmp_path / "missing", linux_x64)
        assert ShimManager(layout).list() == []

    def test_ensure_builtin_shims(self, manager):
        assert manager.ensure_builtin_shims() == list(BUILTIN_SHIMS)
        assert manager.list() == sorted(BUILTIN_SHIMS)
        assert manager.ensure_builtin_shims() == []

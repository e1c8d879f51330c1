"""
Unit tests for voltakit.core.shim_resolver module.

Each priority ordering of the resolver is exercised as its own scenario:
override, default location, fallback location, and failure.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from voltakit.config.settings import Settings
from voltakit.core.exceptions import ExitCode, ShimExecutableNotFoundError
from voltakit.core.shim_resolver import ShimResolver


@pytest.fixture
def fallback_shim(tmp_path) -> Path:
    """Fallback location, not created."""
    return tmp_path / "usr" / "bin" / "volta-lib" / "shim"


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("shim")
    return path


class TestOverride:
    """The override is trusted without any existence check."""

    def test_override_returned_when_nothing_exists(self, layout, fallback_shim):
        override = Path("/does/not/exist/shim")
        resolver = ShimResolver(layout, override=override, fallback=fallback_shim)
        assert resolver.resolve() == override

    def test_override_beats_existing_default(self, layout, fallback_shim):
        _touch(Path(layout.default_shim_executable()))
        _touch(fallback_shim)
        override = Path("/custom/shim")
        resolver = ShimResolver(layout, override=override, fallback=fallback_shim)
        assert resolver.resolve() == override

    def test_override_skips_existence_checks(self, layout):
        resolver = ShimResolver(layout, override="/custom/shim")
        with patch("voltakit.core.shim_resolver.os.path.exists") as mock_exists:
            resolver.resolve()
        mock_exists.assert_not_called()

    def test_empty_override_is_unset(self, layout, fallback_shim):
        resolver = ShimResolver(layout, override="", fallback=fallback_shim)
        assert resolver.override is None
        with pytest.raises(ShimExecutableNotFoundError):
            resolver.resolve()

    def test_from_settings(self, layout):
        settings = Settings(shim_override=Path("/from/settings/shim"))
        resolver = ShimResolver.from_settings(layout, settings)
        assert resolver.resolve() == Path("/from/settings/shim")


class TestDefaultLocation:
    """Tests for the default shim location inside the root."""

    def test_default_used_when_present(self, layout, fallback_shim):
        default = _touch(Path(layout.default_shim_executable()))
        resolver = ShimResolver(layout, fallback=fallback_shim)
        assert resolver.resolve() == default

    def test_default_beats_fallback(self, layout, fallback_shim):
        default = _touch(Path(layout.default_shim_executable()))
        _touch(fallback_shim)
        resolver = ShimResolver(layout, fallback=fallback_shim)
        assert resolver.resolve() == default


class TestFallbackLocation:
    """Tests for the system-wide fallback location."""

    def test_fallback_used_when_default_absent(self, layout, fallback_shim):
        _touch(fallback_shim)
        resolver = ShimResolver(layout, fallback=fallback_shim)
        assert resolver.resolve() == fallback_shim

    def test_default_fallback_comes_from_layout(self, layout):
        resolver = ShimResolver(layout)
        assert resolver.fallback == layout.fallback_shim_executable()


class TestResolutionFailure:
    """Tests for the case where no shim executable exists."""

    def test_raises_when_nothing_found(self, layout, fallback_shim):
        resolver = ShimResolver(layout, fallback=fallback_shim)
        with pytest.raises(ShimExecutableNotFoundError) as exc_info:
            resolver.resolve()
        assert exc_info.value.candidates == [
            layout.default_shim_executable(),
            fallback_shim,
        ]
        assert "reinstall" in str(exc_info.value)

    def test_exit_code(self, layout, fallback_shim):
        resolver = ShimResolver(layout, fallback=fallback_shim)
        with pytest.raises(ShimExecutableNotFoundError) as exc_info:
            resolver.resolve()
        assert exc_info.value.exit_code == ExitCode.CONFIGURATION_ERROR

    def test_at_most_two_existence_checks(self, layout, fallback_shim):
        resolver = ShimResolver(layout, fallback=fallback_shim)
        with patch(
            "voltakit.core.shim_resolver.os.path.exists", return_value=False
        ) as mock_exists:
            with pytest.raises(ShimExecutableNotFoundError):
                resolver.resolve()
        assert mock_exists.call_count == 2

    def test_resolution_creates_nothing(self, layout, fallback_shim, volta_root):
        resolver = ShimResolver(layout, fallback=fallback_shim)
        with pytest.raises(ShimExecutableNotFoundError):
            resolver.resolve()
        assert not volta_root.exists()
        assert not fallback_shim.exists()

    def test_not_cached_between_calls(self, layout, fallback_shim):
        """A shim installed after a failed lookup is found on the next call."""
        resolver = ShimResolver(layout, fallback=fallback_shim)
        with pytest.raises(ShimExecutableNotFoundError):
            resolver.resolve()
        _touch(fallback_shim)
        assert resolver.resolve() == fallback_shim

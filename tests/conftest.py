"""
Pytest configuration and shared fixtures for voltakit tests.
"""

import pytest
import tempfile
from pathlib import Path
from typing import Generator

from voltakit.core.layout import VoltaLayout
from voltakit.core.platform import PlatformInfo, clear_platform_cache

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.directories import (
    mock_volta_home,
    mock_volta_home_with_shim,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def linux_x64() -> PlatformInfo:
    return PlatformInfo.from_names("linux", "x64")


@pytest.fixture
def macos_arm64() -> PlatformInfo:
    return PlatformInfo.from_names("macos", "arm64")


@pytest.fixture
def windows_x64() -> PlatformInfo:
    return PlatformInfo.from_names("windows", "x64")


@pytest.fixture
def volta_root(tmp_path) -> Path:
    """Root directory of a test installation (not created)."""
    return tmp_path / ".volta"


@pytest.fixture
def layout(volta_root, linux_x64) -> VoltaLayout:
    """Linux x64 layout rooted in a temporary directory."""
    return VoltaLayout(volta_root, linux_x64)


@pytest.fixture
def isolated_env(monkeypatch):
    """Remove voltakit environment variables for the duration of a test."""
    monkeypatch.delenv("VOLTA_HOME", raising=False)
    monkeypatch.delenv("VOLTA_SHIM", raising=False)
    return monkeypatch


@pytest.fixture
def fresh_platform_cache():
    """Clear cached platform detection before and after a test."""
    clear_platform_cache()
    yield
    clear_platform_cache()

"""
Platform detection for voltakit.

This module maps the host operating system and CPU architecture onto the small,
closed set of platforms for which Node publishes distributions, and provides
the identifiers used in distribution file names (as listed in
https://nodejs.org/dist/index.json).

Supported platforms:
- Operating systems: Linux, macOS, Windows
- Architectures: x86, x64, arm64

Unknown hosts are rejected with UnsupportedPlatformError; an identifier is
never guessed.

Usage:
    from voltakit.core.platform import detect_platform

    platform_info = detect_platform()
    print(platform_info.os_identifier())    # 'linux', 'darwin' or 'win'
    print(platform_info.arch_identifier())  # 'x86', 'x64' or 'arm64'
"""

import functools
import platform
from dataclasses import dataclass
from enum import Enum

from voltakit.core.exceptions import UnsupportedPlatformError


class OperatingSystem(Enum):
    """Operating systems voltakit knows how to lay out."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


class Architecture(Enum):
    """CPU architectures voltakit knows how to lay out."""

    X86 = "x86"
    X64 = "x64"
    ARM64 = "arm64"


# OS component of a Node distribution file name
NODE_OS_IDENTIFIERS = {
    OperatingSystem.LINUX: "linux",
    OperatingSystem.MACOS: "darwin",
    OperatingSystem.WINDOWS: "win",
}

# Architecture component of a Node distribution file name
NODE_ARCH_IDENTIFIERS = {
    Architecture.X86: "x86",
    Architecture.X64: "x64",
    Architecture.ARM64: "arm64",
}

# Host names reported by platform.system() / platform.machine()
_SYSTEM_ALIASES = {
    "linux": OperatingSystem.LINUX,
    "darwin": OperatingSystem.MACOS,
    "windows": OperatingSystem.WINDOWS,
}

_MACHINE_ALIASES = {
    "i386": Architecture.X86,
    "i686": Architecture.X86,
    "x86": Architecture.X86,
    "x86_64": Architecture.X64,
    "amd64": Architecture.X64,
    "x64": Architecture.X64,
    "aarch64": Architecture.ARM64,
    "arm64": Architecture.ARM64,
}


def _check_exhaustive(table: dict, enum_cls) -> None:
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise ImportError(
            f"No node identifier defined for {enum_cls.__name__} "
            f"member(s): {', '.join(missing)}"
        )


_check_exhaustive(NODE_OS_IDENTIFIERS, OperatingSystem)
_check_exhaustive(NODE_ARCH_IDENTIFIERS, Architecture)


@dataclass(frozen=True)
class PlatformInfo:
    """
    A supported (operating system, architecture) pair.

    Attributes:
        os: Operating system
        arch: CPU architecture
    """

    os: OperatingSystem
    arch: Architecture

    @classmethod
    def from_names(cls, os_name: str, arch_name: str) -> "PlatformInfo":
        """
        Build a PlatformInfo from host or canonical names.

        Accepts canonical names ('linux', 'macos', 'windows', 'x64', ...) as
        well as the spellings reported by the platform module ('Darwin',
        'AMD64', 'aarch64', ...).

        Args:
            os_name: Operating system name
            arch_name: Architecture name

        Returns:
            PlatformInfo for the pair

        Raises:
            UnsupportedPlatformError: If either name is not supported

        Example:
            >>> PlatformInfo.from_names("linux", "x86_64").arch_identifier()
            'x64'
        """
        return cls(os=_parse_os(os_name), arch=_parse_arch(arch_name))

    @property
    def is_windows(self) -> bool:
        return self.os is OperatingSystem.WINDOWS

    def os_identifier(self) -> str:
        """OS component of a Node distribution file name."""
        return NODE_OS_IDENTIFIERS[self.os]

    def arch_identifier(self) -> str:
        """Architecture component of a Node distribution file name."""
        return NODE_ARCH_IDENTIFIERS[self.arch]

    def platform_string(self) -> str:
        """
        Get the Node platform string (e.g., 'linux-x64', 'darwin-arm64').

        Example:
            >>> PlatformInfo(OperatingSystem.MACOS, Architecture.ARM64).platform_string()
            'darwin-arm64'
        """
        return f"{self.os_identifier()}-{self.arch_identifier()}"

    def __str__(self) -> str:
        return f"{self.os.value}-{self.arch.value}"


def _parse_os(name: str) -> OperatingSystem:
    key = name.strip().lower()
    for member in OperatingSystem:
        if key == member.value:
            return member
    try:
        return _SYSTEM_ALIASES[key]
    except KeyError:
        raise UnsupportedPlatformError("operating system", name) from None


def _parse_arch(name: str) -> Architecture:
    key = name.strip().lower()
    try:
        return _MACHINE_ALIASES[key]
    except KeyError:
        raise UnsupportedPlatformError("architecture", name) from None


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect the current platform.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo for the host

    Raises:
        UnsupportedPlatformError: If the host OS or architecture is not supported
    """
    return PlatformInfo.from_names(platform.system(), platform.machine())


def get_supported_platforms() -> list[str]:
    """
    Get all supported Node platform strings.

    Returns:
        List of platform strings such as 'linux-x64' or 'win-arm64'
    """
    return [
        PlatformInfo(os_name, arch).platform_string()
        for os_name in OperatingSystem
        for arch in Architecture
    ]


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "OperatingSystem",
    "Architecture",
    "NODE_OS_IDENTIFIERS",
    "NODE_ARCH_IDENTIFIERS",
    "PlatformInfo",
    "detect_platform",
    "get_supported_platforms",
    "clear_platform_cache",
]

"""
Directory layout for a Volta installation.

VoltaLayout is the single naming authority for every artifact voltakit
manages. All methods are pure path construction: nothing is created, checked
or cached, and identical inputs always produce identical paths. Only
default_volta_home() consults the host environment.

Directory Structure (Unix shown; see SPEC_FULL.md for Windows differences):

    ~/.volta/
        cache/                                      cache_dir
            node/                                   node_cache_dir
                index.json                          node_index_file
                index.json.expires                  node_index_expiry_file
        bin/                                        shim_dir
            node                                    shim_file("node")
            npm
            ...
        log/                                        log_dir
        tools/                                      tools_dir
            inventory/                              inventory_dir
                node/                               node_inventory_dir
                    node-v10.13.0-linux-x64.tar.gz  node_distro_file("10.13.0")
                    node-v10.13.0-npm               node_npm_version_file("10.13.0")
                packages/                           package_inventory_dir
                    ember-cli-3.7.1.tgz             package_distro_file("ember-cli", "3.7.1")
                    ember-cli-3.7.1.shasum          package_distro_shasum("ember-cli", "3.7.1")
                yarn/                               yarn_inventory_dir
            image/                                  image_dir
                node/                               node_image_root_dir
                    10.13.0/
                        6.4.0/                      node_image_dir("10.13.0", "6.4.0")
                            bin/                    node_image_bin_dir("10.13.0", "6.4.0")
                yarn/                               yarn_image_root_dir
                    1.7.0/                          yarn_image_dir("1.7.0")
                packages/                           package_image_root_dir
                    ember-cli/
                        3.7.1/                      package_image_dir("ember-cli", "3.7.1")
            user/                                   user_toolchain_dir
                bins/                               user_tool_bin_dir
                    tsc.json                        user_tool_bin_config("tsc")
                packages/                           user_package_dir
                    ember-cli.json                  user_package_config_file("ember-cli")
                platform.json                       user_platform_file
        volta                                       volta_file
        shim                                        default_shim_executable
        hooks.json                                  user_hooks_file
"""

import os
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Dict, List, Optional, Union

from voltakit.core.exceptions import NoHomeDirectoryError
from voltakit.core.platform import PlatformInfo, detect_platform

# Shim locations used by system-wide (package manager) installs
UNIX_FALLBACK_SHIM = PurePosixPath("/usr/bin/volta-lib/shim")
WINDOWS_FALLBACK_SHIM = PureWindowsPath(r"C:\Program Files\Volta\shim.exe")


def default_volta_home(settings=None, platform_info: Optional[PlatformInfo] = None) -> Path:
    """
    Get the root directory of the Volta installation.

    Args:
        settings: Optional Settings; its ``home`` value takes precedence
        platform_info: Platform to compute the default for (detected if None)

    Returns:
        Path: The root directory.
            - ``settings.home`` when set (``VOLTA_HOME``)
            - Windows: %LOCALAPPDATA%\\Volta
            - Linux/macOS: ~/.volta

    Raises:
        NoHomeDirectoryError: If the home directory cannot be determined
    """
    home_override = getattr(settings, "home", None)
    if home_override is not None:
        return Path(home_override)

    if platform_info is None:
        platform_info = detect_platform()

    if platform_info.is_windows:
        local_data = os.environ.get("LOCALAPPDATA")
        if not local_data:
            raise NoHomeDirectoryError("LOCALAPPDATA")
        return Path(local_data) / "Volta"

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        raise NoHomeDirectoryError("HOME") from None
    # expanduser() hands "~" back untouched when no home can be found
    if str(home) in ("", "~"):
        raise NoHomeDirectoryError("HOME")
    return home / ".volta"


class VoltaLayout:
    """
    Path conventions for a Volta root directory.

    Paths keep the flavor of the root they were built from, so a layout over
    a PureWindowsPath yields Windows paths on any host.

    Attributes:
        root: Root directory of the installation
        platform: Platform whose naming conventions are applied
    """

    def __init__(self, root: Union[str, PurePath], platform_info: PlatformInfo):
        if not isinstance(root, PurePath):
            root = Path(root)
        self.root = root
        self.platform = platform_info

    @classmethod
    def from_environment(
        cls, settings=None, platform_info: Optional[PlatformInfo] = None
    ) -> "VoltaLayout":
        """
        Build the layout for the current host.

        Raises:
            UnsupportedPlatformError: If the host platform is not supported
            NoHomeDirectoryError: If the root directory cannot be determined
        """
        if platform_info is None:
            platform_info = detect_platform()
        return cls(default_volta_home(settings, platform_info), platform_info)

    def __repr__(self) -> str:
        return f"VoltaLayout(root={str(self.root)!r}, platform={str(self.platform)!r})"

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def cache_dir(self) -> PurePath:
        return self.root / "cache"

    def shim_dir(self) -> PurePath:
        return self.root / "bin"

    def log_dir(self) -> PurePath:
        return self.root / "log"

    def tools_dir(self) -> PurePath:
        return self.root / "tools"

    def volta_file(self) -> PurePath:
        # reserved marker, nothing reads it yet
        return self.root / "volta"

    def user_hooks_file(self) -> PurePath:
        return self.root / "hooks.json"

    def default_shim_executable(self) -> PurePath:
        name = "shim.exe" if self.platform.is_windows else "shim"
        return self.root / name

    def fallback_shim_executable(self) -> PurePath:
        """Location of the shim executable for system-wide installs."""
        fallback = WINDOWS_FALLBACK_SHIM if self.platform.is_windows else UNIX_FALLBACK_SHIM
        return type(self.root)(fallback)

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def node_cache_dir(self) -> PurePath:
        return self.cache_dir() / "node"

    def node_index_file(self) -> PurePath:
        return self.node_cache_dir() / "index.json"

    def node_index_expiry_file(self) -> PurePath:
        return self.node_cache_dir() / "index.json.expires"

    # ------------------------------------------------------------------
    # Shims
    # ------------------------------------------------------------------

    def shim_file(self, toolname: str) -> PurePath:
        """
        Get the per-command shim file for a tool.

        Args:
            toolname: Command name exactly as the user invokes it

        Returns:
            ``<root>/bin/<toolname>`` (``<toolname>.exe`` on Windows)
        """
        if self.platform.is_windows:
            return self.shim_dir() / f"{toolname}.exe"
        return self.shim_dir() / toolname

    def env_paths(self) -> List[PurePath]:
        """
        Directories to prepend to PATH, highest priority first.

        Returns:
            Ordered list of directories (currently only the shim directory)
        """
        return [self.shim_dir()]

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def inventory_dir(self) -> PurePath:
        return self.tools_dir() / "inventory"

    def node_inventory_dir(self) -> PurePath:
        return self.inventory_dir() / "node"

    def package_inventory_dir(self) -> PurePath:
        return self.inventory_dir() / "packages"

    def yarn_inventory_dir(self) -> PurePath:
        return self.inventory_dir() / "yarn"

    def archive_extension(self) -> str:
        return "zip" if self.platform.is_windows else "tar.gz"

    def node_archive_root_dir_name(self, version: str) -> str:
        """
        Name of the top-level directory inside a Node distribution archive.

        Example:
            >>> layout.node_archive_root_dir_name("10.13.0")
            'node-v10.13.0-linux-x64'
        """
        return f"node-v{version}-{self.platform.platform_string()}"

    def node_distro_file_name(self, version: str) -> str:
        """
        File name of a Node distribution archive, as published on nodejs.org.

        Example:
            >>> layout.node_distro_file_name("10.13.0")
            'node-v10.13.0-linux-x64.tar.gz'
        """
        return f"{self.node_archive_root_dir_name(version)}.{self.archive_extension()}"

    def node_distro_file(self, version: str) -> PurePath:
        return self.node_inventory_dir() / self.node_distro_file_name(version)

    def node_npm_version_file(self, version: str) -> PurePath:
        """File recording the npm version bundled with a Node distribution."""
        return self.node_inventory_dir() / f"node-v{version}-npm"

    def node_archive_npm_package_json_path(self, version: str) -> PurePath:
        """
        Path of npm's package.json, relative to the extraction directory.

        Unix archives nest node_modules under lib/, Windows archives do not.
        """
        root_dir = type(self.root)(self.node_archive_root_dir_name(version))
        if self.platform.is_windows:
            return root_dir / "node_modules" / "npm" / "package.json"
        return root_dir / "lib" / "node_modules" / "npm" / "package.json"

    def yarn_distro_file_name(self, version: str) -> str:
        return f"yarn-v{version}.tar.gz"

    def yarn_distro_file(self, version: str) -> PurePath:
        return self.yarn_inventory_dir() / self.yarn_distro_file_name(version)

    def package_distro_file(self, name: str, version: str) -> PurePath:
        return self.package_inventory_dir() / f"{name}-{version}.tgz"

    def package_distro_shasum(self, name: str, version: str) -> PurePath:
        return self.package_inventory_dir() / f"{name}-{version}.shasum"

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def image_dir(self) -> PurePath:
        return self.tools_dir() / "image"

    def node_image_root_dir(self) -> PurePath:
        return self.image_dir() / "node"

    def node_image_dir(self, node: str, npm: str) -> PurePath:
        """
        Image directory for a Node runtime paired with an npm version.

        Args:
            node: Node runtime version (e.g., '10.13.0')
            npm: npm version installed alongside it (e.g., '6.4.0')

        Returns:
            ``<root>/tools/image/node/<node>/<npm>``
        """
        return self.node_image_root_dir() / node / npm

    def node_image_bin_dir(self, node: str, npm: str) -> PurePath:
        # Windows distributions keep node.exe at the top of the image
        if self.platform.is_windows:
            return self.node_image_dir(node, npm)
        return self.node_image_dir(node, npm) / "bin"

    def yarn_image_root_dir(self) -> PurePath:
        return self.image_dir() / "yarn"

    def yarn_image_dir(self, version: str) -> PurePath:
        return self.yarn_image_root_dir() / version

    def yarn_image_bin_dir(self, version: str) -> PurePath:
        return self.yarn_image_dir(version) / "bin"

    def package_image_root_dir(self) -> PurePath:
        return self.image_dir() / "packages"

    def package_image_dir(self, name: str, version: str) -> PurePath:
        return self.package_image_root_dir() / name / version

    # ------------------------------------------------------------------
    # User toolchain
    # ------------------------------------------------------------------

    def user_toolchain_dir(self) -> PurePath:
        return self.tools_dir() / "user"

    def user_tool_bin_dir(self) -> PurePath:
        return self.user_toolchain_dir() / "bins"

    def user_tool_bin_config(self, bin_name: str) -> PurePath:
        return self.user_tool_bin_dir() / f"{bin_name}.json"

    def user_package_dir(self) -> PurePath:
        return self.user_toolchain_dir() / "packages"

    def user_package_config_file(self, package_name: str) -> PurePath:
        return self.user_package_dir() / f"{package_name}.json"

    def user_platform_file(self) -> PurePath:
        return self.user_toolchain_dir() / "platform.json"

    # ------------------------------------------------------------------

    def as_dict(self) -> Dict[str, PurePath]:
        """
        Get the named fixed locations of this layout.

        Returns:
            Mapping of location name to path, in layout order
        """
        return {
            "root": self.root,
            "cache_dir": self.cache_dir(),
            "node_cache_dir": self.node_cache_dir(),
            "node_index_file": self.node_index_file(),
            "node_index_expiry_file": self.node_index_expiry_file(),
            "shim_dir": self.shim_dir(),
            "log_dir": self.log_dir(),
            "tools_dir": self.tools_dir(),
            "inventory_dir": self.inventory_dir(),
            "node_inventory_dir": self.node_inventory_dir(),
            "package_inventory_dir": self.package_inventory_dir(),
            "yarn_inventory_dir": self.yarn_inventory_dir(),
            "image_dir": self.image_dir(),
            "node_image_root_dir": self.node_image_root_dir(),
            "yarn_image_root_dir": self.yarn_image_root_dir(),
            "package_image_root_dir": self.package_image_root_dir(),
            "user_toolchain_dir": self.user_toolchain_dir(),
            "user_tool_bin_dir": self.user_tool_bin_dir(),
            "user_package_dir": self.user_package_dir(),
            "user_platform_file": self.user_platform_file(),
            "volta_file": self.volta_file(),
            "default_shim_executable": self.default_shim_executable(),
            "user_hooks_file": self.user_hooks_file(),
        }


__all__ = [
    "UNIX_FALLBACK_SHIM",
    "WINDOWS_FALLBACK_SHIM",
    "default_volta_home",
    "VoltaLayout",
]

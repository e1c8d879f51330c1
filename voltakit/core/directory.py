"""
Directory structure management for voltakit.

VoltaLayout only names locations; this module materializes the directory
skeleton an installer expects to find under a fresh root. Files (indexes,
pins, the shim executable) are left to the components that own them.
"""

import logging
from pathlib import Path
from typing import List

from voltakit.core.exceptions import DirectoryCreationError, FilesystemError
from voltakit.core.layout import VoltaLayout

logger = logging.getLogger(__name__)


def layout_directories(layout: VoltaLayout) -> List[Path]:
    """
    List the directories that make up a layout, parents first.

    Args:
        layout: Layout to enumerate

    Returns:
        Directories in creation order
    """
    return [
        Path(p)
        for p in (
            layout.root,
            layout.cache_dir(),
            layout.node_cache_dir(),
            layout.shim_dir(),
            layout.log_dir(),
            layout.tools_dir(),
            layout.inventory_dir(),
            layout.node_inventory_dir(),
            layout.package_inventory_dir(),
            layout.yarn_inventory_dir(),
            layout.image_dir(),
            layout.node_image_root_dir(),
            layout.yarn_image_root_dir(),
            layout.package_image_root_dir(),
            layout.user_toolchain_dir(),
            layout.user_tool_bin_dir(),
            layout.user_package_dir(),
        )
    ]


def verify_directory_writable(path: Path) -> bool:
    """
    Verify that a directory exists and is writable.

    Args:
        path: Directory path to verify.

    Returns:
        bool: True if directory exists and is writable, False otherwise.
    """
    if not path.is_dir():
        return False

    try:
        test_file = path / ".write_test"
        test_file.touch()
        test_file.unlink()
        return True
    except OSError:
        return False


def ensure_volta_home(layout: VoltaLayout) -> Path:
    """
    Create the directory structure of a layout if it doesn't exist.

    Safe to call repeatedly; existing directories are left alone.

    Args:
        layout: Layout whose directories should exist

    Returns:
        Path: The root directory.

    Raises:
        DirectoryCreationError: If a directory cannot be created.
        FilesystemError: If the root is not writable.
    """
    root = Path(layout.root)

    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"Failed to create Volta directory at {root}: {e}"
        ) from e

    if not verify_directory_writable(root):
        raise FilesystemError(
            f"Volta directory at {root} is not writable. "
            "Please check directory permissions."
        )

    for directory in layout_directories(layout)[1:]:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"Failed to create directory {directory}: {e}"
            ) from e

    logger.debug(f"Volta directory structure ready at {root}")
    return root


__all__ = [
    "layout_directories",
    "verify_directory_writable",
    "ensure_volta_home",
]

"""
Shim provisioning.

A shim is a per-command link in ``<root>/bin`` to the shared shim executable.
Putting the shim directory first on PATH routes every managed command through
the dispatcher, which then runs the pinned version.

create_symlink() deliberately refuses to replace existing files, so the
idempotence of shim creation is handled here.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import List, Optional

from voltakit.core.exceptions import BuiltinShimRemovalError, ShimError
from voltakit.core.filesystem import create_symlink, remove_link
from voltakit.core.layout import VoltaLayout
from voltakit.core.shim_resolver import ShimResolver

logger = logging.getLogger(__name__)

# Shims every installation provides
BUILTIN_SHIMS = ("node", "npm", "npx", "yarn")


class ShimResult(Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    DELETED = "deleted"
    DOES_NOT_EXIST = "does_not_exist"


class ShimManager:
    """
    Creates, deletes and lists per-command shims.

    Attributes:
        layout: Layout naming the shim directory and shim files
        resolver: Resolver locating the shim executable shims point at
    """

    def __init__(self, layout: VoltaLayout, resolver: Optional[ShimResolver] = None):
        self.layout = layout
        self.resolver = resolver or ShimResolver(layout)

    def create(self, name: str) -> ShimResult:
        """
        Create the shim for a command.

        Args:
            name: Command name

        Returns:
            ShimResult.CREATED, or ShimResult.ALREADY_EXISTS if a shim is present

        Raises:
            ShimExecutableNotFoundError: If the shim executable cannot be found
            ShimError: If the shim link cannot be created
        """
        shim_file = Path(self.layout.shim_file(name))
        if os.path.lexists(shim_file):
            logger.debug(f"Shim for '{name}' already exists at {shim_file}")
            return ShimResult.ALREADY_EXISTS

        executable = self.resolver.resolve()

        try:
            shim_file.parent.mkdir(parents=True, exist_ok=True)
            create_symlink(executable, shim_file)
        except FileExistsError:
            # another process won the race
            return ShimResult.ALREADY_EXISTS
        except OSError as e:
            raise ShimError(f"Could not create shim for '{name}': {e}") from e

        logger.info(f"Created shim for '{name}'")
        return ShimResult.CREATED

    def delete(self, name: str) -> ShimResult:
        """
        Delete the shim for a command.

        Args:
            name: Command name

        Returns:
            ShimResult.DELETED, or ShimResult.DOES_NOT_EXIST

        Raises:
            BuiltinShimRemovalError: If ``name`` is a built-in shim
            ShimError: If the shim cannot be removed
        """
        if name in BUILTIN_SHIMS:
            raise BuiltinShimRemovalError(name)

        shim_file = Path(self.layout.shim_file(name))
        if not os.path.lexists(shim_file):
            return ShimResult.DOES_NOT_EXIST

        try:
            remove_link(shim_file)
        except (OSError, ValueError) as e:
            raise ShimError(f"Could not remove shim for '{name}': {e}") from e

        logger.info(f"Removed shim for '{name}'")
        return ShimResult.DELETED

    def list(self) -> List[str]:
        """
        List the commands that currently have a shim.

        Returns:
            Sorted command names
        """
        shim_dir = Path(self.layout.shim_dir())
        if not shim_dir.is_dir():
            return []

        names = []
        for entry in shim_dir.iterdir():
            name = entry.name
            if self.layout.platform.is_windows:
                if not name.lower().endswith(".exe"):
                    continue
                name = name[: -len(".exe")]
            names.append(name)
        return sorted(names)

    def ensure_builtin_shims(self) -> List[str]:
        """
        Create any missing built-in shim.

        Returns:
            Names of the shims that were created
        """
        return [
            name for name in BUILTIN_SHIMS if self.create(name) is ShimResult.CREATED
        ]


__all__ = [
    "BUILTIN_SHIMS",
    "ShimResult",
    "ShimManager",
]

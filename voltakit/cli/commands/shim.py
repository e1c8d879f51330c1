"""
Shim command implementation.

Sub-commands: create, delete, list.
"""

import logging

from voltakit.cli.utils import load_context
from voltakit.core.exceptions import ExitCode
from voltakit.toolchain.shims import ShimManager, ShimResult

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the shim command.

    Args:
        args: Parsed command-line arguments with shim_command field

    Returns:
        Exit code (0 for success)
    """
    if not getattr(args, "shim_command", None):
        logger.error("No shim sub-command specified (create, delete, list)")
        return int(ExitCode.INVALID_ARGUMENTS)

    context = load_context(args)
    manager = ShimManager(context.layout, context.resolver)

    if args.shim_command == "create":
        result = manager.create(args.name)
        if result is ShimResult.ALREADY_EXISTS:
            logger.info(f"Shim for '{args.name}' already exists")
    elif args.shim_command == "delete":
        result = manager.delete(args.name)
        if result is ShimResult.DOES_NOT_EXIST:
            logger.info(f"No shim for '{args.name}'")
    else:
        for name in manager.list():
            print(name)

    return 0

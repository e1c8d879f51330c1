"""
Setup command implementation.

Creates the directory structure of the layout and the built-in shims.
"""

import logging

from voltakit.cli.utils import load_context
from voltakit.core.directory import ensure_volta_home
from voltakit.toolchain.shims import ShimManager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the setup command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    context = load_context(args)

    root = ensure_volta_home(context.layout)
    logger.info(f"Volta directory: {root}")

    created = ShimManager(context.layout, context.resolver).ensure_builtin_shims()
    if created:
        logger.info(f"Created shims: {', '.join(created)}")
    else:
        logger.info("All built-in shims already present")

    return 0

"""
Which-shim command implementation.
"""

from voltakit.cli.utils import load_context


def run(args) -> int:
    """
    Print the shim executable that shims dispatch to.

    Returns:
        Exit code (0 for success); resolution failures propagate to the CLI
    """
    context = load_context(args)
    print(context.resolver.resolve())
    return 0

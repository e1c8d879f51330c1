"""
Pin command implementation.

Shows the user's default platform and the pinned packages.
"""

from voltakit.cli.utils import load_context
from voltakit.toolchain.pins import PinStore


def run(args) -> int:
    """
    Run the pin command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    context = load_context(args)
    store = PinStore(context.layout)

    platform = store.load_platform()
    if platform is None:
        print("platform: (none)")
    else:
        print(f"node: {platform.node_runtime}")
        print(f"npm: {platform.npm or '(bundled)'}")
        print(f"yarn: {platform.yarn or '(none)'}")

    packages = store.list_packages()
    if packages:
        print("packages:")
        for name in packages:
            config = store.load_package(name)
            print(f"  {config.name}@{config.version} (node {config.platform.node_runtime})")

    return 0

"""
Entry point for running voltakit CLI as a module.

Usage: python -m voltakit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()

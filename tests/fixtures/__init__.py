"""Test fixtures for voltakit tests.

- directories: Volta directory structures (empty, with a shim executable)

Import fixtures in your tests using:
    from tests.fixtures.directories import mock_volta_home
"""

__all__ = [
    "directories",
]

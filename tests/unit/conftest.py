"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

from tests.conftest import run_cmd

__all__ = ["run_cmd"]

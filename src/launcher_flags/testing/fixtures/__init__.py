"""Testing fixtures – pytest fixtures for flag overrides.

Load them from ``conftest.py``::

    pytest_plugins = ["launcher_flags.testing.fixtures"]
"""
from launcher_flags.testing.fixtures.flags import ReaderOverrides, fake_flag_source, flag_readers

__all__ = ["ReaderOverrides", "fake_flag_source", "flag_readers"]

"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["launcher_flags.testing.fixtures"]
"""

from launcher_flags.testing.fakes import FakeFlagValueSource

__all__ = ["FakeFlagValueSource"]

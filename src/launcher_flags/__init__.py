"""
launcher_flags – typed feature flag registry for the launcher.

Import path convention::

    from launcher_flags.flags import BooleanFlag, FlagRegistry
    from launcher_flags.flags.launcher import launcher_flags
    from launcher_flags.config import BuildConfig
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

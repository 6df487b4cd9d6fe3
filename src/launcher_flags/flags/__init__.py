"""Flags – typed flag definitions, resolution policy, value sources and registry."""
from launcher_flags.flags.flag import BooleanFlag, BuildChannel, Flag, FlagState, IntFlag
from launcher_flags.flags.readers import (
    override_readers,
    reset_readers,
    set_boolean_reader,
    set_int_reader,
)
from launcher_flags.flags.source import (
    DefaultValueSource,
    FlagValueSource,
    InMemoryValueSource,
    ReaderValueSource,
)
from launcher_flags.flags.registry import FlagRegistry
from launcher_flags.flags.factory import FlagDeclaration, FlagFactory, show_flag_toggler_ui

__all__ = [
    "BooleanFlag",
    "BuildChannel",
    "DefaultValueSource",
    "Flag",
    "FlagDeclaration",
    "FlagFactory",
    "FlagRegistry",
    "FlagState",
    "FlagValueSource",
    "InMemoryValueSource",
    "IntFlag",
    "ReaderValueSource",
    "override_readers",
    "reset_readers",
    "set_boolean_reader",
    "set_int_reader",
    "show_flag_toggler_ui",
]

"""Flags – BooleanFlag / IntFlag definitions and declaration-time enums."""
from __future__ import annotations

import dataclasses
import enum

from launcher_flags.flags import readers


class BuildChannel(enum.Enum):
    """Which override pathway applies to a flag."""

    DEBUG = "debug"
    RELEASE = "release"


class FlagState(enum.Enum):
    """Declared default of a boolean flag, resolved per build by the factory."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    TEAMFOOD = "teamfood"  # enabled for the team-food cohort


@dataclasses.dataclass(frozen=True)
class BooleanFlag:
    """An immutable boolean flag.

    ``default_value`` is baked in at construction; :meth:`get` answers through
    the process-wide boolean reader, which returns that default unless a test
    harness replaced it.
    """

    tracking_id: int
    name: str
    default_value: bool
    description: str = ""
    channel: BuildChannel = BuildChannel.DEBUG

    def get(self) -> bool:
        return readers.read_boolean(self)


@dataclasses.dataclass(frozen=True)
class IntFlag:
    """An immutable integer flag, read through the process-wide int reader."""

    tracking_id: int
    name: str
    default_value: int
    description: str = ""
    channel: BuildChannel = BuildChannel.RELEASE

    def get(self) -> int:
        return readers.read_int(self)


Flag = BooleanFlag | IntFlag

__all__ = ["BooleanFlag", "BuildChannel", "Flag", "FlagState", "IntFlag"]

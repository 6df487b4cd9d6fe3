"""Flags – FlagValueSource port and built-in sources."""
from __future__ import annotations

import abc
from typing import Mapping

from launcher_flags.config.settings import coerce_bool, coerce_int
from launcher_flags.flags import readers
from launcher_flags.flags.flag import BooleanFlag, Flag, IntFlag


class FlagValueSource(abc.ABC):
    """Port: answer the current value of a flag.

    Implementations must be total: every flag gets a value, falling back to
    its baked-in default when the source has nothing to say.
    """

    @abc.abstractmethod
    def boolean_value(self, flag: BooleanFlag) -> bool: ...

    @abc.abstractmethod
    def int_value(self, flag: IntFlag) -> int: ...

    def value(self, flag: Flag) -> bool | int:
        if isinstance(flag, BooleanFlag):
            return self.boolean_value(flag)
        return self.int_value(flag)


class DefaultValueSource(FlagValueSource):
    """Answers every flag with its baked-in default."""

    def boolean_value(self, flag: BooleanFlag) -> bool:
        return flag.default_value

    def int_value(self, flag: IntFlag) -> int:
        return flag.default_value


class ReaderValueSource(FlagValueSource):
    """Delegates to the process-wide readers, i.e. behaves like ``flag.get()``."""

    def boolean_value(self, flag: BooleanFlag) -> bool:
        return readers.read_boolean(flag)

    def int_value(self, flag: IntFlag) -> int:
        return readers.read_int(flag)


class InMemoryValueSource(FlagValueSource):
    """Simple in-memory source backed by a ``{name: value}`` dict.

    Names without an entry fall back to the flag's default.  Values may be
    raw strings (``"false"``, ``"42"``) and are coerced on read.

    Raises:
        InvalidSettingValueError: on read, when a stored value cannot be
            coerced to the flag's type.
    """

    def __init__(self, values: Mapping[str, bool | int | str] | None = None) -> None:
        self._values: dict[str, bool | int | str] = dict(values or {})

    def set(self, flag: Flag | str, value: bool | int | str) -> None:
        """Set a value by name or flag instance."""
        self._values[_key(flag)] = value

    def unset(self, flag: Flag | str) -> None:
        self._values.pop(_key(flag), None)

    def boolean_value(self, flag: BooleanFlag) -> bool:
        if flag.name not in self._values:
            return flag.default_value
        return coerce_bool(flag.name, self._values[flag.name], flag=flag.name)

    def int_value(self, flag: IntFlag) -> int:
        if flag.name not in self._values:
            return flag.default_value
        return coerce_int(flag.name, self._values[flag.name], flag=flag.name)


def _key(flag: Flag | str) -> str:
    return flag if isinstance(flag, str) else flag.name


__all__ = [
    "DefaultValueSource",
    "FlagValueSource",
    "InMemoryValueSource",
    "ReaderValueSource",
]

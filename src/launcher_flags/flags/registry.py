"""Flags – FlagRegistry."""
from __future__ import annotations

from typing import Iterable, Iterator

from launcher_flags.flags.flag import BooleanFlag, Flag, IntFlag
from launcher_flags.flags.source import DefaultValueSource, FlagValueSource
from launcher_flags.kernel.errors import DuplicateFlagError, InvalidFlagError, UnknownFlagError
from launcher_flags.observability.logging import get_logger

_log = get_logger(__name__)

_MISSING = object()


class FlagRegistry:
    """An ordered, name-unique set of flag definitions plus a value source.

    Definitions are registered once, usually while the application starts, and
    never change afterwards.  Reads through :meth:`value_of` are answered by
    the registry's :class:`FlagValueSource` (baked-in defaults unless another
    source is supplied); ``flag.get()`` keeps going through the process-wide
    readers.

    Raises:
        InvalidFlagError: a flag with an empty name is registered.
        DuplicateFlagError: a second flag with an already-registered name is
            registered.
    """

    def __init__(
        self,
        flags: Iterable[Flag] = (),
        *,
        source: FlagValueSource | None = None,
    ) -> None:
        self._flags: dict[str, Flag] = {}
        self._source: FlagValueSource = source or DefaultValueSource()
        for flag in flags:
            self.register(flag)

    @property
    def source(self) -> FlagValueSource:
        return self._source

    def register(self, flag: Flag) -> Flag:
        if not isinstance(flag, (BooleanFlag, IntFlag)):
            raise InvalidFlagError(f"Cannot register {type(flag).__name__} as a flag")
        if not flag.name:
            raise InvalidFlagError(
                "Flag name must be non-empty",
                errors=[{"field": "name", "tracking_id": flag.tracking_id}],
            )
        if flag.name in self._flags:
            raise DuplicateFlagError(flag.name, detail={"tracking_id": flag.tracking_id})
        self._flags[flag.name] = flag
        _log.debug("flag_registered", flag=flag.name, tracking_id=flag.tracking_id)
        return flag

    def with_source(self, source: FlagValueSource) -> "FlagRegistry":
        """Return a registry over the same definitions answered by *source*."""
        registry = FlagRegistry(source=source)
        registry._flags = dict(self._flags)
        return registry

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> Flag:
        try:
            return self._flags[name]
        except KeyError:
            raise UnknownFlagError(name) from None

    def get(self, name: str, default: object = None) -> Flag | object:
        return self._flags.get(name, default)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._flags
        name = getattr(item, "name", None)
        return name is not None and self._flags.get(name) == item

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags.values())

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"FlagRegistry(flags={len(self._flags)}, source={type(self._source).__name__})"

    def names(self) -> list[str]:
        return list(self._flags)

    def boolean_flags(self) -> list[BooleanFlag]:
        return [f for f in self._flags.values() if isinstance(f, BooleanFlag)]

    def int_flags(self) -> list[IntFlag]:
        return [f for f in self._flags.values() if isinstance(f, IntFlag)]

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def value_of(self, flag: Flag | str) -> bool | int:
        """Current value of a registered flag (by instance or name)."""
        if isinstance(flag, str):
            flag = self[flag]
        elif not isinstance(flag, (BooleanFlag, IntFlag)):
            raise UnknownFlagError(repr(flag))
        elif self._flags.get(flag.name, _MISSING) != flag:
            raise UnknownFlagError(flag.name)
        return self._source.value(flag)

    def snapshot(self) -> dict[str, bool | int]:
        """``{name: current value}`` for every flag, in registration order."""
        return {name: self._source.value(flag) for name, flag in self._flags.items()}


__all__ = ["FlagRegistry"]

"""Flags – process-wide resolution policy.

One replaceable reader per flag kind answers every :meth:`BooleanFlag.get` /
:meth:`IntFlag.get` call.  Production code never replaces them; test harnesses
do, wholesale, and restore them afterwards.

Replacement is not synchronised: a read racing a replacement may observe
either reader.  Keep replacement in single-threaded setup/teardown.
"""
from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Callable, Iterator

from launcher_flags.observability.logging import get_logger

if TYPE_CHECKING:
    from launcher_flags.flags.flag import BooleanFlag, IntFlag

BooleanReader = Callable[["BooleanFlag"], bool]
IntReader = Callable[["IntFlag"], int]

_log = get_logger(__name__)


def default_boolean_reader(flag: BooleanFlag) -> bool:
    return flag.default_value


def default_int_reader(flag: IntFlag) -> int:
    return flag.default_value


_boolean_reader: BooleanReader = default_boolean_reader
_int_reader: IntReader = default_int_reader


def read_boolean(flag: BooleanFlag) -> bool:
    return _boolean_reader(flag)


def read_int(flag: IntFlag) -> int:
    return _int_reader(flag)


def get_boolean_reader() -> BooleanReader:
    return _boolean_reader


def get_int_reader() -> IntReader:
    return _int_reader


def set_boolean_reader(reader: BooleanReader) -> BooleanReader:
    """Install *reader* for every boolean flag and return the previous one."""
    global _boolean_reader
    if not callable(reader):
        raise TypeError(f"boolean reader must be callable, got {reader!r}")
    previous, _boolean_reader = _boolean_reader, reader
    _log.debug("flag_reader_replaced", kind="boolean", reader=_reader_name(reader))
    return previous


def set_int_reader(reader: IntReader) -> IntReader:
    """Install *reader* for every integer flag and return the previous one."""
    global _int_reader
    if not callable(reader):
        raise TypeError(f"int reader must be callable, got {reader!r}")
    previous, _int_reader = _int_reader, reader
    _log.debug("flag_reader_replaced", kind="int", reader=_reader_name(reader))
    return previous


def reset_readers() -> None:
    """Restore both readers to the baked-in-default behaviour."""
    global _boolean_reader, _int_reader
    _boolean_reader = default_boolean_reader
    _int_reader = default_int_reader
    _log.debug("flag_readers_reset")


def readers_overridden() -> bool:
    return _boolean_reader is not default_boolean_reader or _int_reader is not default_int_reader


@contextlib.contextmanager
def override_readers(
    boolean: BooleanReader | None = None,
    int_: IntReader | None = None,
) -> Iterator[None]:
    """Install the given readers for the duration of the ``with`` block.

    Usage::

        with override_readers(boolean=lambda flag: True):
            assert ENABLE_APP_PAIRS.get() is True
    """
    previous_boolean = set_boolean_reader(boolean) if boolean is not None else None
    try:
        previous_int = set_int_reader(int_) if int_ is not None else None
        try:
            yield
        finally:
            if previous_int is not None:
                set_int_reader(previous_int)
    finally:
        if previous_boolean is not None:
            set_boolean_reader(previous_boolean)


def _reader_name(reader: Callable[..., object]) -> str:
    return getattr(reader, "__qualname__", type(reader).__name__)


__all__ = [
    "BooleanReader",
    "IntReader",
    "default_boolean_reader",
    "default_int_reader",
    "get_boolean_reader",
    "get_int_reader",
    "override_readers",
    "read_boolean",
    "read_int",
    "readers_overridden",
    "reset_readers",
    "set_boolean_reader",
    "set_int_reader",
]

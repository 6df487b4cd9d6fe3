"""Config settings – string coercion shared by env loaders and flag overrides."""
from __future__ import annotations

from typing import Any

from launcher_flags.config.validation import InvalidSettingValueError

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES = frozenset({"0", "false", "no", "off", ""})


def coerce_bool(name: str, value: Any, *, flag: str | None = None) -> bool:
    """Interpret *value* as a boolean; strings use the usual env spellings.

    *name* is the key the value was read under and *flag* the flag it is
    meant for, both reported on :class:`InvalidSettingValueError`.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in TRUTHY_VALUES:
        return True
    if text in FALSY_VALUES:
        return False
    raise InvalidSettingValueError(name, value, "expected a boolean", flag=flag)


def coerce_int(name: str, value: Any, *, flag: str | None = None) -> int:
    """Interpret *value* as an integer."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise InvalidSettingValueError(name, value, "expected an integer", flag=flag) from exc


__all__ = ["FALSY_VALUES", "TRUTHY_VALUES", "coerce_bool", "coerce_int"]

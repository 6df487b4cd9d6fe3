"""Config validation errors: unusable build settings and flag overrides."""
from __future__ import annotations

from typing import Any

from launcher_flags.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Build configuration or flag override input could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A build setting or flag override holds a value that cannot be used.

    *setting_name* is the key the value was read under: an environment
    variable (``LAUNCHER_IS_DEBUG_DEVICE``), a :class:`BuildConfig` field, or
    a flag name for overrides.  When the value was meant for a flag, *flag*
    names it; the launcher loader adds the ``env_key`` it came from.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: Any,
        reason: str,
        *,
        flag: str | None = None,
    ) -> None:
        detail: dict[str, Any] = {"setting": setting_name, "value": value}
        if flag is not None:
            detail["flag"] = flag
        super().__init__(f"Cannot use {value!r} for '{setting_name}': {reason}", detail=detail)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.flag = flag


__all__ = ["ConfigError", "InvalidSettingValueError"]

"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from launcher_flags.config.settings.base import Settings
from launcher_flags.config.settings.coercion import coerce_bool, coerce_int
from launcher_flags.config.validation import ConfigError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    The variable name is ``<PREFIX>_<FIELD>`` upper-cased, e.g.
    ``LAUNCHER_IS_DEBUG_DEVICE``.  Pass *environ* to read from a mapping
    other than :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Coerced ``{field: value}`` for the variables that are set.

        Raises:
            InvalidSettingValueError: a variable cannot be coerced to its
                field's type.
        """
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = self.env_key(settings_class, field.name)
            raw = environ.get(env_key)
            if raw is not None:
                values[field.name] = self._coerce(env_key, raw, field.type)
        return values

    def load(self, settings_class: type[T]) -> T:
        kwargs = self.read(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name in kwargs:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                env_key = self.env_key(settings_class, field.name)
                raise ConfigError(
                    f"Required setting '{env_key}' is missing", detail={"setting": env_key}
                )

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "").upper()
        return f"{prefix}_{field_name}".upper().lstrip("_")

    def _coerce(self, name: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return coerce_bool(name, value)
        if type_hint is int or type_hint == "int":
            return coerce_int(name, value)
        if type_hint is float or type_hint == "float":
            return float(value)
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]

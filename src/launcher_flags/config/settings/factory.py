"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from launcher_flags.config.settings.base import Settings
from launcher_flags.config.settings.loaders import SettingsLoader
from launcher_flags.config.validation.errors import ConfigError
from launcher_flags.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader that raises :class:`ConfigError` is skipped (and logged) so the
    remaining loaders may still contribute values; when every loader fails
    the first error is raised instead of falling back to defaults.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~launcher_flags.config.settings.base.Settings`
            subclass to construct.
        loaders:
            Ordered sequence of loaders.  Later loaders win on field
            conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        InvalidSettingValueError
            When the merged values fail the settings' own validation, or
            when every loader failed on a bad value.
        ConfigError
            When a required field is absent, or on any other construction
            failure.
        """
        merged: dict[str, Any] = {}
        failures: list[ConfigError] = []

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                _log.warning(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    error=exc.to_dict(),
                )
                failures.append(exc)
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if failures and len(failures) == len(loaders or []):
            raise failures[0]

        if overrides:
            merged.update(overrides)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc
            ) from exc


__all__ = ["SettingsFactory"]

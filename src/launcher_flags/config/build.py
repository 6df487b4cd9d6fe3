"""Config – BuildConfig, the build-variant inputs every flag default depends on."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Mapping

from launcher_flags.config.settings import EnvSettingsLoader, Settings
from launcher_flags.config.validation import ConfigError, InvalidSettingValueError


@dataclasses.dataclass
class BuildConfig(Settings):
    """Build-variant metadata supplied by the surrounding build system.

    ``is_release_build`` decides team-food defaults: a ``TEAMFOOD`` flag is
    enabled on every build that is not a release build.
    ``is_debug_device`` gates developer overrides and the toggle UI.
    """

    _prefix: ClassVar[str] = "LAUNCHER"

    is_debug_device: bool = False
    is_release_build: bool = True
    is_studio_build: bool = False
    qsb_on_first_screen: bool = True

    def _validate(self) -> None:
        if self.is_studio_build and self.is_release_build:
            raise InvalidSettingValueError(
                "is_studio_build", self.is_studio_build,
                "a studio build cannot also be a release build",
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: bool) -> "BuildConfig":
        """Build from ``LAUNCHER_*`` environment variables plus explicit overrides.

        Raises:
            InvalidSettingValueError: a variable is not a boolean, or the
                merged values describe an impossible build.
            ConfigError: *overrides* names a field that does not exist.
        """
        values = EnvSettingsLoader(environ).read(cls)
        values.update(overrides)
        try:
            return cls(**values)
        except TypeError as exc:
            raise ConfigError(f"Unknown BuildConfig setting: {exc}", cause=exc) from exc


__all__ = ["BuildConfig"]

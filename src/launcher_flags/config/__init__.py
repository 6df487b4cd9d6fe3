"""Config – build configuration, settings loaders and flag overrides."""

from launcher_flags.config.build import BuildConfig
from launcher_flags.config.overrides import EnvFlagOverrideLoader
from launcher_flags.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from launcher_flags.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "BuildConfig",
    "ConfigError",
    "EnvFlagOverrideLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]

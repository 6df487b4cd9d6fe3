"""Config settings – 12-factor env-based configuration."""
from launcher_flags.config.settings.base import Settings
from launcher_flags.config.settings.coercion import coerce_bool, coerce_int
from launcher_flags.config.settings.factory import SettingsFactory
from launcher_flags.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "coerce_bool",
    "coerce_int",
]

"""Flags – FlagFactory: turns declarations into flags for one build.

This is the configuration-assembly step that sits outside the registry:
a :class:`FlagState` is resolved into a plain boolean default here, once,
and the resulting flags carry only that boolean.

Override pathways by channel:

* ``DEBUG`` flags take developer overrides (the persisted toggles behind the
  developer options screen), but only on a debug device.
* ``RELEASE`` flags and integer flags take remote overrides (server-pushed
  configuration).  Developer overrides never reach them.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from launcher_flags.config import BuildConfig
from launcher_flags.config.settings import coerce_bool, coerce_int
from launcher_flags.flags.flag import BooleanFlag, BuildChannel, FlagState, IntFlag
from launcher_flags.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FlagDeclaration:
    """A boolean flag as written in a flag table, before build resolution."""

    tracking_id: int
    name: str
    state: FlagState
    description: str = ""
    channel: BuildChannel = BuildChannel.DEBUG


def show_flag_toggler_ui(config: BuildConfig, developer_options_enabled: bool) -> bool:
    """Whether the developer flag toggle screen should be offered at all."""
    return config.is_debug_device and developer_options_enabled


class FlagFactory:
    """Build :class:`BooleanFlag` / :class:`IntFlag` instances for *config*.

    Override mappings are keyed by flag name; values may be typed or raw
    strings (as read from the environment) and are coerced per flag type.
    """

    def __init__(
        self,
        config: BuildConfig,
        *,
        developer_overrides: Mapping[str, Any] | None = None,
        remote_overrides: Mapping[str, Any] | None = None,
    ) -> None:
        self._config = config
        self._developer_overrides = dict(developer_overrides or {})
        self._remote_overrides = dict(remote_overrides or {})
        self._debug_flags: list[BooleanFlag] = []

    @property
    def config(self) -> BuildConfig:
        return self._config

    @property
    def debug_flags(self) -> list[BooleanFlag]:
        """Debug flags built so far, in creation order (for the toggle UI)."""
        return list(self._debug_flags)

    def enabled_value(self, state: FlagState) -> bool:
        if state is FlagState.ENABLED:
            return True
        if state is FlagState.TEAMFOOD:
            return not self._config.is_release_build
        return False

    def create(self, declaration: FlagDeclaration) -> BooleanFlag:
        """Build the flag for *declaration* through its channel's pathway."""
        if declaration.channel is BuildChannel.RELEASE:
            return self.release_flag(
                declaration.tracking_id, declaration.name, declaration.state, declaration.description
            )
        return self.debug_flag(
            declaration.tracking_id, declaration.name, declaration.state, declaration.description
        )

    def debug_flag(
        self, tracking_id: int, name: str, state: FlagState, description: str = ""
    ) -> BooleanFlag:
        default = self.enabled_value(state)
        if name in self._developer_overrides:
            if self._config.is_debug_device:
                default = coerce_bool(name, self._developer_overrides[name], flag=name)
                _log.debug("flag_override_applied", flag=name, source="developer", value=default)
            else:
                _log.info("flag_override_ignored", flag=name, reason="not a debug device")
        flag = BooleanFlag(tracking_id, name, default, description, BuildChannel.DEBUG)
        self._debug_flags.append(flag)
        return flag

    def release_flag(
        self, tracking_id: int, name: str, state: FlagState, description: str = ""
    ) -> BooleanFlag:
        default = self.enabled_value(state)
        if name in self._remote_overrides:
            default = coerce_bool(name, self._remote_overrides[name], flag=name)
            _log.debug("flag_override_applied", flag=name, source="remote", value=default)
        elif name in self._developer_overrides:
            _log.info("flag_override_ignored", flag=name, reason="release flag")
        return BooleanFlag(tracking_id, name, default, description, BuildChannel.RELEASE)

    def int_flag(
        self, tracking_id: int, name: str, default: int, description: str = ""
    ) -> IntFlag:
        value = default
        if name in self._remote_overrides:
            value = coerce_int(name, self._remote_overrides[name], flag=name)
            _log.debug("flag_override_applied", flag=name, source="remote", value=value)
        return IntFlag(tracking_id, name, value, description, BuildChannel.RELEASE)


__all__ = ["FlagDeclaration", "FlagFactory", "show_flag_toggler_ui"]

"""Unit tests for FlagFactory and the toggle-UI predicate."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from launcher_flags.config import BuildConfig, InvalidSettingValueError
from launcher_flags.flags import (
    BuildChannel,
    FlagDeclaration,
    FlagFactory,
    FlagState,
    show_flag_toggler_ui,
)

RELEASE = BuildConfig()
TEAMFOOD_DEVICE = BuildConfig(is_debug_device=True, is_release_build=False)


# ---------------------------------------------------------------------------
# FlagState resolution
# ---------------------------------------------------------------------------


class TestEnabledValue:
    @pytest.mark.parametrize(
        ("config", "state", "expected"),
        [
            (RELEASE, FlagState.ENABLED, True),
            (RELEASE, FlagState.DISABLED, False),
            (RELEASE, FlagState.TEAMFOOD, False),
            (TEAMFOOD_DEVICE, FlagState.ENABLED, True),
            (TEAMFOOD_DEVICE, FlagState.DISABLED, False),
            (TEAMFOOD_DEVICE, FlagState.TEAMFOOD, True),
        ],
    )
    def test_state_to_default(self, config: BuildConfig, state: FlagState, expected: bool) -> None:
        assert FlagFactory(config).enabled_value(state) is expected


# ---------------------------------------------------------------------------
# Debug flags
# ---------------------------------------------------------------------------


class TestDebugFlag:
    def test_builds_debug_channel_flag(self) -> None:
        flag = FlagFactory(RELEASE).debug_flag(1, "F", FlagState.ENABLED, "desc")
        assert flag.tracking_id == 1
        assert flag.name == "F"
        assert flag.default_value is True
        assert flag.description == "desc"
        assert flag.channel is BuildChannel.DEBUG
        assert flag.get() is True

    def test_developer_override_applies_on_debug_device(self) -> None:
        factory = FlagFactory(TEAMFOOD_DEVICE, developer_overrides={"F": "false"})
        assert factory.debug_flag(1, "F", FlagState.ENABLED).default_value is False

    def test_developer_override_ignored_off_debug_device(self) -> None:
        factory = FlagFactory(RELEASE, developer_overrides={"F": True})
        with capture_logs() as logs:
            flag = factory.debug_flag(1, "F", FlagState.DISABLED)
        assert flag.default_value is False
        assert logs[0]["event"] == "flag_override_ignored"

    def test_bad_override_value_raises(self) -> None:
        factory = FlagFactory(TEAMFOOD_DEVICE, developer_overrides={"F": "perhaps"})
        with pytest.raises(InvalidSettingValueError):
            factory.debug_flag(1, "F", FlagState.ENABLED)

    def test_debug_flags_recorded_in_order(self) -> None:
        factory = FlagFactory(RELEASE)
        a = factory.debug_flag(1, "A", FlagState.ENABLED)
        factory.release_flag(2, "R", FlagState.ENABLED)
        b = factory.debug_flag(3, "B", FlagState.DISABLED)
        assert factory.debug_flags == [a, b]


# ---------------------------------------------------------------------------
# Release and int flags
# ---------------------------------------------------------------------------


class TestReleaseFlag:
    def test_builds_release_channel_flag(self) -> None:
        flag = FlagFactory(RELEASE).release_flag(1, "R", FlagState.ENABLED)
        assert flag.channel is BuildChannel.RELEASE
        assert flag.default_value is True

    def test_remote_override_applies(self) -> None:
        factory = FlagFactory(RELEASE, remote_overrides={"R": "1"})
        with capture_logs() as logs:
            flag = factory.release_flag(1, "R", FlagState.DISABLED)
        assert flag.default_value is True
        assert logs[0]["event"] == "flag_override_applied"
        assert logs[0]["source"] == "remote"

    def test_developer_override_never_applies(self) -> None:
        factory = FlagFactory(TEAMFOOD_DEVICE, developer_overrides={"R": True})
        assert factory.release_flag(1, "R", FlagState.DISABLED).default_value is False


class TestIntFlag:
    def test_default(self) -> None:
        flag = FlagFactory(RELEASE).int_flag(1, "N1", 3, "count")
        assert flag.default_value == 3
        assert flag.get() == 3
        assert flag.channel is BuildChannel.RELEASE

    def test_remote_override(self) -> None:
        factory = FlagFactory(RELEASE, remote_overrides={"N1": "7"})
        assert factory.int_flag(1, "N1", 3).get() == 7

    def test_bad_remote_override(self) -> None:
        factory = FlagFactory(RELEASE, remote_overrides={"N1": "seven"})
        with pytest.raises(InvalidSettingValueError):
            factory.int_flag(1, "N1", 3)


# ---------------------------------------------------------------------------
# Declarations and toggle UI
# ---------------------------------------------------------------------------


class TestCreate:
    def test_routes_by_channel(self) -> None:
        factory = FlagFactory(TEAMFOOD_DEVICE, developer_overrides={"D": False, "R": False})
        debug = factory.create(FlagDeclaration(1, "D", FlagState.ENABLED))
        release = factory.create(
            FlagDeclaration(2, "R", FlagState.ENABLED, "", BuildChannel.RELEASE)
        )
        assert debug.default_value is False
        assert release.default_value is True
        assert factory.debug_flags == [debug]


class TestShowFlagTogglerUi:
    @pytest.mark.parametrize(
        ("debug_device", "developer_options", "expected"),
        [(True, True, True), (True, False, False), (False, True, False), (False, False, False)],
    )
    def test_requires_debug_device_and_developer_options(
        self, debug_device: bool, developer_options: bool, expected: bool
    ) -> None:
        config = BuildConfig(is_debug_device=debug_device)
        assert show_flag_toggler_ui(config, developer_options) is expected

"""Flags – the launcher's flag table.

Every flag the launcher reads is declared here with a default state.  To add
one, append a ``_debug`` (developer-toggleable) or ``_release``
(remote-configurable) entry with a unique name; the default applies to
debug builds.

Call sites read flags through the process-wide registry::

    from launcher_flags.flags.launcher import launcher_flags

    if launcher_flags().ENABLE_DEVICE_SEARCH.get():
        ...
"""
from __future__ import annotations

import functools
from typing import Iterator, Mapping

from launcher_flags.config import BuildConfig, EnvFlagOverrideLoader, InvalidSettingValueError
from launcher_flags.flags.factory import FlagDeclaration, FlagFactory
from launcher_flags.flags.flag import BuildChannel, Flag, FlagState
from launcher_flags.flags.registry import FlagRegistry
from launcher_flags.flags.source import FlagValueSource
from launcher_flags.observability.logging import get_logger

ENABLED = FlagState.ENABLED
DISABLED = FlagState.DISABLED
TEAMFOOD = FlagState.TEAMFOOD

FLAGS_PREF_NAME = "featureFlags"

_log = get_logger(__name__)


def _debug(tracking_id: int, name: str, state: FlagState, description: str) -> FlagDeclaration:
    return FlagDeclaration(tracking_id, name, state, description, BuildChannel.DEBUG)


def _release(tracking_id: int, name: str, state: FlagState, description: str) -> FlagDeclaration:
    return FlagDeclaration(tracking_id, name, state, description, BuildChannel.RELEASE)


DECLARATIONS: tuple[FlagDeclaration, ...] = (
    _debug(
        270390028, "ENABLE_INPUT_CONSUMER_REASON_LOGGING", ENABLED,
        "Log the reason why an Input Consumer was selected for a gesture.",
    ),
    _debug(
        270389990, "ENABLE_GESTURE_ERROR_DETECTION", ENABLED,
        "Analyze gesture events and log detected errors",
    ),
    _debug(270390012, "PROMISE_APPS_IN_ALL_APPS", DISABLED, "Add promise icon in all-apps"),
    _debug(
        270390904, "KEYGUARD_ANIMATION", DISABLED,
        "Enable animation for keyguard going away on wallpaper",
    ),
    _release(270390907, "ENABLE_DEVICE_SEARCH", ENABLED, "Allows on device search in all apps"),
    _release(
        270390286, "ENABLE_FLOATING_SEARCH_BAR", DISABLED,
        "Keep All Apps search bar at the bottom (but above keyboard if open)",
    ),
    _release(
        270390930, "ENABLE_HIDE_HEADER", ENABLED,
        "Hide header on keyboard before typing in all apps",
    ),
    _debug(
        270390779, "ENABLE_EXPANDING_PAUSE_WORK_BUTTON", DISABLED,
        "Expand and collapse pause work button while scrolling",
    ),
    _release(
        270391455, "COLLECT_SEARCH_HISTORY", DISABLED,
        "Allow launcher to collect search history for log",
    ),
    _debug(
        270390937, "ENABLE_TWOLINE_ALLAPPS", DISABLED,
        "Enables two line label inside all apps.",
    ),
    _debug(
        201388851, "ENABLE_TWOLINE_DEVICESEARCH", TEAMFOOD,
        "Enable two line label for icons with labels on device search.",
    ),
    _release(
        270391397, "ENABLE_DEVICE_SEARCH_PERFORMANCE_LOGGING", DISABLED,
        "Allows on device search in all apps logging",
    ),
    _debug(270391693, "IME_STICKY_SNACKBAR_EDU", ENABLED, "Show sticky IME edu in AllApps"),
    _debug(
        270391653, "ENABLE_PEOPLE_TILE_PREVIEW", DISABLED,
        "Experimental: Shows conversation shortcuts on home screen as search results",
    ),
    _debug(
        270391638, "FOLDER_NAME_MAJORITY_RANKING", ENABLED,
        "Suggests folder names based on majority based ranking.",
    ),
    _release(
        270391706, "INJECT_FALLBACK_APP_CORPUS_RESULTS", DISABLED,
        "Inject fallback app corpus result when AiAi fails to return it.",
    ),
    _debug(
        270391641, "ASSISTANT_GIVES_LAUNCHER_FOCUS", DISABLED,
        "Allow Launcher to handle nav bar gestures while Assistant is running over it",
    ),
    _debug(
        270392203, "ENABLE_BULK_WORKSPACE_ICON_LOADING", ENABLED,
        "Enable loading workspace icons in bulk.",
    ),
    _debug(
        270392465, "ENABLE_BULK_ALL_APPS_ICON_LOADING", ENABLED,
        "Enable loading all apps icons in bulk.",
    ),
    _debug(
        270392706, "ENABLE_DATABASE_RESTORE", DISABLED,
        "Enable database restore when new restore session is created",
    ),
    _debug(
        270391664, "ENABLE_SMARTSPACE_DISMISS", ENABLED,
        "Adds a menu option to dismiss the current Enhanced Smartspace card.",
    ),
    _debug(
        270392629, "ENABLE_OVERLAY_CONNECTION_OPTIM", DISABLED,
        "Enable optimizing overlay service connection",
    ),
    _debug(
        270391669, "ENABLE_REGION_SAMPLING", DISABLED,
        "Enable region sampling to determine color of text on screen.",
    ),
    _debug(
        270393096, "ALWAYS_USE_HARDWARE_OPTIMIZATION_FOR_FOLDER_ANIMATIONS", DISABLED,
        "Always use hardware optimization for folder animations.",
    ),
    _debug(
        270392980, "SEPARATE_RECENTS_ACTIVITY", DISABLED,
        "Uses a separate recents activity instead of using the integrated recents+Launcher UI",
    ),
    _debug(
        270392984, "ENABLE_MINIMAL_DEVICE", DISABLED,
        "Allow user to toggle minimal device mode in launcher.",
    ),
    _debug(
        270392477, "ENABLE_TASKBAR_POPUP_MENU", ENABLED,
        "Enables long pressing taskbar icons to show the popup menu.",
    ),
    _debug(
        270392643, "ENABLE_TWO_PANEL_HOME", ENABLED,
        "Uses two panel on home screen. Only applicable on large screen devices.",
    ),
    _debug(
        270393276, "ENABLE_SCRIM_FOR_APP_LAUNCH", DISABLED,
        "Enables scrim during app launch animation.",
    ),
    _release(
        270393258, "ENABLE_ENFORCED_ROUNDED_CORNERS", ENABLED,
        "Enforce rounded corners on all App Widgets",
    ),
    _debug(
        270393108, "NOTIFY_CRASHES", DISABLED,
        "Sends a notification whenever launcher encounters an uncaught exception.",
    ),
    _debug(
        270393604, "ENABLE_WALLPAPER_SCRIM", DISABLED,
        "Enables scrim over wallpaper for text protection.",
    ),
    _debug(
        270393268, "WIDGETS_IN_LAUNCHER_PREVIEW", ENABLED,
        "Enables widgets in Launcher preview for the Wallpaper app.",
    ),
    _debug(
        270393112, "QUICK_WALLPAPER_PICKER", ENABLED,
        "Shows quick wallpaper picker in long-press menu",
    ),
    _debug(
        270393426, "ENABLE_BACK_SWIPE_HOME_ANIMATION", ENABLED,
        "Enables home animation to icon when user swipes back.",
    ),
    _debug(
        270614790, "ENABLE_BACK_SWIPE_LAUNCHER_ANIMATION", DISABLED,
        "Enables predictive back animation from all apps and widgets to home",
    ),
    _debug(
        270393294, "ENABLE_ICON_LABEL_AUTO_SCALING", ENABLED,
        "Enables scaling/spacing for icon labels to make more characters visible",
    ),
    _debug(
        270393897, "ENABLE_ALL_APPS_BUTTON_IN_HOTSEAT", DISABLED,
        "Enables displaying the all apps button in the hotseat.",
    ),
    _debug(
        270393900, "ENABLE_ALL_APPS_SEARCH_IN_TASKBAR", DISABLED,
        "Enables Search box in Taskbar All Apps.",
    ),
    _debug(
        270393906, "ENABLE_SPLIT_FROM_WORKSPACE", ENABLED,
        "Enable initiating split screen from workspace.",
    ),
    _debug(
        270394122, "ENABLE_SPLIT_FROM_FULLSCREEN_SHORTCUT", ENABLED,
        "Enable splitting from fullscreen app with keyboard shortcuts",
    ),
    _debug(
        270393453, "ENABLE_SPLIT_FROM_WORKSPACE_TO_WORKSPACE", DISABLED,
        "Enable initiating split screen from workspace to workspace.",
    ),
    _debug(
        270393455, "ENABLE_NEW_MIGRATION_LOGIC", ENABLED,
        "Enable the new grid migration logic, keeping pages when src < dest",
    ),
    _debug(
        270394384, "ENABLE_WIDGET_HOST_IN_BACKGROUND", ENABLED,
        "Enable background widget updates listening for widget holder",
    ),
    _release(270394223, "ENABLE_ONE_SEARCH_MOTION", ENABLED, "Enables animations in OneSearch."),
    _release(
        270394041, "ENABLE_SEARCH_RESULT_BACKGROUND_DRAWABLES", DISABLED,
        "Enable option to replace decorator-based search result backgrounds with drawables",
    ),
    _release(
        270394392, "ENABLE_SEARCH_RESULT_LAUNCH_TRANSITION", DISABLED,
        "Enable option to launch search results using the new view container transitions",
    ),
    _release(
        270394468, "ENABLE_SHOW_KEYBOARD_OPTION_IN_ALL_APPS", ENABLED,
        "Enable option to show keyboard when going to all-apps",
    ),
    _debug(
        270394973, "USE_LOCAL_ICON_OVERRIDES", ENABLED,
        "Use inbuilt monochrome icons if app doesn't provide one",
    ),
    _debug(
        270394476, "ENABLE_DISMISS_PREDICTION_UNDO", DISABLED,
        "Show an 'Undo' snackbar when users dismiss a predicted hotseat item",
    ),
    _debug(
        270395008, "ENABLE_CACHED_WIDGET", ENABLED,
        "Show previously cached widgets as opposed to deferred widget where available",
    ),
    _debug(
        270395010, "USE_SEARCH_REQUEST_TIMEOUT_OVERRIDES", DISABLED,
        "Use local overrides for search request timeout",
    ),
    _debug(270395171, "CONTINUOUS_VIEW_TREE_CAPTURE", ENABLED, "Capture View tree every frame"),
    _debug(
        270395140, "SECONDARY_DRAG_N_DROP_TO_PIN", DISABLED,
        "Enable dragging and dropping to pin apps within secondary display",
    ),
    _debug(
        270395070, "FOLDABLE_WORKSPACE_REORDER", DISABLED,
        "In foldables, when reordering the icons and widgets, is now going to use both sides",
    ),
    _debug(
        270395073, "ENABLE_MULTI_DISPLAY_PARTIAL_DEPTH", DISABLED,
        "Allow bottom sheet depth to be smaller than 1 for multi-display devices.",
    ),
    _release(
        270395177, "SCROLL_TOP_TO_RESET", ENABLED,
        "Bring up IME and focus on input when scroll to top if 'Always show keyboard' is"
        " enabled or in prefix state",
    ),
    _debug(270395516, "ENABLE_MATERIAL_U_POPUP", ENABLED, "Switch popup UX to use material U"),
    _release(
        270395269, "ENABLE_SEARCH_UNINSTALLED_APPS", DISABLED,
        "Search uninstalled app results.",
    ),
    _debug(270395183, "SHOW_HOME_GARDENING", DISABLED, "Show the new home gardening mode"),
    _debug(
        270395133, "HOME_GARDENING_WORKSPACE_BUTTONS", DISABLED,
        "Change workspace edit buttons to reflect home gardening",
    ),
    _release(
        270395134, "ENABLE_DOWNLOAD_APP_UX_V2", ENABLED,
        "Updates the download app UX to have better visuals",
    ),
    _debug(
        270395186, "ENABLE_DOWNLOAD_APP_UX_V3", DISABLED,
        "Updates the download app UX to have better visuals, improve contrast, and color",
    ),
    _debug(
        270395077, "FORCE_PERSISTENT_TASKBAR", DISABLED,
        "Forces taskbar to be persistent, even in gesture nav mode and when transient"
        " taskbar is enabled.",
    ),
    _debug(270395274, "FOLDABLE_SINGLE_PAGE", ENABLED, "Use a single page for the workspace"),
    _debug(270395798, "ENABLE_TRANSIENT_TASKBAR", ENABLED, "Enables transient taskbar."),
    _debug(271010401, "ENABLE_TRACKPAD_GESTURE", ENABLED, "Enables trackpad gesture."),
    _debug(270395143, "ENABLE_ICON_IN_TEXT_HEADER", DISABLED, "Show icon in textheader"),
    _debug(
        270395087, "ENABLE_APP_ICON_IN_INLINE_SHORTCUTS", DISABLED,
        "Show app icon for inline shortcut",
    ),
    _debug(270395278, "SHOW_DOT_PAGINATION", ENABLED, "Enable showing dot pagination in workspace"),
    _debug(
        270395809, "LARGE_SCREEN_WIDGET_PICKER", ENABLED,
        "Enable new widget picker that takes advantage of large screen format",
    ),
    _debug(
        270709220, "MULTI_SELECT_EDIT_MODE", DISABLED,
        "Enable new multi-select edit mode for home screen",
    ),
    _debug(
        270396257, "ENABLE_NEW_GESTURE_NAV_TUTORIAL", ENABLED,
        "Enable the redesigned gesture navigation tutorial",
    ),
    _debug(
        270395567, "ENABLE_LAUNCH_FROM_STAGED_APP", ENABLED,
        "Enable the ability to tap a staged app during split select to launch it in full"
        " screen",
    ),
    _debug(
        270396358, "ENABLE_PREMIUM_HAPTICS_ALL_APPS", DISABLED,
        "Enables haptics opening/closing All apps",
    ),
    _debug(
        270396209, "ENABLE_FORCED_MONO_ICON", DISABLED,
        "Enable the ability to generate monochromatic icons, if it is not provided by the app",
    ),
    _debug(
        270396268, "ENABLE_TASKBAR_EDU_TOOLTIP", ENABLED,
        "Enable the tooltip version of the Taskbar education flow.",
    ),
    _debug(
        270396680, "ENABLE_MULTI_INSTANCE", DISABLED,
        "Enables creation and filtering of multiple task instances in overview",
    ),
    _debug(
        270396583, "ENABLE_TASKBAR_PINNING", DISABLED,
        "Enables taskbar pinning to allow user to switch between transient and persistent"
        " taskbar flavors",
    ),
    _debug(
        251502424, "ENABLE_WORKSPACE_LOADING_OPTIMIZATION", DISABLED,
        "load the current workspace screen visible to the user before the rest rather"
        " than loading all of them at once.",
    ),
    _debug(
        270397206, "ENABLE_GRID_ONLY_OVERVIEW", DISABLED,
        "Enable a grid-only overview without a focused task.",
    ),
    _debug(
        270397209, "RECEIVE_UNFOLD_EVENTS_FROM_SYSUI", ENABLED,
        "Enables receiving unfold animation events from sysui instead of calculating them"
        " in launcher process using hinge sensor values.",
    ),
    _debug(270396844, "ENABLE_KEYBOARD_QUICK_SWITCH", ENABLED, "Enables keyboard quick switching"),
    _debug(
        266177840, "ENABLE_APP_CLONING_CHANGES_IN_LAUNCHER", DISABLED,
        "Removes clone apps from the work profile tab.",
    ),
    _debug(
        274189428, "ENABLE_APP_PAIRS", DISABLED,
        "Enables the ability to create and save app pairs on the Home screen for easy"
        " split screen launching.",
    ),
)


class LauncherFlags:
    """Attribute-style view over a registry: ``flags.ENABLE_APP_PAIRS.get()``."""

    def __init__(self, registry: FlagRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> FlagRegistry:
        return self._registry

    def __getattr__(self, name: str) -> Flag:
        if name.startswith("_"):
            raise AttributeError(name)
        flag = self._registry.get(name)
        if flag is None:
            raise AttributeError(f"No launcher flag named {name!r}")
        return flag  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._registry.names()))


def build_launcher_registry(
    factory: FlagFactory | None = None,
    *,
    source: FlagValueSource | None = None,
) -> FlagRegistry:
    """Resolve every declaration through *factory* into a new registry."""
    factory = factory or FlagFactory(BuildConfig())
    registry = FlagRegistry(source=source)
    for declaration in DECLARATIONS:
        registry.register(factory.create(declaration))
    _log.info(
        "launcher_flags_built",
        flags=len(registry),
        debug_device=factory.config.is_debug_device,
        release_build=factory.config.is_release_build,
    )
    return registry


def load_launcher_flags(environ: Mapping[str, str] | None = None) -> LauncherFlags:
    """Build the launcher flags from ``LAUNCHER_*`` environment variables.

    ``LAUNCHER_FLAG_<NAME>`` variables act as developer overrides.  A value
    that is not a boolean raises :class:`InvalidSettingValueError` whose
    ``detail`` names both the flag and the ``env_key`` it was read from.
    """
    config = BuildConfig.from_env(environ)
    loader = EnvFlagOverrideLoader()
    factory = FlagFactory(config, developer_overrides=loader.load(environ))
    try:
        registry = build_launcher_registry(factory)
    except InvalidSettingValueError as exc:
        if exc.flag is not None:
            exc.with_detail(env_key=f"{loader.prefix}{exc.flag}")
        raise
    return LauncherFlags(registry)


@functools.cache
def launcher_flags() -> LauncherFlags:
    """Process-wide launcher flags, built from the environment on first use."""
    return load_launcher_flags()


__all__ = [
    "DECLARATIONS",
    "FLAGS_PREF_NAME",
    "LauncherFlags",
    "build_launcher_registry",
    "launcher_flags",
    "load_launcher_flags",
]

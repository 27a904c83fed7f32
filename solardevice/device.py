"""
Device information facade for games running inside a Corona/Solar2D host.

Every raw value comes from a :class:`~solardevice.host.HostInfo` provider.
The predicates here are thin compositions over those values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from .gpu import will_gpu_have_issues_with_captures
from .host import HostInfo, get_host
from .platforms import (
    DESKTOP_PLATFORMS,
    LEANBACK_LAUNCHER,
    OSX_ARCHITECTURES,
    WINDOWS_ARCHITECTURES,
    Environment,
    InfoKey,
    Platform,
)
from .steam import library_exists, steam_library_path

logger = logging.getLogger(__name__)

KINDLE_MODELS = ("Kindle Fire", "WFJWI")
AMAZON_TV_MODEL = "AFTB"


def has_leanback_category(launch_arguments: Optional[Mapping[str, Any]]) -> bool:
    """Check the launch intent categories for the Android TV launcher."""
    if not launch_arguments:
        return False
    intent = launch_arguments.get("androidIntent")
    if not isinstance(intent, Mapping):
        return False
    categories = intent.get("categories")
    if not isinstance(categories, (list, tuple)):
        return False
    return any(c == LEANBACK_LAUNCHER for c in categories)


@dataclass(frozen=True)
class DeviceProfile:
    platform: Optional[str]
    environment: Optional[str]
    architecture: Optional[str]
    model: Optional[str]
    target_store: Optional[str]
    api_level: Optional[str]
    gpu_renderer: Optional[str]
    is_real: bool
    is_simulator: bool
    is_web: bool
    is_ios: bool
    is_android: bool
    is_osx: bool
    is_windows: bool
    is_linux: bool
    is_nintendo_switch: bool
    is_console: bool
    is_desktop: bool
    is_mobile: bool
    is_ipad: bool
    is_kindle: bool
    is_apple_tv: bool
    is_amazon_tv: bool
    is_android_tv: bool
    is_tv: bool
    is_steam: bool
    architecture_is_osx: bool
    architecture_is_windows: bool
    gpu_capture_issues: Optional[bool]


class Device:
    """
    Platform, environment and hardware identification for the running game.

    Example:
        >>> device = Device(StaticHost({"platform": "ios", "model": "iPad"}))
        >>> device.is_mobile(), device.is_ipad()
        (True, True)

    Args:
        host: Info provider. Defaults to the process-wide host.
        launch_arguments: Launch-time arguments passed by the engine, used
            to spot Android TV launches.
        params: Caller options, kept as given.
        capture_denylist: Extra GPU renderer names to treat as problematic.
    """

    def __init__(
        self,
        host: Optional[HostInfo] = None,
        launch_arguments: Optional[Mapping[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        capture_denylist: Iterable[str] = (),
    ):
        self.host = host if host is not None else get_host()
        self.params: Dict[str, Any] = params or {}
        self.launch_arguments = launch_arguments
        self.capture_denylist = tuple(capture_denylist)
        self._launched_on_android_tv = has_leanback_category(launch_arguments)

    # ------------------------------------------------------------------
    # Raw host values
    # ------------------------------------------------------------------

    def get_platform(self) -> Optional[str]:
        """Get the platform tag, e.g. 'macos', 'win32', 'android' or 'ios'."""
        return self.host.get_info(InfoKey.PLATFORM)

    def get_environment(self) -> Optional[str]:
        """Get the environment name, usually 'device' or 'simulator'."""
        return self.host.get_info(InfoKey.ENVIRONMENT)

    def get_architecture(self) -> Optional[str]:
        return self.host.get_info(InfoKey.ARCHITECTURE)

    def get_model(self) -> Optional[str]:
        return self.host.get_info(InfoKey.MODEL)

    def get_target_store(self) -> Optional[str]:
        """Get the name of the store the app was built for."""
        return self.host.get_info(InfoKey.TARGET_APP_STORE)

    def get_api_level(self) -> Optional[str]:
        """Get the Android API level."""
        return self.host.get_info(InfoKey.ANDROID_API_LEVEL)

    def get_gpu_renderer(self) -> Optional[str]:
        return self.host.get_info(InfoKey.GL_RENDERER)

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    def is_real(self) -> bool:
        """Running on a physical device."""
        return self.get_environment() == Environment.DEVICE

    def is_simulator(self) -> bool:
        return self.get_environment() == Environment.SIMULATOR

    def is_web(self) -> bool:
        """Running in a browser."""
        return (
            self.get_platform() == Platform.WEB
            or self.get_environment() == Environment.BROWSER
        )

    # ------------------------------------------------------------------
    # Platforms
    # ------------------------------------------------------------------

    def is_ios(self) -> bool:
        return self.get_platform() == Platform.IOS

    def is_android(self) -> bool:
        return (self.get_platform() or "").lower() == Platform.ANDROID

    def is_osx(self) -> bool:
        return self.get_platform() == Platform.OSX

    def is_windows(self) -> bool:
        return self.get_platform() == Platform.WINDOWS

    def is_linux(self) -> bool:
        return self.get_platform() == Platform.LINUX

    def is_nintendo_switch(self) -> bool:
        return self.get_platform() == Platform.SWITCH

    def is_console(self) -> bool:
        return self.is_nintendo_switch()

    def is_desktop(self) -> bool:
        return (
            self.get_model() == "Desktop"
            or self.is_osx()
            or self.is_windows()
            or self.is_linux()
        )

    def is_mobile(self) -> bool:
        return self.is_ios() or self.is_android()

    # ------------------------------------------------------------------
    # Models
    # ------------------------------------------------------------------

    def is_ipad(self) -> bool:
        return self.get_model() == "iPad"

    def is_kindle(self) -> bool:
        """Amazon Kindle, matched by model name or the 'KF' model prefix."""
        model = self.get_model() or ""
        return model in KINDLE_MODELS or model.startswith("KF")

    # ------------------------------------------------------------------
    # TV
    # ------------------------------------------------------------------

    def is_apple_tv(self) -> bool:
        return self.get_platform() == Platform.APPLE_TV

    def is_amazon_tv(self) -> bool:
        return self.get_model() == AMAZON_TV_MODEL

    def is_android_tv(self) -> bool:
        """Launched from the Android TV leanback launcher on a real device."""
        return self.is_real() and self._launched_on_android_tv

    def is_tv(self) -> bool:
        return self.is_apple_tv() or self.is_amazon_tv() or self.is_android_tv()

    # ------------------------------------------------------------------
    # Store and hardware
    # ------------------------------------------------------------------

    def is_steam(self) -> bool:
        """
        Check whether the game was shipped through Steam.

        Looks for the Steamworks library relative to the resource
        directory.  Non-desktop platforms answer ``False`` without
        touching the filesystem.  A relocated library gives a false
        negative.
        """
        platform = self.get_platform()
        if platform not in DESKTOP_PLATFORMS:
            return False
        path = steam_library_path(
            platform, self.host.resource_directory(), self.host.path_separator
        )
        if path is None:
            logger.debug("No resource directory for platform %s", platform)
            return False
        return library_exists(path)

    def architecture_is_osx(self) -> bool:
        return self.get_architecture() in OSX_ARCHITECTURES

    def architecture_is_windows(self) -> bool:
        return self.get_architecture() in WINDOWS_ARCHITECTURES

    def will_gpu_have_issues_with_captures(self) -> Optional[bool]:
        """
        Check if the GPU is known to be problematic with display captures.

        Returns:
            ``True`` for a denylisted renderer, ``None`` when nothing is known.
        """
        return will_gpu_have_issues_with_captures(
            self.get_gpu_renderer(), extra=self.capture_denylist
        )

    def profile(self) -> DeviceProfile:
        """Collect every raw value and predicate."""
        return DeviceProfile(
            platform=self.get_platform(),
            environment=self.get_environment(),
            architecture=self.get_architecture(),
            model=self.get_model(),
            target_store=self.get_target_store(),
            api_level=self.get_api_level(),
            gpu_renderer=self.get_gpu_renderer(),
            is_real=self.is_real(),
            is_simulator=self.is_simulator(),
            is_web=self.is_web(),
            is_ios=self.is_ios(),
            is_android=self.is_android(),
            is_osx=self.is_osx(),
            is_windows=self.is_windows(),
            is_linux=self.is_linux(),
            is_nintendo_switch=self.is_nintendo_switch(),
            is_console=self.is_console(),
            is_desktop=self.is_desktop(),
            is_mobile=self.is_mobile(),
            is_ipad=self.is_ipad(),
            is_kindle=self.is_kindle(),
            is_apple_tv=self.is_apple_tv(),
            is_amazon_tv=self.is_amazon_tv(),
            is_android_tv=self.is_android_tv(),
            is_tv=self.is_tv(),
            is_steam=self.is_steam(),
            architecture_is_osx=self.architecture_is_osx(),
            architecture_is_windows=self.architecture_is_windows(),
            gpu_capture_issues=self.will_gpu_have_issues_with_captures(),
        )

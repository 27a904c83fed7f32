"""Platform, environment and store constants reported by the host engine."""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    OSX = "macos"
    WINDOWS = "win32"
    LINUX = "linux"
    ANDROID = "android"
    IOS = "ios"
    APPLE_TV = "tvos"
    WINDOWS_PHONE = "winphone"
    WEB = "html5"
    SWITCH = "nx64"


class Environment(str, Enum):
    DEVICE = "device"
    SIMULATOR = "simulator"
    BROWSER = "browser"


class TargetStore(str, Enum):
    APPLE = "apple"
    GOOGLE = "google"
    AMAZON = "amazon"
    SAMSUNG = "samsung"
    NOOK = "nook"
    NONE = "none"


class InfoKey(str, Enum):
    """Keys understood by the host's ``getInfo`` lookup."""

    PLATFORM = "platform"
    ENVIRONMENT = "environment"
    ARCHITECTURE = "architectureInfo"
    MODEL = "model"
    TARGET_APP_STORE = "targetAppStore"
    ANDROID_API_LEVEL = "androidApiLevel"
    GL_RENDERER = "GL_RENDERER"


DESKTOP_PLATFORMS: frozenset[str] = frozenset(
    p.value for p in (Platform.OSX, Platform.WINDOWS, Platform.LINUX)
)

# Architecture tags as reported by the engine on each desktop OS
OSX_ARCHITECTURES: frozenset[str] = frozenset({"i386", "x86_64", "ppc", "ppc64"})
WINDOWS_ARCHITECTURES: frozenset[str] = frozenset({"x86", "x64", "IA64", "ARM"})

LEANBACK_LAUNCHER = "android.intent.category.LEANBACK_LAUNCHER"

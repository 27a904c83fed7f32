"""Host info answered from the running Python interpreter.

Used when no engine is present, e.g. from the command line.  Keys the
interpreter cannot answer (GPU renderer, Android API level) yield ``None``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys

from ..platforms import DESKTOP_PLATFORMS, Environment, InfoKey, Platform, TargetStore
from ._base import HostInfo, Key, key_name

logger = logging.getLogger(__name__)


def _platform_tag() -> str | None:
    if sys.platform == "darwin":
        return Platform.OSX.value
    if sys.platform.startswith("win"):
        return Platform.WINDOWS.value
    if sys.platform.startswith("linux"):
        return Platform.LINUX.value
    if sys.platform == "emscripten":
        return Platform.WEB.value
    return None


class LocalHost(HostInfo):
    def __init__(self) -> None:
        self.path_separator = os.sep

    @property
    def name(self) -> str:
        return "local"

    def get_info(self, key: Key) -> str | None:
        key = key_name(key)
        if key == InfoKey.PLATFORM.value:
            return _platform_tag()
        if key == InfoKey.ENVIRONMENT.value:
            return Environment.SIMULATOR.value
        if key == InfoKey.ARCHITECTURE.value:
            return platform.machine() or None
        if key == InfoKey.MODEL.value:
            return "Desktop" if _platform_tag() in DESKTOP_PLATFORMS else None
        if key == InfoKey.TARGET_APP_STORE.value:
            return TargetStore.NONE.value
        logger.debug("local host has no value for %r", key)
        return None

    def resource_directory(self) -> str | None:
        return os.path.dirname(sys.executable) or None

"""Steam runtime detection.

A Steam build ships the Steamworks shared library next to the game
executable.  The engine only exposes its resource directory, so the
expected library location is derived from that.
"""

from __future__ import annotations

import logging
from typing import Optional

from .platforms import Platform

logger = logging.getLogger(__name__)

# (directories to climb from the resource dir, path parts to append)
_LIBRARY_LAYOUT: dict[str, tuple[int, tuple[str, ...]]] = {
    Platform.OSX.value: (2, ("Plugins", "libsteam_api.dylib")),
    Platform.WINDOWS.value: (1, ("steam_api.dll",)),
    Platform.LINUX.value: (1, ("libsteam_api.so",)),
}


def move_up_one_dir(path: str, sep: str) -> str:
    """Strip the last path component, keeping *path* if it has no separator."""
    head, found, _ = path.rpartition(sep)
    return head if found else path


def steam_library_path(
    platform: Optional[str], resource_dir: Optional[str], sep: str
) -> Optional[str]:
    """Return where the Steam library should live, or ``None`` if not applicable."""
    layout = _LIBRARY_LAYOUT.get(platform or "")
    if layout is None or not resource_dir:
        return None
    levels, parts = layout
    path = resource_dir
    for _ in range(levels):
        path = move_up_one_dir(path, sep)
    return sep.join((path, *parts))


def library_exists(path: str) -> bool:
    """Probe *path* by opening it for reading."""
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        logger.debug("Steam library not found at %s: %s", path, exc)
        return False
    logger.debug("Steam library found at %s", path)
    return True

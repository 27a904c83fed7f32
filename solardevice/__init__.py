"""
solardevice: platform, environment and hardware identification for games
running inside a Corona/Solar2D host engine.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .device import Device, DeviceProfile
from .gpu import CAPTURE_DENYLIST, will_gpu_have_issues_with_captures
from .host import (
    HostInfo,
    HostInfoError,
    LocalHost,
    StaticHost,
    get_host,
    reset_host,
    set_host,
)
from .platforms import Environment, InfoKey, Platform, TargetStore

__all__ = [
    "CAPTURE_DENYLIST",
    "Device",
    "DeviceProfile",
    "Environment",
    "HostInfo",
    "HostInfoError",
    "InfoKey",
    "LocalHost",
    "Platform",
    "StaticHost",
    "TargetStore",
    "get_host",
    "reset_host",
    "set_host",
    "will_gpu_have_issues_with_captures",
]

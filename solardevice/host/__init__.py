"""Host engine info providers.

A provider stands in for the engine's ``system.getInfo`` API and its
resource directory resolver, so the device facade can be driven by the
real engine, a recorded snapshot, or the local interpreter.
"""

from __future__ import annotations

from ._base import HostInfo, HostInfoError, get_host, reset_host, set_host
from ._local import LocalHost
from ._static import StaticHost

__all__ = [
    "HostInfo",
    "HostInfoError",
    "LocalHost",
    "StaticHost",
    "get_host",
    "reset_host",
    "set_host",
]

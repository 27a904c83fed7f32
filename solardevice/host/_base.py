"""Abstract host info provider and the process-wide default."""

from __future__ import annotations

import abc
import logging
import os
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)

Key = Union[str, Enum]


class HostInfoError(RuntimeError):
    """Raised when a host info source cannot be read."""


def key_name(key: Key) -> str:
    """Return the raw lookup string for *key*."""
    if isinstance(key, Enum):
        return str(key.value)
    return key


class HostInfo(abc.ABC):
    """Base class for host engine info providers.

    Mirrors the engine's ``system.getInfo`` lookup plus its resource
    directory resolver.  Values are returned as the host reports them and
    are never validated.
    """

    path_separator: str = os.sep

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    def get_info(self, key: Key) -> str | None: ...

    @abc.abstractmethod
    def resource_directory(self) -> str | None: ...


_host: HostInfo | None = None


def get_host() -> HostInfo:
    global _host
    if _host is None:
        from ._local import LocalHost

        _host = LocalHost()
        logger.debug("Using %s host info provider", _host.name)
    return _host


def set_host(host: HostInfo) -> None:
    global _host
    _host = host


def reset_host() -> None:
    global _host
    _host = None

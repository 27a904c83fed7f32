"""Dict-backed host info provider used for snapshots and tests."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ._base import HostInfo, HostInfoError, Key, key_name

logger = logging.getLogger(__name__)


def _info_value(value: Any) -> str | None:
    # Engines report numeric values such as the Android API level as numbers
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise HostInfoError("snapshot 'info' values must be strings")


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise HostInfoError(f"snapshot '{key}' must be a string")
    return value


class StaticHost(HostInfo):
    """Answers ``get_info`` from a fixed mapping.

    Example:
        >>> host = StaticHost({"platform": "ios", "environment": "device"})
        >>> host.get_info("platform")
        'ios'
    """

    def __init__(
        self,
        values: Mapping[Key, Any] | None = None,
        resource_dir: str | None = None,
        path_separator: str = os.sep,
        launch_arguments: Mapping[str, Any] | None = None,
    ) -> None:
        self._values = MappingProxyType(
            {key_name(k): v for k, v in (values or {}).items()}
        )
        self._resource_dir = resource_dir
        self.path_separator = path_separator or os.sep
        self.launch_arguments = launch_arguments

    @property
    def name(self) -> str:
        return "static"

    @property
    def values(self) -> Mapping[str, Any]:
        return self._values

    def get_info(self, key: Key) -> str | None:
        return self._values.get(key_name(key))

    def resource_directory(self) -> str | None:
        return self._resource_dir

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StaticHost:
        """Build a host from a snapshot mapping.

        Expected shape::

            {
                "info": {"platform": "android", "model": "AFTB", ...},
                "resource_directory": "/path/to/Resources",
                "path_separator": "/",
                "launch_arguments": {"androidIntent": {"categories": [...]}}
            }
        """
        info = data.get("info", {})
        if not isinstance(info, dict):
            raise HostInfoError("snapshot 'info' must be an object")
        info = {key: _info_value(value) for key, value in info.items()}
        launch_arguments = data.get("launch_arguments")
        if launch_arguments is not None and not isinstance(launch_arguments, dict):
            raise HostInfoError("snapshot 'launch_arguments' must be an object")
        return cls(
            info,
            resource_dir=_optional_str(data, "resource_directory"),
            path_separator=_optional_str(data, "path_separator") or os.sep,
            launch_arguments=launch_arguments,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> StaticHost:
        """Load a JSON snapshot written by ``solardevice info --json`` or by hand."""
        path = Path(path)
        try:
            data = json.loads(path.read_text())
        except OSError as exc:
            raise HostInfoError(f"cannot read snapshot {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise HostInfoError(f"invalid JSON in snapshot {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise HostInfoError(f"snapshot {path} must contain a JSON object")
        logger.debug("Loaded host snapshot from %s", path)
        return cls.from_dict(data)

"""Local configuration for solardevice.

Stored as JSON at ``~/.solardevice/config.json`` (or ``$SOLARDEVICE_CONFIG``).

Recognised keys:

- ``capture_denylist``: extra GPU renderer names that break captures
- ``snapshot``: default host snapshot used by the CLI
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _config_path() -> Path:
    env_path = os.environ.get("SOLARDEVICE_CONFIG", "")
    if env_path:
        return Path(env_path)
    return Path.home() / ".solardevice" / "config.json"


def load_config() -> dict[str, Any]:
    """Load the local config, returning ``{}`` when missing or unreadable."""
    path = _config_path()
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
            return {}
        if isinstance(data, dict):
            return data
        logger.warning("Ignoring config %s: expected a JSON object", path)
    return {}


def save_config(config: dict[str, Any]) -> None:
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2) + "\n")
    path.chmod(0o600)


def get_extra_denylist() -> tuple[str, ...]:
    entries = load_config().get("capture_denylist", [])
    if not isinstance(entries, list):
        return ()
    return tuple(str(e) for e in entries)


def get_snapshot_path() -> Optional[str]:
    """Read the snapshot path from ``SOLARDEVICE_SNAPSHOT`` or the config."""
    env_path = os.environ.get("SOLARDEVICE_SNAPSHOT", "")
    if env_path:
        return env_path
    return load_config().get("snapshot") or None

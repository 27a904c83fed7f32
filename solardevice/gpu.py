"""GPUs known to misbehave with ``display.capture`` calls."""

from __future__ import annotations

from typing import Iterable, Optional

CAPTURE_DENYLIST: tuple[str, ...] = (
    "Radeon RX560",
    "Intel UHD Graphics 630",
    "Intel(R) UHD Graphics 630",
    "Nvidia GeForce GTX 750 Ti",
    "Nvidia GeForce GTX 965m",
    "Nvidia GeForce GTX 1060",
    "Nvidia GeForce GTX 1650",
    "Nvidia GeForce GTX 1650 with Max-Q Design",
    "Nvidia GeForce GTX 2060",
    "Nvidia GeForce RTX 2070 SUPER",
    "GeForce RTX 2080 Ti/PCIe/SSE2",
)


def will_gpu_have_issues_with_captures(
    renderer: Optional[str], extra: Iterable[str] = ()
) -> Optional[bool]:
    """Check *renderer* against the capture denylist.

    Names must match exactly.  Returns ``True`` for a listed renderer and
    ``None`` otherwise: an unlisted GPU is not known to be safe.
    """
    for gpu in (*CAPTURE_DENYLIST, *extra):
        if gpu == renderer:
            return True
    return None

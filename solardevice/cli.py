"""
solardevice command-line interface.

Usage::

    solardevice info
    solardevice info --snapshot android-tv.json --json
    solardevice check is-steam
    solardevice check gpu-capture-issues --snapshot desktop.json
    solardevice denylist
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from typing import Optional

import click

from . import __version__

logger = logging.getLogger(__name__)

# CLI name -> Device method
PREDICATES: dict[str, str] = {
    "is-real": "is_real",
    "is-simulator": "is_simulator",
    "is-web": "is_web",
    "is-ios": "is_ios",
    "is-android": "is_android",
    "is-osx": "is_osx",
    "is-windows": "is_windows",
    "is-linux": "is_linux",
    "is-nintendo-switch": "is_nintendo_switch",
    "is-console": "is_console",
    "is-desktop": "is_desktop",
    "is-mobile": "is_mobile",
    "is-ipad": "is_ipad",
    "is-kindle": "is_kindle",
    "is-apple-tv": "is_apple_tv",
    "is-amazon-tv": "is_amazon_tv",
    "is-android-tv": "is_android_tv",
    "is-tv": "is_tv",
    "is-steam": "is_steam",
    "architecture-is-osx": "architecture_is_osx",
    "architecture-is-windows": "architecture_is_windows",
    "gpu-capture-issues": "will_gpu_have_issues_with_captures",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_device(snapshot: Optional[str]):  # type: ignore[no-untyped-def]
    """Build a Device from a snapshot file, the config, or the local host."""
    from .config import get_extra_denylist, get_snapshot_path
    from .device import Device
    from .host import HostInfoError, StaticHost, get_host

    path = snapshot or get_snapshot_path()
    try:
        if path:
            host = StaticHost.from_file(path)
            return Device(
                host,
                launch_arguments=host.launch_arguments,
                capture_denylist=get_extra_denylist(),
            )
        return Device(get_host(), capture_denylist=get_extra_denylist())
    except HostInfoError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="solardevice")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """solardevice: platform and hardware identification for Solar2D games."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s [%(name)s] %(message)s"
        )


snapshot_option = click.option(
    "--snapshot",
    "-s",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON host snapshot to read instead of the local machine.",
)


@main.command()
@snapshot_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def info(snapshot: Optional[str], as_json: bool) -> None:
    """Show raw host values and derived predicates.

    The JSON output can be fed back in with ``--snapshot``.
    """
    from .platforms import InfoKey

    device = _load_device(snapshot)
    profile = device.profile()

    if as_json:
        click.echo(
            json.dumps(
                {
                    "info": {k.value: device.host.get_info(k) for k in InfoKey},
                    "resource_directory": device.host.resource_directory(),
                    "path_separator": device.host.path_separator,
                    "launch_arguments": device.launch_arguments,
                    "profile": dataclasses.asdict(profile),
                },
                indent=2,
            )
        )
        return

    click.secho(f"\n  Device ({device.host.name} host)\n", bold=True)
    for field in dataclasses.fields(profile):
        value = getattr(profile, field.name)
        label = field.name.replace("_", " ")
        if value is True:
            click.secho(f"    {label}: yes", fg="green")
        elif value is False:
            click.echo(f"    {label}: no")
        elif value is None:
            click.secho(f"    {label}: unknown", fg="yellow")
        else:
            click.echo(f"    {label}: {value}")
    click.echo()


@main.command()
@click.argument("predicate", type=click.Choice(sorted(PREDICATES)))
@snapshot_option
def check(predicate: str, snapshot: Optional[str]) -> None:
    """Evaluate one predicate.

    Exits 0 when true, 1 when false and 2 when there is no definite answer.
    """
    device = _load_device(snapshot)
    result = getattr(device, PREDICATES[predicate])()
    logger.debug("%s -> %r", predicate, result)
    if result is None:
        click.echo("unknown")
        sys.exit(2)
    click.echo("yes" if result else "no")
    sys.exit(0 if result else 1)


@main.command()
def denylist() -> None:
    """List GPU renderers known to break display captures."""
    from .config import get_extra_denylist
    from .gpu import CAPTURE_DENYLIST

    for name in CAPTURE_DENYLIST:
        click.echo(name)
    for name in get_extra_denylist():
        click.echo(f"{name} (config)")


if __name__ == "__main__":
    main()

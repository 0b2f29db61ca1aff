"""Default-route discovery through the ``ip`` command."""

from __future__ import annotations

import shutil
import subprocess

COMMAND_IP = "ip"


class CommandError(RuntimeError):
    """An external command could not be found or exited with an error."""


def exec_command(command: str, *args: str) -> str:
    """Run ``command`` with ``args`` and return its standard output."""
    bin_path = shutil.which(command)
    if bin_path is None:
        raise CommandError(f'exec: "{command}": executable file not found in $PATH')
    result = subprocess.run(
        [bin_path, *args], capture_output=True, text=True, check=False
    )
    if result.returncode != 0:
        raise CommandError(
            f"exit status {result.returncode}. details: {result.stderr}"
        )
    return result.stdout


def exec_ip(*args: str) -> str:
    """Run ``ip`` with the given arguments."""
    return exec_command(COMMAND_IP, *args)


def exec_ip_route(*args: str) -> str:
    """Run ``ip route``."""
    return exec_ip("route", *args)


def exec_ip_neigh(*args: str) -> str:
    """Run ``ip neigh``."""
    return exec_ip("neigh", *args)


def get_default_route_ip() -> str:
    """Return the gateway address of the default route."""
    for line in exec_ip_route().split("\n"):
        if "default" not in line:
            continue
        fields = line.split(" ")
        if len(fields) >= 3:
            return fields[2]
    raise LookupError("could not obtain IP address for default route")


def get_default_route_mac() -> str:
    """Return the link-layer address of the default route's gateway."""
    gateway = get_default_route_ip()
    for line in exec_ip_neigh().split("\n"):
        if gateway not in line or "lladdr" not in line:
            continue
        fields = line.split(" ")
        if len(fields) >= 5 and fields[3] == "lladdr":
            return fields[4]
    raise LookupError("could not obtain MAC address for default route")
"""Helpers for machine provider IDs, UUIDs and network status."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

PROVIDER_ID_PREFIX = "elf://"

_UUID_BODY = r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}"

PROVIDER_ID_PATTERN = re.compile(
    re.escape(PROVIDER_ID_PREFIX) + "(" + _UUID_BODY + ")",
    re.IGNORECASE | re.ASCII,
)
UUID_PATTERN = re.compile(_UUID_BODY, re.IGNORECASE | re.ASCII)

MACHINE_CONTROL_PLANE_LABEL = "cluster.x-k8s.io/control-plane"

_IGNORED_IP_PREFIXES = ("169.254.", "172.17.0")
_LOOPBACK_IP = "127.0.0.1"


class NoMachineIPAddrError(LookupError):
    """No valid IP addresses were found for a machine."""

    def __init__(self, message: str = "no IP addresses found for machine") -> None:
        super().__init__(message)


@dataclass
class NetworkStatus:
    """Addresses reported for one network device of a machine."""

    network_index: int = 0
    ip_addrs: list[str] = field(default_factory=list)


def convert_provider_id_to_uuid(provider_id: str | None) -> str:
    """Extract the UUID from an ``elf://`` provider ID, or return ""."""
    if not provider_id:
        return ""
    match = PROVIDER_ID_PATTERN.fullmatch(provider_id)
    return match.group(1) if match else ""


def convert_uuid_to_provider_id(uuid: str) -> str:
    """Build a provider ID from a UUID, or return "" if it is not a UUID."""
    if not is_uuid(uuid):
        return ""
    return PROVIDER_ID_PREFIX + uuid


def is_uuid(uuid: str) -> bool:
    """Return True if the string is a UUID in its canonical textual form."""
    if not uuid:
        return False
    return UUID_PATTERN.fullmatch(uuid) is not None


def get_network_status(ips: str) -> list[NetworkStatus]:
    """Turn a comma-separated address list into network statuses.

    Loopback, link-local and docker bridge addresses are left out; each
    kept address keeps its position in the list as its network index.
    """
    if not ips:
        return []
    return [
        NetworkStatus(network_index=index, ip_addrs=[ip])
        for index, ip in enumerate(ips.split(","))
        if ip != _LOOPBACK_IP and not ip.startswith(_IGNORED_IP_PREFIXES)
    ]


def is_control_plane_machine(labels: Mapping[str, str] | None) -> bool:
    """Return True if the labels mark the resource as a control-plane member."""
    return labels is not None and MACHINE_CONTROL_PLANE_LABEL in labels
"""Conversions of sizes and counts into the values the Tower API expects."""

from __future__ import annotations

_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def tower_int32(value: int) -> int:
    """Return the value as a signed 32-bit integer."""
    return _to_int32(int(value))


def tower_float64(value: int) -> float:
    """Return the value as a float."""
    return float(value)


def tower_cpu(cpu: int) -> int:
    """Return a CPU count as a signed 32-bit integer."""
    return _to_int32(int(cpu))


def tower_memory(memory_mib: int) -> float:
    """Convert mebibytes to bytes."""
    return float(memory_mib) * _MIB


def tower_disk(disk_gib: int) -> float:
    """Convert gibibytes to bytes."""
    return float(_to_int32(int(disk_gib))) * _GIB
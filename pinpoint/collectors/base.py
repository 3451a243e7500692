"""
Neighbor Provider Contract
===========================

A neighbor provider answers one question: which (BSSID, PIN) pairs were
observed near a target BSSID?

Contract for ``neighbors(bssid)``:
    - only BSSIDs sharing the target's upper 24 bits (same OUI block),
    - distinct (BSSID, PIN) pairs,
    - ordered by ascending ``|bssid - target|`` over the full 48 bits,
      ties broken by BSSID then PIN,
    - at most ``limit`` rows (1000 by default).
"""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, runtime_checkable

from pinpoint.core.codec import bssid_to_int, format_bssid, int_to_bssid

DEFAULT_NEIGHBOR_LIMIT = 1000

OUI_MASK = 0xFFFFFF000000
NIC_MASK = 0x000000FFFFFF


class DatasetError(Exception):
    """Raised when observations cannot be read from their source."""


@runtime_checkable
class NeighborProvider(Protocol):
    """Anything that can list observations near a BSSID."""

    def neighbors(self, bssid: str) -> Iterable[tuple[str, int]]:
        ...


def block_range(bssid: str) -> tuple[int, int]:
    """Inclusive integer range of the target's 24-bit OUI block."""
    value = bssid_to_int(format_bssid(bssid))
    return value & OUI_MASK, value | NIC_MASK


def order_neighbors(
    rows: Iterable[tuple[int, int]],
    bssid: str,
    limit: int = DEFAULT_NEIGHBOR_LIMIT,
) -> Iterator[tuple[str, int]]:
    """Apply the provider contract to integer ``(bssid, pin)`` rows.

    Rows outside the target block are dropped, duplicates collapse, and
    the survivors are sorted by distance and capped at *limit*.
    """
    target = bssid_to_int(format_bssid(bssid))
    low, high = block_range(bssid)
    distinct = {(b, p) for b, p in rows if low <= b <= high}
    ordered = sorted(distinct, key=lambda row: (abs(row[0] - target), row[0], row[1]))
    for value, pin in ordered[:limit]:
        yield int_to_bssid(value), pin

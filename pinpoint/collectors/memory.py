"""
In-Memory Neighbor Provider
============================

Holds observations in a list and answers neighbor queries with the same
ordering and cap as the SQLite store.  Used for CSV-backed predictions
and in tests.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from pinpoint.collectors.base import DEFAULT_NEIGHBOR_LIMIT, order_neighbors
from pinpoint.core.codec import bssid_to_int, format_bssid
from pinpoint.core.models import Observation


class MemoryNeighborProvider:
    """List-backed :class:`~pinpoint.collectors.base.NeighborProvider`.

    Usage::

        provider = MemoryNeighborProvider([("00:11:22:33:44:55", 12345670)])
        rows = list(provider.neighbors("001122334400"))
    """

    def __init__(
        self,
        observations: Iterable[Observation | tuple[str, int]] = (),
        limit: int = DEFAULT_NEIGHBOR_LIMIT,
    ) -> None:
        self._rows: list[tuple[int, int]] = []
        self.limit = limit
        self.extend(observations)

    def add(self, bssid: str, pin: int) -> None:
        self._rows.append((bssid_to_int(format_bssid(bssid)), int(pin)))

    def extend(self, observations: Iterable[Observation | tuple[str, int]]) -> None:
        for item in observations:
            if isinstance(item, Observation):
                self.add(*item.as_row())
            else:
                self.add(*item)

    def __len__(self) -> int:
        return len(self._rows)

    def neighbors(self, bssid: str) -> Iterator[tuple[str, int]]:
        return order_neighbors(self._rows, bssid, self.limit)

"""
PinPoint Observation Database
==============================

SQLite3-backed store of observed (BSSID, PIN) pairs.  BSSIDs are stored
as 48-bit integers so that the neighbor query is a single indexed range
scan over the target's OUI block, ordered by numeric distance.

References:
    - SQLite Query Planner. https://www.sqlite.org/queryplanner.html
    - SQLite Write-Ahead Logging. https://www.sqlite.org/wal.html
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterable, Iterator, Optional

from shared.logger import PinpointLogger

from pinpoint.collectors.base import (
    DEFAULT_NEIGHBOR_LIMIT,
    DatasetError,
    block_range,
)
from pinpoint.core.codec import bssid_to_int, format_bssid, int_to_bssid
from pinpoint.core.models import Observation

logger = PinpointLogger("collectors.database")


class ObservationDatabase:
    """SQLite3 observation store implementing the neighbor contract.

    Attributes:
        db_path: Filesystem path to the SQLite database file, or
                 ``":memory:"``.
        limit:   Maximum number of neighbor rows returned per query.
        read_only: Open an existing file for queries only; a missing
                 file is an error instead of a new empty database.

    Usage::

        db = ObservationDatabase("pinpoint.db")
        db.create_tables()
        db.insert_many(observations)
        rows = list(db.neighbors("00:11:22:33:44:55"))
    """

    def __init__(
        self,
        db_path: str | Path = "pinpoint.db",
        limit: int = DEFAULT_NEIGHBOR_LIMIT,
        read_only: bool = False,
    ) -> None:
        self.db_path = str(db_path)
        self.limit = limit
        self.read_only = read_only
        self._connection: Optional[sqlite3.Connection] = None

    # ------------------------------------------------------------------ #
    #  Connection management
    # ------------------------------------------------------------------ #

    def _get_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            try:
                if self.read_only:
                    uri = Path(self.db_path).resolve().as_uri() + "?mode=ro"
                    self._connection = sqlite3.connect(uri, uri=True)
                else:
                    self._connection = sqlite3.connect(self.db_path)
            except sqlite3.Error as exc:
                logger.error("Cannot open database %s: %s", self.db_path, exc)
                raise DatasetError(f"Cannot open database {self.db_path}: {exc}") from exc
            if self.db_path != ":memory:" and not self.read_only:
                self._connection.execute("PRAGMA journal_mode=WAL")
        return self._connection

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> ObservationDatabase:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    #  Schema
    # ------------------------------------------------------------------ #

    def create_tables(self) -> None:
        """Create the observations table and its BSSID index."""
        conn = self._get_connection()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS observations (
                    bssid   INTEGER NOT NULL,
                    wpspin  INTEGER NOT NULL,
                    PRIMARY KEY (bssid, wpspin)
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_observations_bssid
                ON observations(bssid)
            """)
            conn.commit()
        except sqlite3.Error as exc:
            raise DatasetError(f"Cannot create schema: {exc}") from exc

    # ------------------------------------------------------------------ #
    #  Writes
    # ------------------------------------------------------------------ #

    def insert(self, bssid: str, pin: int) -> None:
        """Store one observation; duplicates are ignored."""
        self.insert_many([Observation(bssid=bssid, pin=pin)])

    def insert_many(self, observations: Iterable[Observation]) -> int:
        """Store observations in one transaction.

        Returns:
            Number of rows actually added (duplicates excluded).
        """
        conn = self._get_connection()
        rows = [(bssid_to_int(o.bssid), o.pin) for o in observations]
        try:
            before = conn.total_changes
            with conn:
                conn.executemany(
                    "INSERT OR IGNORE INTO observations (bssid, wpspin) VALUES (?, ?)",
                    rows,
                )
            added = conn.total_changes - before
        except sqlite3.Error as exc:
            raise DatasetError(f"Cannot store observations: {exc}") from exc
        logger.info("Stored %d of %d observation(s)", added, len(rows))
        return added

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    def neighbors(self, bssid: str) -> Iterator[tuple[str, int]]:
        """Observations in the target's OUI block, nearest first.

        Rows are fetched lazily, so a consumer that stops early never
        reads the rest of the result set.
        """
        target = bssid_to_int(format_bssid(bssid))
        low, high = block_range(bssid)
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """
                SELECT DISTINCT bssid, wpspin FROM observations
                WHERE bssid BETWEEN ? AND ?
                ORDER BY ABS(bssid - ?), bssid, wpspin
                LIMIT ?
                """,
                (low, high, target, self.limit),
            )
        except sqlite3.Error as exc:
            raise DatasetError(f"Neighbor query failed: {exc}") from exc
        return ((int_to_bssid(value), pin) for value, pin in cursor)

    def count(self) -> int:
        """Total number of stored observations."""
        conn = self._get_connection()
        try:
            return conn.execute("SELECT COUNT(*) FROM observations").fetchone()[0]
        except sqlite3.Error as exc:
            raise DatasetError(f"Cannot count observations: {exc}") from exc

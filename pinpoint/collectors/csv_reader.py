"""
CSV Observation Reader
=======================

Reads ``bssid,pin`` rows exported from wardriving tools or PIN
databases.  A header row is optional, BSSIDs may use any separator
style and PINs may be zero-padded.  Malformed rows are skipped with a
warning rather than aborting the whole import.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from shared.logger import PinpointLogger

from pinpoint.collectors.base import DatasetError
from pinpoint.core.models import Observation

logger = PinpointLogger("collectors.csv_reader")

_HEADER_NAMES = {"bssid", "mac", "ap", "address"}


def read_observations_csv(path: str | Path) -> Iterator[Observation]:
    """Yield observations from a CSV file.

    The first two columns are read as BSSID and PIN; further columns are
    ignored.

    Raises:
        DatasetError: If the file cannot be opened.
    """
    csv_path = Path(path)
    try:
        fh = open(csv_path, newline="", encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"Cannot read {csv_path}: {exc}") from exc

    with fh:
        for lineno, row in enumerate(csv.reader(fh), start=1):
            if not row or not "".join(row).strip():
                continue
            if lineno == 1 and row[0].strip().lower() in _HEADER_NAMES:
                continue
            if len(row) < 2:
                logger.warning("%s:%d: expected bssid,pin; skipped", csv_path, lineno)
                continue
            try:
                yield Observation(bssid=row[0], pin=row[1])
            except (ValidationError, ValueError) as exc:
                logger.warning("%s:%d: invalid row skipped (%s)", csv_path, lineno, exc)

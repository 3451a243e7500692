"""
PinPoint Collectors
====================

Neighbor dataset providers for the PinPoint predictor.

Modules:
    base        -- Provider contract, ordering helper and DatasetError
    database    -- SQLite observation store
    memory      -- In-memory provider
    csv_reader  -- CSV observation reader
"""

from pinpoint.collectors.base import DatasetError, NeighborProvider
from pinpoint.collectors.csv_reader import read_observations_csv
from pinpoint.collectors.database import ObservationDatabase
from pinpoint.collectors.memory import MemoryNeighborProvider

__all__ = [
    "DatasetError",
    "NeighborProvider",
    "read_observations_csv",
    "ObservationDatabase",
    "MemoryNeighborProvider",
]

"""
Tests for the neighbor dataset providers and the CSV reader.
"""

import pytest

from pinpoint.collectors import (
    DatasetError,
    MemoryNeighborProvider,
    NeighborProvider,
    ObservationDatabase,
    read_observations_csv,
)
from pinpoint.collectors.base import block_range, order_neighbors
from pinpoint.core.codec import bssid_to_int, int_to_bssid
from pinpoint.core.models import Observation

TARGET = "001122334455"
T = bssid_to_int(TARGET)


def _around(offsets_and_pins):
    return [(int_to_bssid(T + off), pin) for off, pin in offsets_and_pins]


# Nearest first; ties on distance go to the lower BSSID.
ROWS = _around([(2, 5), (-2, 3), (-1, 9), (1, 1), (-1, 9)])
EXPECTED = _around([(-1, 9), (1, 1), (-2, 3), (2, 5)])


class TestProviderContract:
    """Test the ordering helper shared by all providers"""

    def test_block_range(self):
        assert block_range(TARGET) == (0x001122000000, 0x001122FFFFFF)

    def test_order_and_dedup(self):
        rows = [(bssid_to_int(b), p) for b, p in ROWS]
        assert list(order_neighbors(rows, TARGET)) == EXPECTED

    def test_other_blocks_excluded(self):
        rows = [(0x001123000000, 1234), (0x001121FFFFFF, 5678), (T, 12345670)]
        assert list(order_neighbors(rows, TARGET)) == [(TARGET, 12345670)]

    def test_limit(self):
        rows = [(bssid_to_int(b), p) for b, p in ROWS]
        assert list(order_neighbors(rows, TARGET, limit=2)) == EXPECTED[:2]

    def test_pins_at_same_bssid_ordered(self):
        rows = [(T, 20), (T, 10)]
        assert [p for _, p in order_neighbors(rows, TARGET)] == [10, 20]


class TestMemoryProvider:
    """Test the list-backed provider"""

    def test_is_a_neighbor_provider(self):
        assert isinstance(MemoryNeighborProvider(), NeighborProvider)

    def test_accepts_tuples_and_observations(self):
        provider = MemoryNeighborProvider([("00:11:22:33:44:56", 1)])
        provider.extend([Observation(bssid="001122334454", pin="00000002")])
        provider.add("001122334455", 3)
        assert len(provider) == 3
        assert [p for _, p in provider.neighbors(TARGET)] == [3, 2, 1]

    def test_same_order_as_helper(self):
        provider = MemoryNeighborProvider(ROWS, limit=3)
        assert list(provider.neighbors(TARGET)) == EXPECTED[:3]


class TestObservationDatabase:
    """Test the SQLite store"""

    @pytest.fixture
    def db(self, tmp_path):
        database = ObservationDatabase(tmp_path / "obs.db")
        database.create_tables()
        yield database
        database.close()

    def test_is_a_neighbor_provider(self, db):
        assert isinstance(db, NeighborProvider)

    def test_neighbors_follow_contract(self, db):
        db.insert_many(Observation(bssid=b, pin=p) for b, p in ROWS)
        db.insert("001123000000", 1234)
        assert list(db.neighbors(TARGET)) == EXPECTED

    def test_limit(self, tmp_path):
        with ObservationDatabase(tmp_path / "obs.db", limit=2) as db:
            db.create_tables()
            db.insert_many(Observation(bssid=b, pin=p) for b, p in ROWS)
            assert list(db.neighbors(TARGET)) == EXPECTED[:2]

    def test_duplicates_ignored(self, db):
        assert db.insert_many(Observation(bssid=b, pin=p) for b, p in ROWS) == 4
        assert db.insert_many([Observation(bssid=TARGET, pin=12345670)]) == 1
        assert db.insert_many([Observation(bssid=TARGET, pin=12345670)]) == 0
        assert db.count() == 5

    def test_read_only_queries_existing_file(self, db, tmp_path):
        db.insert_many(Observation(bssid=b, pin=p) for b, p in ROWS)
        db.close()
        with ObservationDatabase(tmp_path / "obs.db", read_only=True) as reader:
            assert list(reader.neighbors(TARGET)) == EXPECTED
            with pytest.raises(DatasetError):
                reader.insert(TARGET, 12345670)

    def test_read_only_missing_file_not_created(self, tmp_path):
        path = tmp_path / "absent.db"
        with ObservationDatabase(path, read_only=True) as db:
            with pytest.raises(DatasetError):
                db.neighbors(TARGET)
        assert not path.exists()

    def test_full_48_bit_bssids(self, db):
        db.insert("FFFFFFFFFFFF", 12345670)
        assert list(db.neighbors("FFFFFFFFFFF0")) == [("FFFFFFFFFFFF", 12345670)]

    def test_in_memory(self):
        with ObservationDatabase(":memory:") as db:
            db.create_tables()
            db.insert(TARGET, 1)
            assert db.count() == 1

    def test_missing_schema_raises(self, tmp_path):
        with ObservationDatabase(tmp_path / "empty.db") as db:
            with pytest.raises(DatasetError):
                db.neighbors(TARGET)
            with pytest.raises(DatasetError):
                db.count()


class TestCsvReader:
    """Test CSV parsing"""

    def test_reads_rows_and_skips_bad_ones(self, tmp_path):
        path = tmp_path / "pins.csv"
        path.write_text(
            "bssid,pin,ssid\n"
            "00:11:22:33:44:55,00001007,home\n"
            "\n"
            "garbage\n"
            "001122334456,notapin\n"
            "001122334457,123456789\n"
            "00-11-22-33-44-58,12345670\n",
            encoding="utf-8",
        )
        rows = [o.as_row() for o in read_observations_csv(path)]
        assert rows == [("001122334455", 1007), ("001122334458", 12345670)]

    def test_no_header(self, tmp_path):
        path = tmp_path / "pins.csv"
        path.write_text("001122334455,1\n", encoding="utf-8")
        assert [o.pin for o in read_observations_csv(path)] == [1]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError):
            list(read_observations_csv(tmp_path / "missing.csv"))

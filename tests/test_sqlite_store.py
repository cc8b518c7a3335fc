"""Tests for SQLiteVehicleStore."""

import json
import sqlite3

import pytest

from evetl.output.sqlite_store import SQLiteVehicleStore, write_sqlite


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary database for testing."""
    store = SQLiteVehicleStore(tmp_path / "test.db")
    yield store
    store.close()


def _names(conn, kind):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type=?", (kind,)).fetchall()
    return {row[0] for row in rows}


class TestSQLiteVehicleStore:
    """Test SQLiteVehicleStore initialization and schema."""

    def test_init_creates_database(self, tmp_path):
        db_path = tmp_path / "new.db"
        assert not db_path.exists()

        store = SQLiteVehicleStore(db_path)

        assert db_path.exists()
        assert store.db_path == db_path
        store.close()

    def test_schema_creation(self, temp_db):
        """Test that all tables are created."""
        tables = _names(temp_db.connection, "table")

        assert {"vehicles", "charge_ports", "range_ratings", "sources"} <= tables

    def test_create_indexes(self, temp_db):
        """Test that lookup indexes are created on demand."""
        temp_db.create_indexes()

        indexes = _names(temp_db.connection, "index")
        assert {
            "idx_vehicles_code",
            "idx_vehicles_make",
            "idx_vehicles_model",
            "idx_vehicles_year",
            "idx_vehicles_composite",
            "idx_vehicles_type",
            "idx_charge_ports_vehicle",
            "idx_range_ratings_vehicle",
            "idx_sources_vehicle",
        } <= indexes

    def test_schema_is_idempotent(self, tmp_path):
        """Opening an existing database should not fail."""
        db_path = tmp_path / "again.db"
        SQLiteVehicleStore(db_path).close()

        store = SQLiteVehicleStore(db_path)
        assert store.count() == 0
        store.close()


class TestInsertVehicle:
    """Test inserting vehicles and their children."""

    def test_insert_vehicle_row(self, temp_db, make_vehicle):
        vehicle = make_vehicle()

        with temp_db.transaction():
            vehicle_id = temp_db.insert_vehicle(vehicle)

        row = temp_db.connection.execute(
            "SELECT * FROM vehicles WHERE id = ?", (vehicle_id,)
        ).fetchone()
        assert row["unique_code"] == "oed:tesla:model_3:2024:long_range"
        assert row["make_name"] == "Tesla"
        assert row["vehicle_type"] == "passenger_car"
        assert row["drivetrain"] == "awd"
        assert row["battery_capacity_gross_kwh"] == 82.0
        assert row["range_wltp_km"] == 629.0
        assert row["variant_slug"] is None

    def test_json_data_holds_full_record(self, temp_db, make_vehicle):
        vehicle = make_vehicle()

        temp_db.insert_vehicles([vehicle])

        raw = temp_db.connection.execute("SELECT json_data FROM vehicles").fetchone()[0]
        assert json.loads(raw) == vehicle.to_document()

    def test_children_inserted(self, temp_db, make_vehicle):
        temp_db.insert_vehicles([make_vehicle()])
        conn = temp_db.connection

        port = conn.execute("SELECT * FROM charge_ports").fetchone()
        assert port["connector"] == "ccs2"
        assert port["location_side"] == "left"
        assert port["location_position"] is None

        cycles = [r["cycle"] for r in conn.execute("SELECT cycle FROM range_ratings ORDER BY id")]
        assert cycles == ["wltp", "epa"]

        source = conn.execute("SELECT * FROM sources").fetchone()
        assert source["source_type"] == "oem"
        assert source["url"] == "https://www.tesla.com/model3"

    def test_insert_many(self, temp_db, make_vehicle):
        vehicles = [
            make_vehicle(),
            make_vehicle(trim={"slug": "performance", "name": "Performance"}),
        ]

        assert temp_db.insert_vehicles(vehicles) == 2
        assert temp_db.count() == 2

    def test_duplicate_codes_allowed(self, temp_db, make_vehicle):
        """Identical ids should not abort the export."""
        temp_db.insert_vehicles([make_vehicle(), make_vehicle()])

        assert temp_db.count() == 2

    def test_transaction_rollback(self, temp_db, make_vehicle):
        """A failure inside a transaction should roll back every insert."""
        with pytest.raises(RuntimeError):
            with temp_db.transaction():
                temp_db.insert_vehicle(make_vehicle())
                raise RuntimeError("boom")

        assert temp_db.count() == 0

    def test_children_deleted_with_vehicle(self, temp_db, make_vehicle):
        temp_db.insert_vehicles([make_vehicle()])

        with temp_db.transaction() as conn:
            conn.execute("DELETE FROM vehicles")

        assert temp_db.connection.execute("SELECT COUNT(*) FROM charge_ports").fetchone()[0] == 0


class TestWriteSqlite:
    """Test building a database file from a batch."""

    def test_writes_database(self, tmp_path, make_vehicle):
        output = tmp_path / "vehicles.db"

        assert write_sqlite([make_vehicle()], output) == output

        conn = sqlite3.connect(output)
        try:
            assert conn.execute("SELECT COUNT(*) FROM vehicles").fetchone()[0] == 1
        finally:
            conn.close()

    def test_replaces_existing_file(self, tmp_path, make_vehicle):
        """Rebuilding should not append to an older export."""
        output = tmp_path / "vehicles.db"
        write_sqlite([make_vehicle(), make_vehicle()], output)

        write_sqlite([make_vehicle()], output)

        conn = sqlite3.connect(output)
        try:
            assert conn.execute("SELECT COUNT(*) FROM vehicles").fetchone()[0] == 1
        finally:
            conn.close()

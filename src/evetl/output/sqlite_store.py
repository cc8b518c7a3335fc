"""Relational SQLite projection of the vehicle batch."""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from evetl.domain.vehicle import Vehicle

LOGGER = logging.getLogger(__name__)


class SQLiteVehicleStore:
    """Persistence layer for vehicles and their list-valued children."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self._conn = sqlite3.connect(self.db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys=ON;")
        self._ensure_schema()

    @property
    def connection(self) -> sqlite3.Connection:
        return self._conn

    def close(self) -> None:
        self._conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            yield self._conn
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _ensure_schema(self) -> None:
        with self.transaction() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS vehicles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    unique_code TEXT NOT NULL,
                    make_slug TEXT NOT NULL,
                    make_name TEXT NOT NULL,
                    model_slug TEXT NOT NULL,
                    model_name TEXT NOT NULL,
                    year INTEGER NOT NULL,
                    trim_slug TEXT NOT NULL,
                    trim_name TEXT NOT NULL,
                    variant_slug TEXT,
                    variant_name TEXT,
                    vehicle_type TEXT NOT NULL,
                    drivetrain TEXT NOT NULL,
                    system_power_kw REAL,
                    system_torque_nm REAL,
                    battery_capacity_gross_kwh REAL,
                    battery_capacity_net_kwh REAL,
                    battery_chemistry TEXT,
                    dc_max_power_kw REAL,
                    ac_max_power_kw REAL,
                    range_wltp_km REAL,
                    range_epa_km REAL,
                    acceleration_0_100_s REAL,
                    top_speed_kmh REAL,
                    json_data TEXT NOT NULL,
                    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS charge_ports (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    vehicle_id INTEGER NOT NULL,
                    kind TEXT NOT NULL,
                    connector TEXT NOT NULL,
                    location_side TEXT,
                    location_position TEXT,
                    FOREIGN KEY(vehicle_id) REFERENCES vehicles(id) ON DELETE CASCADE
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS range_ratings (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    vehicle_id INTEGER NOT NULL,
                    cycle TEXT NOT NULL,
                    range_km REAL NOT NULL,
                    notes TEXT,
                    FOREIGN KEY(vehicle_id) REFERENCES vehicles(id) ON DELETE CASCADE
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS sources (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    vehicle_id INTEGER NOT NULL,
                    source_type TEXT NOT NULL,
                    title TEXT NOT NULL,
                    url TEXT NOT NULL,
                    accessed_at TEXT NOT NULL,
                    publisher TEXT,
                    FOREIGN KEY(vehicle_id) REFERENCES vehicles(id) ON DELETE CASCADE
                )
                """
            )

    def create_indexes(self) -> None:
        with self.transaction() as conn:
            conn.execute("CREATE INDEX IF NOT EXISTS idx_vehicles_code ON vehicles(unique_code)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_vehicles_make ON vehicles(make_slug)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_vehicles_model ON vehicles(model_slug)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_vehicles_year ON vehicles(year)")
            conn.execute(
                """CREATE INDEX IF NOT EXISTS idx_vehicles_composite
                    ON vehicles(make_slug, model_slug, year, trim_slug)
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_vehicles_type ON vehicles(vehicle_type)")
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_charge_ports_vehicle ON charge_ports(vehicle_id)"
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_range_ratings_vehicle ON range_ratings(vehicle_id)"
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_sources_vehicle ON sources(vehicle_id)")

    def insert_vehicle(self, vehicle: Vehicle) -> int:
        """Insert one vehicle and its children; call within a transaction."""
        conn = self._conn
        performance = vehicle.performance
        vehicle_id = conn.execute(
            """
            INSERT INTO vehicles(
                unique_code, make_slug, make_name, model_slug, model_name,
                year, trim_slug, trim_name, variant_slug, variant_name,
                vehicle_type, drivetrain, system_power_kw, system_torque_nm,
                battery_capacity_gross_kwh, battery_capacity_net_kwh, battery_chemistry,
                dc_max_power_kw, ac_max_power_kw, range_wltp_km, range_epa_km,
                acceleration_0_100_s, top_speed_kmh, json_data
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                vehicle.code,
                vehicle.make.slug,
                vehicle.make.name,
                vehicle.model.slug,
                vehicle.model.name,
                vehicle.year,
                vehicle.trim.slug,
                vehicle.trim.name,
                vehicle.variant.slug if vehicle.variant else None,
                vehicle.variant.name if vehicle.variant else None,
                vehicle.vehicle_type.value,
                vehicle.powertrain.drivetrain.value,
                vehicle.powertrain.system_power_kw,
                vehicle.powertrain.system_torque_nm,
                vehicle.battery.pack_capacity_kwh_gross,
                vehicle.battery.pack_capacity_kwh_net,
                vehicle.battery.chemistry,
                vehicle.max_dc_power_kw(),
                vehicle.max_ac_power_kw(),
                vehicle.wltp_range_km(),
                vehicle.epa_range_km(),
                performance.acceleration_0_100_kmh_s if performance else None,
                performance.top_speed_kmh if performance else None,
                json.dumps(vehicle.to_document(), ensure_ascii=False),
            ),
        ).lastrowid

        for port in vehicle.charge_ports:
            location = port.location
            conn.execute(
                """
                INSERT INTO charge_ports(vehicle_id, kind, connector, location_side, location_position)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    vehicle_id,
                    port.kind.value,
                    port.connector.value,
                    location.side.value if location and location.side else None,
                    location.position.value if location and location.position else None,
                ),
            )
        for rating in vehicle.range.rated:
            conn.execute(
                "INSERT INTO range_ratings(vehicle_id, cycle, range_km, notes) VALUES (?, ?, ?, ?)",
                (vehicle_id, rating.cycle.value, rating.range_km, rating.notes),
            )
        for source in vehicle.sources:
            conn.execute(
                """
                INSERT INTO sources(vehicle_id, source_type, title, url, accessed_at, publisher)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    vehicle_id,
                    source.source_type.value,
                    source.title,
                    source.url,
                    source.accessed_at,
                    source.publisher,
                ),
            )
        return vehicle_id

    def insert_vehicles(self, vehicles: Sequence[Vehicle]) -> int:
        with self.transaction():
            for vehicle in vehicles:
                self.insert_vehicle(vehicle)
        return len(vehicles)

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM vehicles").fetchone()[0]

    def optimize(self) -> None:
        self._conn.execute("VACUUM")
        self._conn.execute("ANALYZE")


def write_sqlite(vehicles: Sequence[Vehicle], output_path: Path) -> Path:
    """Create a fresh database at output_path holding the given vehicles."""
    output_path = Path(output_path)
    if output_path.exists():
        output_path.unlink()

    store = SQLiteVehicleStore(output_path)
    try:
        store.insert_vehicles(vehicles)
        store.create_indexes()
        store.optimize()
    finally:
        store.close()
    LOGGER.debug("Wrote %d vehicles to %s", len(vehicles), output_path)
    return output_path

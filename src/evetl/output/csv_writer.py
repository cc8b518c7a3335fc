"""Flat CSV projection, one row per vehicle."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, List, Sequence

from evetl.domain.vehicle import Vehicle

COLUMNS = [
    "unique_code",
    "make_slug",
    "make_name",
    "model_slug",
    "model_name",
    "year",
    "trim_slug",
    "trim_name",
    "variant_slug",
    "variant_name",
    "vehicle_type",
    "drivetrain",
    "system_power_kw",
    "system_torque_nm",
    "battery_capacity_gross_kwh",
    "battery_capacity_net_kwh",
    "battery_chemistry",
    "dc_max_power_kw",
    "ac_max_power_kw",
    "range_wltp_km",
    "range_epa_km",
    "acceleration_0_100_s",
    "top_speed_kmh",
    "charge_connectors",
    "sources",
]


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def vehicle_row(vehicle: Vehicle) -> List[str]:
    performance = vehicle.performance
    values = [
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
        "|".join(port.connector.value for port in vehicle.charge_ports),
        "|".join(source.url for source in vehicle.sources),
    ]
    return [_cell(value) for value in values]


def write_csv(vehicles: Sequence[Vehicle], output_path: Path) -> Path:
    output_path = Path(output_path)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(COLUMNS)
        for vehicle in vehicles:
            writer.writerow(vehicle_row(vehicle))
    return output_path

"""Summary figures for a built batch."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Sequence

from evetl.config import ETL_VERSION
from evetl.domain.vehicle import Vehicle


def build_statistics(vehicles: Sequence[Vehicle], elapsed_seconds: float) -> Dict[str, Any]:
    years = [vehicle.year for vehicle in vehicles]
    return {
        "total_vehicles": len(vehicles),
        "makes": len({vehicle.make.slug for vehicle in vehicles}),
        "models": len({(vehicle.make.slug, vehicle.model.slug) for vehicle in vehicles}),
        "year_range": {"min": min(years, default=0), "max": max(years, default=0)},
        "vehicles_by_type": dict(Counter(vehicle.vehicle_type.value for vehicle in vehicles)),
        "vehicles_by_make": dict(Counter(vehicle.make.name for vehicle in vehicles)),
        "processing_time_seconds": round(elapsed_seconds, 3),
        "etl_version": ETL_VERSION,
    }


def write_statistics(
    vehicles: Sequence[Vehicle], elapsed_seconds: float, output_path: Path
) -> Path:
    output_path = Path(output_path)
    stats = build_statistics(vehicles, elapsed_seconds)
    output_path.write_text(json.dumps(stats, indent=2, ensure_ascii=False), encoding="utf-8")
    return output_path

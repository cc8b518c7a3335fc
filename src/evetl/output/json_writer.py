"""Canonical JSON document of the vehicle batch."""

from __future__ import annotations

import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Sequence

from evetl.config import ETL_VERSION, SCHEMA_VERSION
from evetl.domain.vehicle import Vehicle
from evetl.utils.files import compute_sha256


def build_document(vehicles: Sequence[Vehicle]) -> Dict[str, Any]:
    start = time.perf_counter()
    documents = [vehicle.to_document() for vehicle in vehicles]
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "vehicle_count": len(documents),
        "vehicles": documents,
        "metadata": {
            "etl_version": ETL_VERSION,
            "processing_time_ms": int((time.perf_counter() - start) * 1000),
        },
    }


def checksum_path_for(output_path: Path) -> Path:
    return output_path.with_name(f"{output_path.name}.sha256")


def write_json(vehicles: Sequence[Vehicle], output_path: Path) -> Path:
    """Write the batch document and a sha256sum-style checksum beside it."""
    output_path = Path(output_path)
    payload = json.dumps(build_document(vehicles), indent=2, ensure_ascii=False)
    output_path.write_text(payload, encoding="utf-8")

    checksum = compute_sha256(output_path)
    checksum_path_for(output_path).write_text(
        f"{checksum}  {output_path.name}\n", encoding="utf-8"
    )
    return output_path

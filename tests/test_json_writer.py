"""Tests for the JSON document writer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from evetl.config import ETL_VERSION, SCHEMA_VERSION
from evetl.domain.vehicle import Vehicle
from evetl.output.json_writer import build_document, checksum_path_for, write_json
from evetl.utils.files import compute_sha256

MakeVehicle = Callable[..., Vehicle]


class TestBuildDocument:
    """Test the batch document envelope."""

    def test_envelope(self, make_vehicle: MakeVehicle) -> None:
        """Should carry versions, count and metadata."""
        document = build_document([make_vehicle()])

        assert document["schema_version"] == SCHEMA_VERSION
        assert document["vehicle_count"] == 1
        assert document["metadata"]["etl_version"] == ETL_VERSION
        assert document["metadata"]["processing_time_ms"] >= 0
        assert document["generated_at"].endswith("+00:00")

    def test_vehicle_uses_dataset_field_names(self, make_vehicle: MakeVehicle) -> None:
        """Aliased fields should be written under their dataset names."""
        vehicle = build_document([make_vehicle()])["vehicles"][0]

        assert vehicle["sources"][0]["type"] == "oem"
        assert "source_type" not in vehicle["sources"][0]
        assert vehicle["vehicle_type"] == "passenger_car"
        assert vehicle["powertrain"]["drivetrain"] == "awd"

    def test_absent_optionals_omitted(self, make_vehicle: MakeVehicle) -> None:
        vehicle = build_document([make_vehicle()])["vehicles"][0]

        assert "variant" not in vehicle
        assert "unique_code" not in vehicle

    def test_empty_batch(self) -> None:
        document = build_document([])

        assert document["vehicle_count"] == 0
        assert document["vehicles"] == []


class TestWriteJson:
    """Test writing the document and its checksum."""

    def test_writes_document(self, tmp_path: Path, make_vehicle: MakeVehicle) -> None:
        """Should write a parseable document at the given path."""
        output = tmp_path / "vehicles.json"

        assert write_json([make_vehicle()], output) == output

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["vehicles"][0]["make"] == {"slug": "tesla", "name": "Tesla"}

    def test_writes_checksum(self, tmp_path: Path, make_vehicle: MakeVehicle) -> None:
        """Should write a sha256sum compatible line beside the document."""
        output = tmp_path / "vehicles.json"

        write_json([make_vehicle()], output)

        checksum_file = checksum_path_for(output)
        assert checksum_file.name == "vehicles.json.sha256"
        assert checksum_file.read_text() == f"{compute_sha256(output)}  vehicles.json\n"

    def test_non_ascii_preserved(self, tmp_path: Path, make_vehicle: MakeVehicle) -> None:
        """Names should be written as UTF-8 rather than escaped."""
        output = tmp_path / "vehicles.json"

        write_json([make_vehicle(make={"slug": "skoda", "name": "Škoda"})], output)

        assert "Škoda" in output.read_text(encoding="utf-8")

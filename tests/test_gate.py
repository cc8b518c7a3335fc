"""Tests for the validation gate."""

from __future__ import annotations

from typing import Callable, List

from evetl.build.gate import gate
from evetl.domain.vehicle import Vehicle
from evetl.validation import Violation, ViolationKind

MakeVehicle = Callable[..., Vehicle]


class TestGate:
    """Test partitioning of compiled records."""

    def test_all_valid(self, make_vehicle: MakeVehicle) -> None:
        """Valid records pass through in input order."""
        first = make_vehicle()
        second = make_vehicle(trim={"slug": "performance", "name": "Performance"})

        result = gate([first, second])

        assert result.valid == [first, second]
        assert result.invalid == []
        assert result.errors() == []

    def test_invalid_record_bundles_violations(self, make_vehicle: MakeVehicle) -> None:
        """Each invalid record should yield one error listing all its violations."""
        vehicle = make_vehicle(charge_ports=[], sources=[])

        result = gate([vehicle])

        assert result.valid == []
        errors = result.errors()
        assert len(errors) == 1
        error = errors[0]
        assert error.stage == "validation"
        assert error.kind == "validation_failed"
        assert error.context == "oed:tesla:model_3:2024:long_range"
        assert error.violations == [
            "At least one charge port is required",
            "At least one source is required",
        ]
        assert error.message == "; ".join(error.violations)

    def test_mixed_batch(self, make_vehicle: MakeVehicle) -> None:
        """Should keep valid records and report only the invalid ones."""
        good = make_vehicle()
        bad = make_vehicle(year=1800)

        result = gate([bad, good])

        assert result.valid == [good]
        assert [record_id for record_id, _ in result.invalid] == [
            "oed:tesla:model_3:1800:long_range"
        ]

    def test_custom_validator(self, make_vehicle: MakeVehicle) -> None:
        """Should use the injected rule set instead of the default."""

        def reject_awd(vehicle: Vehicle) -> List[Violation]:
            if vehicle.powertrain.drivetrain.value == "awd":
                return [Violation(ViolationKind.EMPTY_VALUE, "drivetrain")]
            return []

        result = gate([make_vehicle()], validator=reject_awd)

        assert result.valid == []
        assert result.errors()[0].violations == [
            "Empty value not allowed for field: drivetrain"
        ]

    def test_variant_id(self, make_vehicle: MakeVehicle) -> None:
        """Variant slugs should be part of the reported id."""
        vehicle = make_vehicle(variant={"slug": "Bad Slug", "name": "Bad"})

        result = gate([vehicle])

        assert result.errors()[0].context == "oed:tesla:model_3:2024:long_range:Bad Slug"

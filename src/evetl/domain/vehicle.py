"""The canonical vehicle record produced by the pipeline."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ConfigDict, Field

from evetl.domain.battery import Battery
from evetl.domain.charging import ChargePort, Charging, V2X
from evetl.domain.details import (
    Body,
    Capacity,
    Dimensions,
    Images,
    Links,
    Metadata,
    Performance,
    Pricing,
    Software,
    Source,
    Variant,
    VehicleAvailability,
    Weights,
    WheelsTires,
)
from evetl.domain.enums import VehicleType
from evetl.domain.powertrain import Powertrain
from evetl.domain.range import Efficiency, Range
from evetl.domain.types import DomainModel, SlugName, UInt16, VehicleId


class Vehicle(DomainModel):
    """A fully assembled vehicle; unknown top-level keys are rejected."""

    model_config = ConfigDict(strict=True, extra="forbid", populate_by_name=True)

    schema_url: str | None = Field(default=None, alias="$schema")
    schema_version: str
    make: SlugName
    model: SlugName
    year: UInt16
    trim: SlugName
    vehicle_type: VehicleType
    powertrain: Powertrain
    battery: Battery
    charge_ports: list[ChargePort]
    charging: Charging
    range: Range
    sources: list[Source]

    unique_code: str | None = None
    variant: Variant | None = None
    markets: list[str] | None = None
    availability: VehicleAvailability | None = None
    body: Body | None = None
    dimensions: Dimensions | None = None
    weights: Weights | None = None
    capacity: Capacity | None = None
    v2x: V2X | None = None
    efficiency: Efficiency | None = None
    performance: Performance | None = None
    wheels_tires: WheelsTires | None = None
    pricing: Pricing | None = None
    software: Software | None = None
    links: Links | None = None
    images: Images | None = None
    metadata: Metadata | None = None

    def id(self) -> VehicleId:
        return VehicleId(
            make_slug=self.make.slug,
            model_slug=self.model.slug,
            year=self.year,
            trim_slug=self.trim.slug,
            variant_slug=self.variant.slug if self.variant is not None else None,
        )

    @property
    def code(self) -> str:
        """Explicit unique code, falling back to the canonical id."""
        return self.unique_code or self.id().canonical_id()

    def display_name(self) -> str:
        return f"{self.year} {self.make.name} {self.model.name} {self.trim.name}"

    def is_variant(self) -> bool:
        return self.variant is not None

    def usable_battery_kwh(self) -> float | None:
        return self.battery.usable_capacity_kwh()

    def wltp_range_km(self) -> float | None:
        return self.range.wltp_range_km()

    def epa_range_km(self) -> float | None:
        return self.range.epa_range_km()

    def max_dc_power_kw(self) -> float | None:
        return self.charging.dc.max_power_kw if self.charging.dc is not None else None

    def max_ac_power_kw(self) -> float | None:
        return self.charging.ac.max_power_kw if self.charging.ac is not None else None

    def to_document(self) -> Dict[str, Any]:
        """JSON-ready mapping using the dataset's field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

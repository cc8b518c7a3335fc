"""Optional descriptive sections of a vehicle record."""

from __future__ import annotations

from pydantic import Field

from evetl.domain.enums import AvailabilityStatus, SourceType
from evetl.domain.types import DomainModel, UInt8, UInt16


class Variant(DomainModel):
    slug: str
    name: str
    kind: str | None = None
    notes: str | None = None


class VehicleAvailability(DomainModel):
    status: AvailabilityStatus
    start_year: UInt16 | None = None
    end_year: UInt16 | None = None
    notes: str | None = None


class Body(DomainModel):
    style: str | None = None
    doors: UInt8 | None = None
    seats: UInt8 | None = None
    rows: UInt8 | None = None
    platform: str | None = None
    drag_coefficient_cd: float | None = None


class Dimensions(DomainModel):
    length_mm: float | None = None
    width_mm: float | None = None
    width_with_mirrors_mm: float | None = None
    height_mm: float | None = None
    wheelbase_mm: float | None = None
    ground_clearance_mm: float | None = None
    turning_circle_m: float | None = None


class Weights(DomainModel):
    curb_weight_kg: float | None = None
    gross_vehicle_weight_kg: float | None = None
    max_payload_kg: float | None = None
    roof_load_kg: float | None = None


class Capacity(DomainModel):
    cargo_l: float | None = None
    cargo_max_l: float | None = None
    frunk_l: float | None = None
    towing_braked_kg: float | None = None
    towing_unbraked_kg: float | None = None
    towing_vertical_load_kg: float | None = None


class Performance(DomainModel):
    acceleration_0_100_kmh_s: float | None = None
    acceleration_0_60_mph_s: float | None = None
    top_speed_kmh: float | None = None
    quarter_mile_s: float | None = None


class TirePressure(DomainModel):
    front_kpa: float | None = None
    rear_kpa: float | None = None


class WheelsTires(DomainModel):
    standard_wheel_size_in: float | None = None
    optional_wheel_sizes_in: list[float] | None = None
    tire_sizes: list[str] | None = None
    recommended_pressure_kpa: TirePressure | None = None
    notes: str | None = None


class Msrp(DomainModel):
    currency: str
    amount: float
    country: str | None = None
    year: UInt16 | None = None
    notes: str | None = None


class Pricing(DomainModel):
    msrp: list[Msrp] | None = None


class Software(DomainModel):
    os: str | None = None
    ota_supported: bool | None = None
    notes: str | None = None


class Links(DomainModel):
    manufacturer_url: str | None = None
    press_kit_url: str | None = None
    spec_sheet_url: str | None = None
    configurator_url: str | None = None


class Images(DomainModel):
    exterior_url: str | None = None
    interior_url: str | None = None
    charging_curve_plot_url: str | None = None


class Metadata(DomainModel):
    created_at: str | None = None
    updated_at: str | None = None
    contributors: list[str] | None = None
    data_quality: str | None = None
    internal_notes: str | None = None


class Source(DomainModel):
    source_type: SourceType = Field(alias="type")
    title: str
    url: str
    accessed_at: str
    publisher: str | None = None
    license: str | None = None
    notes: str | None = None

    def is_official(self) -> bool:
        return self.source_type in (SourceType.OEM, SourceType.REGULATORY)

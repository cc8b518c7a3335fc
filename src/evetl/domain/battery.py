"""Traction battery description."""

from __future__ import annotations

from evetl.domain.enums import ThermalManagement
from evetl.domain.types import DomainModel, UInt32


class Preconditioning(DomainModel):
    supported: bool
    modes: list[str] | None = None
    notes: str | None = None


class Warranty(DomainModel):
    years: UInt32 | None = None
    distance_km: UInt32 | None = None
    capacity_retention_percent: float | None = None


class UsableSocWindow(DomainModel):
    min_percent: float | None = None
    max_percent: float | None = None
    notes: str | None = None


class Battery(DomainModel):
    manufacturer: str | None = None
    chemistry: str | None = None
    cathode_material: str | None = None
    pack_capacity_kwh_gross: float | None = None
    pack_capacity_kwh_net: float | None = None
    pack_voltage_nominal_v: float | None = None
    pack_voltage_max_v: float | None = None
    pack_voltage_min_v: float | None = None
    cell_count: UInt32 | None = None
    module_count: UInt32 | None = None
    thermal_management: ThermalManagement | None = None
    heat_pump: bool | None = None
    preconditioning: Preconditioning | None = None
    warranty: Warranty | None = None
    usable_soc_window_percent: UsableSocWindow | None = None

    def has_capacity(self) -> bool:
        """At least one of gross or net capacity is known."""
        return self.pack_capacity_kwh_gross is not None or self.pack_capacity_kwh_net is not None

    def usable_capacity_kwh(self) -> float | None:
        if self.pack_capacity_kwh_net is not None:
            return self.pack_capacity_kwh_net
        return self.pack_capacity_kwh_gross

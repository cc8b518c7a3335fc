"""Charge ports, AC/DC charging and bidirectional power."""

from __future__ import annotations

from evetl.domain.enums import (
    ChargeCurveType,
    ChargerVoltageClass,
    ConnectorType,
    PortKind,
    PortLocation,
    PortPosition,
)
from evetl.domain.types import DomainModel, UInt8


class ChargePortLocation(DomainModel):
    side: PortLocation | None = None
    position: PortPosition | None = None
    notes: str | None = None


class ChargePort(DomainModel):
    kind: PortKind
    connector: ConnectorType
    location: ChargePortLocation | None = None
    covers: str | None = None
    light: bool | None = None
    motorized: bool | None = None
    notes: str | None = None


class VoltageRange(DomainModel):
    min_v: float | None = None
    max_v: float | None = None


class PowerLimitByVoltage(DomainModel):
    voltage_class: str
    max_power_kw: float
    notes: str | None = None


class ChargingAc(DomainModel):
    max_power_kw: float
    supported_power_steps_kw: list[float] | None = None
    phases: UInt8 | None = None
    voltage_range_v: VoltageRange | None = None
    frequency_hz: float | None = None
    max_current_a: float | None = None
    onboard_charger_count: UInt8 | None = None
    notes: str | None = None


class ChargingDc(DomainModel):
    max_power_kw: float
    voltage_range_v: VoltageRange | None = None
    max_current_a: float | None = None
    architecture_voltage_class: ChargerVoltageClass | None = None
    power_limits_by_voltage: list[PowerLimitByVoltage] | None = None
    notes: str | None = None


class ChargingProtocols(DomainModel):
    ac: list[str] | None = None
    dc: list[str] | None = None
    plug_and_charge: bool | None = None
    notes: str | None = None


class Conditions(DomainModel):
    battery_temp_c: float | None = None
    ambient_temp_c: float | None = None
    preconditioning: bool | None = None
    charger_power_kw: float | None = None
    notes: str | None = None


class ChargeCurvePoint(DomainModel):
    soc_percent: float
    power_kw: float | None = None
    current_a: float | None = None
    voltage_v: float | None = None


class ChargeCurve(DomainModel):
    curve_type: ChargeCurveType
    points: list[ChargeCurvePoint]
    conditions: Conditions | None = None
    source_url: str | None = None
    notes: str | None = None


class ChargingTimeEntry(DomainModel):
    power_kw: float
    from_soc_percent: float
    to_soc_percent: float
    time_min: float
    conditions: Conditions | None = None
    notes: str | None = None


class DcChargingTimeEntry(DomainModel):
    charger_power_kw: float
    from_soc_percent: float
    to_soc_percent: float
    time_min: float
    conditions: Conditions | None = None
    notes: str | None = None


class ChargingTime(DomainModel):
    ac: list[ChargingTimeEntry] | None = None
    dc: list[DcChargingTimeEntry] | None = None


class Charging(DomainModel):
    ac: ChargingAc | None = None
    dc: ChargingDc | None = None
    protocols: ChargingProtocols | None = None
    dc_charge_curve: ChargeCurve | None = None
    charging_time: ChargingTime | None = None


class V2LOutlet(DomainModel):
    kind: str
    count: UInt8 | None = None
    location: str | None = None
    notes: str | None = None


class V2L(DomainModel):
    supported: bool
    max_power_kw: float | None = None
    outlets: list[V2LOutlet] | None = None
    notes: str | None = None


class V2H(DomainModel):
    supported: bool
    max_power_kw: float | None = None
    connector: str | None = None
    protocols: list[str] | None = None
    notes: str | None = None


class V2G(DomainModel):
    supported: bool
    max_power_kw: float | None = None
    connector: str | None = None
    protocols: list[str] | None = None
    notes: str | None = None


class V2X(DomainModel):
    v2l: V2L | None = None
    v2h: V2H | None = None
    v2g: V2G | None = None

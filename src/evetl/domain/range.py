"""Rated and real-world range figures."""

from __future__ import annotations

from evetl.domain.enums import RangeCycle, RealWorldProfile
from evetl.domain.types import DomainModel


class RangeRated(DomainModel):
    cycle: RangeCycle
    range_km: float
    notes: str | None = None


class RealWorldConditions(DomainModel):
    weather: str | None = None
    speed_kmh: float | None = None


class RangeRealWorld(DomainModel):
    profile: RealWorldProfile
    range_km: float
    conditions: RealWorldConditions | None = None
    notes: str | None = None


class Range(DomainModel):
    rated: list[RangeRated]
    real_world: list[RangeRealWorld] | None = None

    def range_for(self, cycle: RangeCycle) -> float | None:
        for entry in self.rated:
            if entry.cycle is cycle:
                return entry.range_km
        return None

    def wltp_range_km(self) -> float | None:
        return self.range_for(RangeCycle.WLTP)

    def epa_range_km(self) -> float | None:
        return self.range_for(RangeCycle.EPA)

    def best_rated_range_km(self) -> float | None:
        return max((entry.range_km for entry in self.rated), default=None)


class Efficiency(DomainModel):
    energy_consumption_wh_per_km: float | None = None
    mpge: float | None = None
    notes: str | None = None

    def km_per_kwh(self) -> float | None:
        if not self.energy_consumption_wh_per_km:
            return None
        return 1000.0 / self.energy_consumption_wh_per_km

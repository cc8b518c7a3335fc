"""Drive units."""

from __future__ import annotations

from pydantic import Field

from evetl.domain.enums import Drivetrain, MotorPosition
from evetl.domain.types import DomainModel, UInt8


class Motor(DomainModel):
    position: MotorPosition
    motor_type: str | None = Field(default=None, alias="type")
    power_kw: float | None = None
    torque_nm: float | None = None
    cooling: str | None = None


class Transmission(DomainModel):
    gears: UInt8 | None = None
    transmission_type: str | None = Field(default=None, alias="type")


class Powertrain(DomainModel):
    drivetrain: Drivetrain
    system_power_kw: float | None = None
    system_torque_nm: float | None = None
    motors: list[Motor] | None = None
    transmission: Transmission | None = None

    def motor_count(self) -> int:
        return len(self.motors or [])

    def total_power_kw(self) -> float | None:
        """System power, or the sum of known motor outputs."""
        if self.system_power_kw is not None:
            return self.system_power_kw
        if self.motors is None:
            return None
        return sum(motor.power_kw for motor in self.motors if motor.power_kw is not None)

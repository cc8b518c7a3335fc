"""Enumerations used by the vehicle record."""

from __future__ import annotations

from enum import Enum


class VehicleType(str, Enum):
    PASSENGER_CAR = "passenger_car"
    SUV = "suv"
    PICKUP = "pickup"
    VAN = "van"
    BUS = "bus"
    MOTORCYCLE = "motorcycle"
    SCOOTER = "scooter"
    COMMERCIAL = "commercial"
    TRUCK = "truck"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _VEHICLE_TYPE_LABELS.get(self, self.value.replace("_", " ").title())


_VEHICLE_TYPE_LABELS = {VehicleType.SUV: "SUV"}


class Drivetrain(str, Enum):
    FWD = "fwd"
    RWD = "rwd"
    AWD = "awd"
    FOUR_WD = "4wd"

    @property
    def label(self) -> str:
        return self.value.upper()


class MotorPosition(str, Enum):
    FRONT = "front"
    REAR = "rear"
    OTHER = "other"


class ThermalManagement(str, Enum):
    LIQUID = "liquid"
    AIR = "air"
    PASSIVE = "passive"
    REFRIGERANT = "refrigerant"
    NONE = "none"


class PortKind(str, Enum):
    AC_ONLY = "ac_only"
    DC_ONLY = "dc_only"
    COMBO = "combo"


class ConnectorType(str, Enum):
    TYPE1 = "type1"
    TYPE2 = "type2"
    CCS1 = "ccs1"
    CCS2 = "ccs2"
    NACS = "nacs"
    CHADEMO = "chademo"
    GB_T_AC = "gb_t_ac"
    GB_T_DC = "gb_t_dc"
    TESLA_TYPE2 = "tesla_type2"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _CONNECTOR_LABELS[self]


_CONNECTOR_LABELS = {
    ConnectorType.TYPE1: "Type 1",
    ConnectorType.TYPE2: "Type 2",
    ConnectorType.CCS1: "CCS1",
    ConnectorType.CCS2: "CCS2",
    ConnectorType.NACS: "NACS",
    ConnectorType.CHADEMO: "CHAdeMO",
    ConnectorType.GB_T_AC: "GB/T AC",
    ConnectorType.GB_T_DC: "GB/T DC",
    ConnectorType.TESLA_TYPE2: "Tesla Type 2",
    ConnectorType.OTHER: "Other",
}


class PortLocation(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    REAR = "rear"
    CENTER = "center"


class PortPosition(str, Enum):
    FRONT = "front"
    REAR = "rear"
    MID = "mid"


class ChargerVoltageClass(str, Enum):
    V400 = "400v"
    V800 = "800v"
    OTHER = "other"


class ChargeCurveType(str, Enum):
    POWER_BY_SOC = "power_by_soc"
    CURRENT_BY_SOC = "current_by_soc"


class RangeCycle(str, Enum):
    WLTP = "wltp"
    EPA = "epa"
    NEDC = "nedc"
    CLTC = "cltc"
    JC08 = "jc08"
    OTHER = "other"

    @property
    def label(self) -> str:
        return "Other" if self is RangeCycle.OTHER else self.value.upper()


class RealWorldProfile(str, Enum):
    HIGHWAY = "highway"
    CITY = "city"
    MIXED = "mixed"
    COLD_WEATHER = "cold_weather"
    WINTER = "winter"
    SUMMER = "summer"


class AvailabilityStatus(str, Enum):
    PRODUCTION = "production"
    DISCONTINUED = "discontinued"
    CONCEPT = "concept"
    ANNOUNCED = "announced"
    PROTOTYPE = "prototype"


class SourceType(str, Enum):
    OEM = "oem"
    REGULATORY = "regulatory"
    PRESS = "press"
    COMMUNITY = "community"
    TESTING_ORG = "testing_org"

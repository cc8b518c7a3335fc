"""Business rules a compiled vehicle must satisfy before export."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from evetl.domain.types import SlugName
from evetl.domain.vehicle import Vehicle

MIN_YEAR = 1900
MAX_YEAR = 2100

_SLUG_PATTERN = re.compile(r"[a-z0-9_]+")


class ViolationKind(str, Enum):
    MISSING_BATTERY_CAPACITY = "missing_battery_capacity"
    MISSING_CHARGE_PORT = "missing_charge_port"
    MISSING_RATED_RANGE = "missing_rated_range"
    MISSING_SOURCE = "missing_source"
    INVALID_SLUG = "invalid_slug"
    INVALID_YEAR = "invalid_year"
    EMPTY_VALUE = "empty_value"


@dataclass(frozen=True, slots=True)
class Violation:
    """A single broken rule, with the offending value or field if any."""

    kind: ViolationKind
    value: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind is ViolationKind.MISSING_BATTERY_CAPACITY:
            return "At least one battery capacity (gross or net) is required"
        if self.kind is ViolationKind.MISSING_CHARGE_PORT:
            return "At least one charge port is required"
        if self.kind is ViolationKind.MISSING_RATED_RANGE:
            return "At least one rated range entry is required"
        if self.kind is ViolationKind.MISSING_SOURCE:
            return "At least one source is required"
        if self.kind is ViolationKind.INVALID_SLUG:
            return (
                f"Invalid slug format: '{self.value}'. "
                "Must be lowercase alphanumeric with underscores"
            )
        if self.kind is ViolationKind.INVALID_YEAR:
            return f"Invalid year: {self.value}. Must be between {MIN_YEAR} and {MAX_YEAR}"
        return f"Empty value not allowed for field: {self.value}"

    def __str__(self) -> str:
        return self.message


def validate_slug(value: str) -> Optional[Violation]:
    if not value:
        return Violation(ViolationKind.EMPTY_VALUE, "slug")
    if not _SLUG_PATTERN.fullmatch(value):
        return Violation(ViolationKind.INVALID_SLUG, value)
    return None


def validate_year(value: int) -> Optional[Violation]:
    if not MIN_YEAR <= value <= MAX_YEAR:
        return Violation(ViolationKind.INVALID_YEAR, str(value))
    return None


def validate_slug_name(identity: SlugName) -> Optional[Violation]:
    violation = validate_slug(identity.slug)
    if violation is not None:
        return violation
    if not identity.name:
        return Violation(ViolationKind.EMPTY_VALUE, "name")
    return None


def validate_vehicle(vehicle: Vehicle) -> List[Violation]:
    """Return every rule the vehicle breaks; an empty list means valid."""
    checks = [
        validate_slug_name(vehicle.make),
        validate_slug_name(vehicle.model),
        validate_year(vehicle.year),
        validate_slug_name(vehicle.trim),
    ]
    if vehicle.variant is not None:
        checks.append(validate_slug(vehicle.variant.slug))
    violations = [violation for violation in checks if violation is not None]

    if not vehicle.battery.has_capacity():
        violations.append(Violation(ViolationKind.MISSING_BATTERY_CAPACITY))
    if not vehicle.charge_ports:
        violations.append(Violation(ViolationKind.MISSING_CHARGE_PORT))
    if not vehicle.range.rated:
        violations.append(Violation(ViolationKind.MISSING_RATED_RANGE))
    if not vehicle.sources:
        violations.append(Violation(ViolationKind.MISSING_SOURCE))
    return violations

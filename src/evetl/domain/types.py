"""Shared field types and identity values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

UInt8 = Annotated[int, Field(ge=0, le=255)]
UInt16 = Annotated[int, Field(ge=0, le=65535)]
UInt32 = Annotated[int, Field(ge=0, le=4294967295)]


class DomainModel(BaseModel):
    """Base for nested record parts; unknown keys are ignored."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)


class SlugName(DomainModel):
    slug: str
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class VehicleId:
    """Identity of a record, derived from its slugs."""

    make_slug: str
    model_slug: str
    year: int
    trim_slug: str
    variant_slug: Optional[str] = None

    def canonical_id(self) -> str:
        parts = ["oed", self.make_slug, self.model_slug, str(self.year), self.trim_slug]
        if self.variant_slug is not None:
            parts.append(self.variant_slug)
        return ":".join(parts)

    def __str__(self) -> str:
        return self.canonical_id()

"""Core ETL data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from evetl.domain.vehicle import Vehicle


class FileRole(str, Enum):
    """Layer a dataset file contributes to an assembled record."""

    MODEL_BASE = "model_base"
    YEAR_BASE = "year_base"
    VARIANT = "variant"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]


_ROLE_RANK = {FileRole.MODEL_BASE: 0, FileRole.YEAR_BASE: 1, FileRole.VARIANT: 2}


class ErrorReporting(str, Enum):
    """How much detail the assembler reports for unproducible files."""

    DETAILED = "detailed"
    MINIMAL = "minimal"


@dataclass(frozen=True, slots=True)
class PathInfo:
    """What a dataset path says about the file it names."""

    make_slug: str
    model_slug: str
    year: Optional[int]
    role: FileRole


@dataclass(frozen=True, slots=True)
class ClassifiedFile:
    """A discovered JSON fragment with its inferred layer."""

    path: Path
    relative_path: str
    make_slug: str
    model_slug: str
    year: Optional[int]
    role: FileRole
    content: Any

    @property
    def sort_key(self) -> tuple:
        return (
            self.make_slug,
            self.model_slug,
            self.year is not None,
            self.year or 0,
            self.role.rank,
            self.relative_path,
        )


@dataclass(frozen=True, slots=True)
class CandidateContext:
    """Where an assembled candidate came from."""

    make_slug: str
    model_slug: str
    year: Optional[int]
    path: Path
    role: FileRole
    trim_slug: Optional[str] = None

    @property
    def filename(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return f"{self.make_slug}/{self.model_slug}/{self.year}/{self.filename}"


@dataclass(frozen=True, slots=True)
class AssembledCandidate:
    """A fully layered, not yet decoded, vehicle tree."""

    context: CandidateContext
    tree: Any


@dataclass(slots=True)
class PipelineError:
    """A non-fatal problem collected while building a batch."""

    stage: str
    kind: str
    context: str
    message: str
    violations: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"[{self.stage}] {self.context}: {self.message}"


@dataclass(slots=True)
class BatchResult:
    """Valid records in canonical order plus every collected error."""

    records: List[Vehicle] = field(default_factory=list)
    errors: List[PipelineError] = field(default_factory=list)
    files_scanned: int = 0
    candidates: int = 0
    decoded: int = 0
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.errors

    def errors_for(self, stage: str) -> List[PipelineError]:
        return [error for error in self.errors if error.stage == stage]

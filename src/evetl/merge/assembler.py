"""Fold model base, year base and variant layers into candidate trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from evetl.ingestion.classifier import expected_year_base_stem
from evetl.merge.strategy import deep_merge
from evetl.models import (
    AssembledCandidate,
    CandidateContext,
    ClassifiedFile,
    ErrorReporting,
    FileRole,
    PipelineError,
)

LOGGER = logging.getLogger(__name__)

STAGE = "assembly"


@dataclass(slots=True)
class AssemblyResult:
    candidates: List[AssembledCandidate] = field(default_factory=list)
    errors: List[PipelineError] = field(default_factory=list)


def _trim_slug(tree: Any) -> Optional[str]:
    trim = tree.get("trim") if isinstance(tree, dict) else None
    slug = trim.get("slug") if isinstance(trim, dict) else None
    return slug if isinstance(slug, str) else None


def _candidate(source: ClassifiedFile, tree: Any) -> AssembledCandidate:
    context = CandidateContext(
        make_slug=source.make_slug,
        model_slug=source.model_slug,
        year=source.year,
        path=source.path,
        role=source.role,
        trim_slug=_trim_slug(tree),
    )
    return AssembledCandidate(context=context, tree=tree)


def _group_by_model(
    files: Sequence[ClassifiedFile],
) -> Dict[tuple[str, str], List[ClassifiedFile]]:
    groups: Dict[tuple[str, str], List[ClassifiedFile]] = {}
    for item in files:
        groups.setdefault((item.make_slug, item.model_slug), []).append(item)
    return groups


def _group_by_year(files: Sequence[ClassifiedFile]) -> Dict[int, List[ClassifiedFile]]:
    years: Dict[int, List[ClassifiedFile]] = {}
    for item in files:
        if item.year is not None:
            years.setdefault(item.year, []).append(item)
    return years


def _error(kind: str, make: str, model: str, year: int, detail: str, message: str) -> PipelineError:
    return PipelineError(
        stage=STAGE,
        kind=kind,
        context=f"{make}/{model}/{year}{detail}",
        message=message,
    )


class Assembler:
    """Builds candidates for every (make, model, year) in a scan."""

    def __init__(self, *, reporting: ErrorReporting = ErrorReporting.DETAILED) -> None:
        self.reporting = reporting

    def assemble(self, files: Sequence[ClassifiedFile]) -> AssemblyResult:
        result = AssemblyResult()
        for (make, model), model_files in _group_by_model(files).items():
            base_file = next((f for f in model_files if f.role is FileRole.MODEL_BASE), None)
            base: Any = base_file.content if base_file is not None else {}

            for year, year_files in _group_by_year(model_files).items():
                self._assemble_year(make, model, year, base, year_files, result)
        return result

    def _assemble_year(
        self,
        make: str,
        model: str,
        year: int,
        base: Any,
        year_files: Sequence[ClassifiedFile],
        result: AssemblyResult,
    ) -> None:
        year_bases = [f for f in year_files if f.role is FileRole.YEAR_BASE]
        variants = [f for f in year_files if f.role is FileRole.VARIANT]
        detailed = self.reporting is ErrorReporting.DETAILED

        if not year_bases:
            expected = f"{expected_year_base_stem(make, model)}.json"
            LOGGER.warning("Missing year base %s for %s/%s/%s", expected, make, model, year)
            result.errors.append(
                _error(
                    "missing_year_base",
                    make,
                    model,
                    year,
                    "",
                    f"No year base file found; expected {expected}",
                )
            )
            if detailed:
                for variant in variants:
                    result.errors.append(
                        _error(
                            "orphaned_variant",
                            make,
                            model,
                            year,
                            f"/{variant.path.name}",
                            f"Variant cannot be assembled without {expected}",
                        )
                    )
            return

        year_base, extras = year_bases[0], year_bases[1:]
        for extra in extras:
            LOGGER.warning(
                "Ignoring %s for %s/%s/%s; %s is already the year base",
                extra.path.name,
                make,
                model,
                year,
                year_base.path.name,
            )

        year_tree = deep_merge(base, year_base.content)
        result.candidates.append(_candidate(year_base, year_tree))

        for variant in variants:
            result.candidates.append(_candidate(variant, deep_merge(year_tree, variant.content)))


def assemble(
    files: Sequence[ClassifiedFile],
    *,
    reporting: ErrorReporting = ErrorReporting.DETAILED,
) -> AssemblyResult:
    """Assemble every candidate the scanned files can produce."""
    return Assembler(reporting=reporting).assemble(files)

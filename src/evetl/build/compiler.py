"""Decode assembled trees into typed vehicle records."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Sequence, Tuple

from pydantic import ValidationError

from evetl.domain.vehicle import Vehicle
from evetl.errors import DecodeError
from evetl.models import AssembledCandidate, PipelineError

LOGGER = logging.getLogger(__name__)

STAGE = "decode"


def decode_vehicle(tree: Any) -> Vehicle:
    """Strictly decode a JSON tree into a Vehicle via its JSON text."""
    return Vehicle.model_validate_json(json.dumps(tree))


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def compile_candidate(candidate: AssembledCandidate) -> Vehicle:
    """Decode one candidate or raise DecodeError describing why it does not fit."""
    context = candidate.context
    try:
        return decode_vehicle(candidate.tree)
    except ValidationError as exc:
        raise DecodeError(
            context.make_slug,
            context.model_slug,
            context.year,
            context.filename,
            _describe(exc),
        ) from exc


def compile_all(
    candidates: Sequence[AssembledCandidate],
) -> Tuple[List[Vehicle], List[PipelineError]]:
    """Decode every candidate, collecting failures instead of stopping."""
    records: List[Vehicle] = []
    errors: List[PipelineError] = []
    for candidate in candidates:
        try:
            records.append(compile_candidate(candidate))
        except DecodeError as exc:
            LOGGER.warning("Failed to decode %s: %s", candidate.context, exc.message)
            errors.append(
                PipelineError(
                    stage=STAGE,
                    kind="decode_failed",
                    context=str(candidate.context),
                    message=exc.message,
                )
            )
    return records, errors

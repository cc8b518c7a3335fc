"""Partition compiled records into valid and invalid sets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from evetl.domain.vehicle import Vehicle
from evetl.models import PipelineError
from evetl.validation import Violation, validate_vehicle

LOGGER = logging.getLogger(__name__)

STAGE = "validation"

Validator = Callable[[Vehicle], List[Violation]]


@dataclass(slots=True)
class GateResult:
    valid: List[Vehicle] = field(default_factory=list)
    invalid: List[Tuple[str, List[Violation]]] = field(default_factory=list)

    def errors(self) -> List[PipelineError]:
        """One bundled error per invalid record."""
        return [
            PipelineError(
                stage=STAGE,
                kind="validation_failed",
                context=record_id,
                message="; ".join(violation.message for violation in violations),
                violations=[violation.message for violation in violations],
            )
            for record_id, violations in self.invalid
        ]


def gate(records: Sequence[Vehicle], validator: Validator = validate_vehicle) -> GateResult:
    result = GateResult()
    for record in records:
        violations = validator(record)
        if not violations:
            result.valid.append(record)
            continue
        record_id = record.id().canonical_id()
        LOGGER.warning(
            "Validation failed for %s: %s",
            record_id,
            "; ".join(violation.message for violation in violations),
        )
        result.invalid.append((record_id, list(violations)))

    LOGGER.info(
        "Validation complete: %d valid, %d invalid", len(result.valid), len(result.invalid)
    )
    return result

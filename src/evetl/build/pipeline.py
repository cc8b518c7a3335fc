"""Scan, assemble, compile and gate a dataset into one batch."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, List, Sequence

from evetl.build.compiler import compile_all
from evetl.build.gate import Validator, gate
from evetl.config import OUTPUT_FILENAMES, STATISTICS_FILENAME, AppConfig
from evetl.domain.vehicle import Vehicle
from evetl.ingestion.scanner import scan
from evetl.merge.assembler import assemble
from evetl.models import BatchResult
from evetl.output.csv_writer import write_csv
from evetl.output.json_writer import write_json
from evetl.output.sqlite_store import write_sqlite
from evetl.output.statistics import write_statistics
from evetl.validation import validate_vehicle

LOGGER = logging.getLogger(__name__)

WRITERS = {
    "json": write_json,
    "sqlite": write_sqlite,
    "csv": write_csv,
}


def sort_records(records: Sequence[Vehicle]) -> List[Vehicle]:
    """Canonical output order: make, model, year, trim."""
    return sorted(
        records,
        key=lambda record: (record.make.slug, record.model.slug, record.year, record.trim.slug),
    )


class Pipeline:
    """Coordinates one run over a dataset directory."""

    def __init__(self, config: AppConfig, *, validator: Validator = validate_vehicle) -> None:
        if config.input_dir is None:
            raise ValueError("AppConfig.input_dir is required to run the pipeline")
        self.config = config
        self.validator = validator

    def run(self) -> BatchResult:
        """Build the batch; raises ScanError only for an unreadable dataset."""
        start = time.perf_counter()
        files = scan(self.config.input_dir, workers=self.config.scan_workers)

        assembly = assemble(files, reporting=self.config.reporting)
        LOGGER.info("Assembled %d candidates", len(assembly.candidates))

        records, decode_errors = compile_all(assembly.candidates)
        LOGGER.info("Decoded %d vehicles", len(records))

        checked = gate(records, self.validator)

        return BatchResult(
            records=sort_records(checked.valid),
            errors=[*assembly.errors, *decode_errors, *checked.errors()],
            files_scanned=len(files),
            candidates=len(assembly.candidates),
            decoded=len(records),
            elapsed_seconds=time.perf_counter() - start,
        )

    def write_outputs(self, result: BatchResult, output_dir: Path) -> Dict[str, Path]:
        """Write every configured format plus statistics.json."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written: Dict[str, Path] = {}
        for fmt in self.config.formats:
            writer = WRITERS.get(fmt)
            if writer is None:
                LOGGER.warning("Unknown format: %s", fmt)
                continue
            written[fmt] = writer(result.records, output_dir / OUTPUT_FILENAMES[fmt])
            LOGGER.info("Generated: %s", written[fmt])

        written["statistics"] = write_statistics(
            result.records, result.elapsed_seconds, output_dir / STATISTICS_FILENAME
        )
        LOGGER.info("Generated: %s", written["statistics"])
        return written


def run_pipeline(config: AppConfig, *, validator: Validator = validate_vehicle) -> BatchResult:
    return Pipeline(config, validator=validator).run()

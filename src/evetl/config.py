"""Application configuration defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from evetl.models import ErrorReporting

LOGGER = logging.getLogger(__name__)

ETL_VERSION = "0.1.0"
SCHEMA_VERSION = "1.0.0"
SUPPORTED_FORMATS = ("json", "sqlite", "csv")
DEFAULT_FORMATS = ("json", "sqlite")

OUTPUT_FILENAMES = {
    "json": "vehicles.json",
    "sqlite": "vehicles.db",
    "csv": "vehicles.csv",
}
STATISTICS_FILENAME = "statistics.json"


def parse_formats(value: str | Iterable[str]) -> Tuple[str, ...]:
    """Normalise a comma separated format list, dropping unknown entries."""
    items = value.split(",") if isinstance(value, str) else list(value)
    formats: list[str] = []
    for item in items:
        name = item.strip().lower()
        if not name:
            continue
        if name not in SUPPORTED_FORMATS:
            LOGGER.warning("Unknown format: %s", name)
            continue
        if name not in formats:
            formats.append(name)
    return tuple(formats)


@dataclass(slots=True)
class AppConfig:
    input_dir: Path | None = None
    output_dir: Path = Path("output")
    formats: Tuple[str, ...] = DEFAULT_FORMATS
    scan_workers: int = 4
    reporting: ErrorReporting = ErrorReporting.DETAILED
    fail_on_errors: bool = False

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        if self.input_dir is not None:
            self.input_dir = Path(self.input_dir)
        self.scan_workers = max(1, self.scan_workers)

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        if self.output_dir.is_absolute() or base_dir is None:
            return self.output_dir
        return base_dir / self.output_dir

    def output_path(self, fmt: str, base_dir: Path | None = None) -> Path:
        return self.resolve_output_dir(base_dir) / OUTPUT_FILENAMES[fmt]

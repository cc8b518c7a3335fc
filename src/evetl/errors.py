"""Exceptions raised by the ETL pipeline."""

from __future__ import annotations

from pathlib import Path


class ScanError(Exception):
    """Fatal error while reading the dataset; the run cannot continue."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class DatasetReadError(ScanError):
    """A directory or file of the dataset could not be read."""


class DatasetParseError(ScanError):
    """A discovered file does not contain valid JSON."""


class DecodeError(Exception):
    """An assembled candidate does not fit the vehicle record."""

    def __init__(
        self,
        make: str,
        model: str,
        year: int | None,
        filename: str,
        message: str,
    ) -> None:
        super().__init__(f"{make}/{model}/{year}/{filename}: {message}")
        self.make = make
        self.model = model
        self.year = year
        self.filename = filename
        self.message = message

    def as_tuple(self) -> tuple[str, str, int | None, str, str]:
        return (self.make, self.model, self.year, self.filename, self.message)

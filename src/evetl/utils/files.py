"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Iterator


def iter_json_paths(root: Path) -> Iterator[Path]:
    """Yield visible JSON files below root in sorted order.

    Anything inside a hidden directory is skipped along with hidden files.
    """
    for child in sorted(root.rglob("*")):
        relative = child.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if child.suffix.lower() == ".json" and child.is_file():
            yield child


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal {name}")


def read_json(path: Path) -> Any:
    """Load strict JSON; NaN and Infinity literals are rejected."""
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle, parse_constant=_reject_constant)


def compute_sha256(path: Path) -> str:
    """Compute SHA256 hash for a file."""
    sha = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 20), b""):
            sha.update(chunk)
    return sha.hexdigest()

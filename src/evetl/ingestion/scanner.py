"""Discover, classify and parse the files of a dataset directory."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, List

from evetl.errors import DatasetParseError, DatasetReadError
from evetl.ingestion.classifier import classify
from evetl.models import ClassifiedFile, PathInfo
from evetl.utils.files import iter_json_paths, read_json

LOGGER = logging.getLogger(__name__)


def _load(path: Path) -> Any:
    try:
        return read_json(path)
    except OSError as exc:
        raise DatasetReadError(path, f"Failed to read ({exc.strerror or exc})") from exc
    except ValueError as exc:
        raise DatasetParseError(path, f"Failed to parse JSON ({exc})") from exc
    except RecursionError as exc:
        raise DatasetParseError(path, "Failed to parse JSON (nesting too deep)") from exc


def discover(root: Path) -> List[tuple[Path, str, PathInfo]]:
    """Return (path, relative path, classification) for every eligible file."""
    root = Path(root)
    if not root.is_dir():
        raise DatasetReadError(root, "Dataset directory not found")

    found: List[tuple[Path, str, PathInfo]] = []
    skipped = 0
    for path in iter_json_paths(root):
        relative = path.relative_to(root).as_posix()
        info = classify(relative)
        if info is None:
            LOGGER.debug("Skipping %s: not part of the dataset layout", relative)
            skipped += 1
            continue
        found.append((path, relative, info))

    LOGGER.debug("Discovered %d dataset files, skipped %d", len(found), skipped)
    return found


def scan(root: Path, *, workers: int = 1) -> List[ClassifiedFile]:
    """Scan a dataset root into classified files in canonical order.

    Reading and parsing may use a thread pool; the first file that cannot
    be read or parsed aborts the whole scan with a ``ScanError``.
    """
    entries = discover(root)
    paths = [path for path, _, _ in entries]

    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            contents = list(pool.map(_load, paths))
    else:
        contents = [_load(path) for path in paths]

    files = [
        ClassifiedFile(
            path=path,
            relative_path=relative,
            make_slug=info.make_slug,
            model_slug=info.model_slug,
            year=info.year,
            role=info.role,
            content=content,
        )
        for (path, relative, info), content in zip(entries, contents)
    ]
    files.sort(key=lambda item: item.sort_key)

    LOGGER.info("Loaded %d vehicle files from %s", len(files), root)
    return files

"""Infer make, model, year and layer role from a dataset-relative path.

Layout rules::

    {make}/{model}/base.json                      model base
    {make}/{model}/{year}/{make}_{model}.json     year base
    {make}/{model}/{year}/{make}_{model}_x.json   variant
    {make}/{model}/{year}/plain.json              year base (no underscore)
    {make}/{model}/{year}/other_name.json         variant

Anything else is skipped, as are dotfiles and year directories that are
not a positive number.
"""

from __future__ import annotations

import re
from pathlib import PurePath, PurePosixPath
from typing import Optional, Union

from evetl.models import FileRole, PathInfo

MODEL_BASE_STEM = "base"
MAX_YEAR_SEGMENT = 65535

_DIGITS = re.compile(r"[0-9]+")


def expected_year_base_stem(make_slug: str, model_slug: str) -> str:
    return f"{make_slug}_{model_slug}"


def parse_year_segment(segment: str) -> Optional[int]:
    """Return the year a directory name denotes, or None if it is not one."""
    if not _DIGITS.fullmatch(segment):
        return None
    year = int(segment)
    if year < 1 or year > MAX_YEAR_SEGMENT:
        return None
    return year


def role_for_stem(stem: str, make_slug: str, model_slug: str) -> FileRole:
    expected = expected_year_base_stem(make_slug, model_slug)
    if stem == expected:
        return FileRole.YEAR_BASE
    if stem.startswith(f"{expected}_"):
        return FileRole.VARIANT
    if "_" not in stem:
        return FileRole.YEAR_BASE
    return FileRole.VARIANT


def classify(relative_path: Union[str, PurePath]) -> Optional[PathInfo]:
    """Classify a path relative to the dataset root; None means skip."""
    parts = PurePosixPath(PurePath(relative_path).as_posix()).parts
    if len(parts) < 2:
        return None

    filename = parts[-1]
    if filename.startswith("."):
        return None

    make_slug, model_slug = parts[0], parts[1]
    if not make_slug or not model_slug:
        return None
    stem = PurePosixPath(filename).stem

    if len(parts) == 3 and stem == MODEL_BASE_STEM:
        return PathInfo(make_slug, model_slug, None, FileRole.MODEL_BASE)

    if len(parts) == 4:
        year = parse_year_segment(parts[2])
        if year is None:
            return None
        return PathInfo(make_slug, model_slug, year, role_for_stem(stem, make_slug, model_slug))

    return None

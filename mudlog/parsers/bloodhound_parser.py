"""Parser for Bloodhound gas-detector exports.

Despite the .xls extension the export is a space-delimited text file:

    Depth  ROP   TG    C1   C2   C3  iC4  nC4  iC5  nC5  C4   CO2  Gamma ...
    4000   12.5  150   80   20   10  1    2    3    4    5.5  6    95.2

- Rows with fewer than `min_fields` fields (blank lines, notes) are skipped.
- Rows whose first field is not an integer are skipped (the header).
- Every other row is data; a non-numeric value in a used column aborts
  the whole parse.

The column layout lives in bloodhound_columns.yaml. This will break if the
export format ever changes.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import yaml

from mudlog.config import CHANNELS, FILE_ENCODING
from mudlog.errors import MalformedRowError
from mudlog.models.core import Measurement
from mudlog.models.working_set import WorkingSet

logger = logging.getLogger(__name__)

_LAYOUT: dict | None = None
_LAYOUT_PATH = Path(__file__).parent / "bloodhound_columns.yaml"

# Plain ASCII numbers only: no digit separators, no nan/inf
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _load_layout() -> dict:
    global _LAYOUT
    if _LAYOUT is not None:
        return _LAYOUT

    with open(_LAYOUT_PATH) as f:
        _LAYOUT = yaml.safe_load(f)
    return _LAYOUT


def parse_bloodhound_file(path: Path) -> WorkingSet:
    """Read a Bloodhound export into an (uncleaned) working set.

    Args:
        path: Path to the export file.

    Raises:
        MalformedRowError: a data row has a non-numeric value in a used column.
    """
    with open(path, encoding=FILE_ENCODING) as f:
        ws = parse_bloodhound_lines(f)

    logger.info("Read %d measurements from %s", len(ws), path)
    return ws


def parse_bloodhound_lines(lines: Iterable[str]) -> WorkingSet:
    """Parse export rows from any iterable of text lines."""
    layout = _load_layout()
    min_fields = layout["min_fields"]
    columns = layout["columns"]

    ws = WorkingSet()
    for line_number, line in enumerate(lines, start=1):
        fields = line.split()

        # Skip over rows without enough fields (like blanks)
        if len(fields) < min_fields:
            logger.debug("Line %d: %d fields, skipped", line_number, len(fields))
            continue

        # A non-integer first field mainly means the header
        depth = _parse_depth(fields[columns["depth"]])
        if depth is None:
            logger.debug("Line %d: first field %r is not a depth, skipped", line_number, fields[0])
            continue

        values = {}
        for name in CHANNELS:
            raw = fields[columns[name]]
            if not _DECIMAL_RE.fullmatch(raw):
                raise MalformedRowError(line_number, name, raw)
            values[name] = float(raw)

        ws.add(Measurement(depth=depth, **values))

    return ws


def _parse_depth(raw: str) -> int | None:
    # int() alone would also take "4_000" and non-ASCII digits
    if not _INTEGER_RE.fullmatch(raw):
        return None
    return int(raw)

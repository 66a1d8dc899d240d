"""Exceptions raised while reading and cleaning drilling logs."""

from __future__ import annotations


class MudlogError(Exception):
    """Base class for all mudlog failures."""


class MalformedRowError(MudlogError, ValueError):
    """A data row passed the shape and header checks but a field is not numeric."""

    def __init__(self, line_number: int, column: str, raw: str):
        self.line_number = line_number
        self.column = column
        self.raw = raw
        super().__init__(f"line {line_number}: cannot parse {column} value {raw!r}")


class TrimRangeError(MudlogError, ValueError):
    """No measurement lies at or above the requested minimum depth."""

    def __init__(self, min_depth: int, max_depth: int):
        self.min_depth = min_depth
        self.max_depth = max_depth
        super().__init__(f"no measurement reaches depth {min_depth} (trim window {min_depth}-{max_depth})")

"""Core data model: a single depth measurement from a mudlog."""

from __future__ import annotations

from dataclasses import astuple, dataclass, replace


@dataclass(frozen=True)
class Measurement:
    """Everything we keep from one row of the Bloodhound export.

    One row corresponds to one depth on the mudlog. Depth is the only
    identity: two measurements describe "the same row" when their depths
    are equal, regardless of the channel values.
    """

    depth: int  # ft
    rop: float = 0.0  # rate of penetration
    tg: float = 0.0  # total gas
    c1: float = 0.0
    c2: float = 0.0
    c3: float = 0.0
    c4: float = 0.0
    gamma: float = 0.0

    def with_depth(self, depth: int) -> Measurement:
        """Copy of this measurement moved to another depth."""
        return replace(self, depth=depth)

    def to_line(self) -> str:
        """Tab-joined fields: depth, rop, tg, c1, c2, c3, c4, gamma."""
        depth, *channels = astuple(self)
        return "\t".join([str(depth)] + [format_value(v) for v in channels])

    def __str__(self) -> str:
        return self.to_line()


def format_value(value: float) -> str:
    """Shortest round-trip text for a channel value, without a trailing '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def compare_depth(a: Measurement, b: Measurement) -> int:
    """Ascending-by-depth comparator for use with functools.cmp_to_key."""
    return (a.depth > b.depth) - (a.depth < b.depth)


def depth_key(m: Measurement) -> int:
    return m.depth

"""The working set: an ordered list of measurements and the passes that clean it.

Every pass mutates the set in place and walks the list by index, re-reading
its length after each insertion or removal, so rows added or dropped at the
current position are seen immediately. None of the passes sort; they only
compare adjacent rows, which assumes the export is already (mostly)
depth-ascending.

The order that yields a gap-free, duplicate-free table is::

    trim -> remove_duplicates -> remove_gaps

`WorkingSet.clean` runs exactly that sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass, field

import pandas as pd

from mudlog.config import CHANNELS, HEADER_COLUMNS
from mudlog.errors import TrimRangeError
from mudlog.models.core import Measurement

logger = logging.getLogger(__name__)


@dataclass
class CleaningReport:
    """Row counts from one `WorkingSet.clean` run."""

    trimmed: int = 0
    duplicates_removed: int = 0
    rows_filled: int = 0


@dataclass
class WorkingSetSummary:
    """Shape of a working set, as reported by `mudlog info`."""

    n_rows: int
    min_depth: int | None
    max_depth: int | None
    duplicate_depths: int  # adjacent pairs sharing a depth
    backward_steps: int  # adjacent pairs where depth decreases
    missing_depths: int  # depths absent between ascending neighbours

    def as_text(self) -> str:
        lines = [f"Rows: {self.n_rows}"]
        if self.n_rows:
            lines.append(f"Depth range: {self.min_depth} - {self.max_depth}")
        lines.append(f"Duplicate depths: {self.duplicate_depths}")
        lines.append(f"Backward steps: {self.backward_steps}")
        lines.append(f"Missing depths: {self.missing_depths}")
        return "\n".join(lines)


@dataclass
class WorkingSet:
    """Ordered measurements plus the operations that clean them.

    These operations all modify the object.
    """

    data: list[Measurement] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self.data)

    def __getitem__(self, index: int) -> Measurement:
        return self.data[index]

    @property
    def depths(self) -> list[int]:
        return [m.depth for m in self.data]

    def add(self, measurements: Measurement | Iterable[Measurement]) -> None:
        """Append one measurement or a sequence of them. No ordering is enforced."""
        if isinstance(measurements, Measurement):
            self.data.append(measurements)
        else:
            self.data.extend(measurements)

    def trim(self, min_depth: int, max_depth: int) -> int:
        """Keep the rows between `min_depth` and `max_depth`, inclusive.

        The kept slice runs from the first row with depth >= min_depth to the
        last row with depth <= max_depth, inclusive. If that last row comes
        before the first one the set ends up empty.

        Raises:
            TrimRangeError: no row reaches `min_depth`.

        Returns:
            Number of rows dropped.
        """
        first = next((i for i, m in enumerate(self.data) if m.depth >= min_depth), None)
        if first is None:
            raise TrimRangeError(min_depth, max_depth)

        last = next((i for i in range(len(self.data) - 1, -1, -1) if self.data[i].depth <= max_depth), -1)

        before = len(self.data)
        if last < first:
            self.data.clear()
        else:
            del self.data[last + 1:]
            del self.data[:first]

        dropped = before - len(self.data)
        logger.info("Trimmed to %d-%d: kept %d rows, dropped %d", min_depth, max_depth, len(self.data), dropped)
        return dropped

    def remove_duplicates(self) -> int:
        """Remove all but the first measurement at a given depth.

        Walking forward, any row whose depth does not exceed the row kept
        before it is dropped. Exact duplicates collapse to their first
        occurrence; a backward step in depth drops rows until the depth
        climbs past the kept one again.

        Returns:
            Number of rows removed.
        """
        removed = 0
        i = 0
        while i < len(self.data) - 1:
            depth = self.data[i].depth
            run = 0
            while i + 1 < len(self.data) and self.data[i + 1].depth <= depth:
                del self.data[i + 1]
                run += 1
            if run:
                logger.debug("Dropped %d rows after depth %d", run, depth)
                removed += run
            i += 1

        if removed:
            logger.info("Removed %d duplicate or out-of-order rows", removed)
        return removed

    def remove_gaps(self) -> int:
        """Fill missing depths by repeating the row above the gap.

        Each fill is a copy of the preceding row one foot deeper, so a gap
        of any size closes in a single call as the copies are themselves
        visited. Channel values are carried forward unchanged.

        Expects `remove_duplicates` to have run first. A pair that does not
        ascend is left alone and logged, since no amount of filling closes it.

        Returns:
            Number of rows inserted.
        """
        inserted = 0
        gap_start = None
        i = 0
        while i < len(self.data) - 1:
            current = self.data[i]
            following = self.data[i + 1]
            if following.depth > current.depth + 1:
                if gap_start is None:
                    gap_start = current.depth
                self.data.insert(i + 1, current.with_depth(current.depth + 1))
                inserted += 1
            else:
                if gap_start is not None:
                    logger.info("Filled gap between %d and %d", gap_start, following.depth)
                    gap_start = None
                if following.depth <= current.depth:
                    logger.warning("Depth does not ascend at %d -> %d; left unfilled", current.depth, following.depth)
            i += 1
        return inserted

    def clean(self, min_depth: int, max_depth: int) -> CleaningReport:
        """Trim, then remove duplicates, then fill gaps."""
        return CleaningReport(
            trimmed=self.trim(min_depth, max_depth),
            duplicates_removed=self.remove_duplicates(),
            rows_filled=self.remove_gaps(),
        )

    def to_text(self) -> str:
        """Render as a .las-like tab-delimited table with a header row."""
        lines = ["\t".join(HEADER_COLUMNS)]
        lines.extend(m.to_line() for m in self.data)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_text()

    def to_dataframe(self) -> pd.DataFrame:
        """One DataFrame row per measurement, in current order."""
        return pd.DataFrame([asdict(m) for m in self.data], columns=["depth", *CHANNELS])

    def summarize(self) -> WorkingSetSummary:
        """Count duplicate, backward and missing depths between adjacent rows."""
        df = self.to_dataframe()
        if df.empty:
            return WorkingSetSummary(0, None, None, 0, 0, 0)

        steps = df["depth"].diff().dropna()
        return WorkingSetSummary(
            n_rows=len(df),
            min_depth=int(df["depth"].min()),
            max_depth=int(df["depth"].max()),
            duplicate_depths=int((steps == 0).sum()),
            backward_steps=int((steps < 0).sum()),
            missing_depths=int((steps[steps > 1] - 1).sum()),
        )

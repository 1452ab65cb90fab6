from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnScan:
    """
    Outcome of probing a single column for black pixels.
    """
    x: int                  # Column index that was probed
    has_black: bool         # True if at least one pixel in the column is black
    hit_row: int | None     # Row of the black pixel that decided the result, if any
    inspections: int        # Number of pixels read before the answer was known
    via_fallback: bool      # True if the probe rows missed and the full scan ran

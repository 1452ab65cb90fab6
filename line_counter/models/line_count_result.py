from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple
from .image import Image


@dataclass
class LineCountResult:
    """
    Data object containing an Image and the vertical lines found in it.
    Each span is an inclusive (x_start, x_end) pair of adjacent black columns.
    """
    image: Image
    line_count: int
    spans: List[Tuple[int, int]] = field(default_factory=list)
    inspections: int = 0  # Total pixel reads across all columns

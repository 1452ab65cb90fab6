from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: RGB pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repository layer.
    """
    pixels: np.ndarray # Shape (H, W, 3), dtype uint8, RGB order. Read-only while counting.
    path: Path | None = None # Source of the image.

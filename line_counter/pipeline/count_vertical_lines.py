"""
Vertical Line Counting Pipeline
Loads one image from disk and counts the vertical black lines in it.
"""

import logging
from pathlib import Path
from typing import Union

from ..models.line_count_result import LineCountResult
from ..services.image_service import ImageService
from ..services.line_counter_service import LineCounterService

logger = logging.getLogger(__name__)


def count_vertical_lines(
    path: Union[str, Path],
    *,
    image_service: ImageService = ImageService(),
    line_counter_service: LineCounterService = LineCounterService(),
) -> LineCountResult:
    """
    Decode the image at *path* and count its vertical lines.

    Decoding errors propagate unchanged (FileNotFoundError, PermissionError,
    UnsupportedImageError, OSError); the caller decides how to report them.

    Args:
        path: Location of the image file
        image_service: Service for image I/O
        line_counter_service: Service for line detection

    Returns:
        LineCountResult: The decoded image, line count and line spans
    """
    path = Path(path).expanduser().resolve()
    img = image_service.load(path)
    result = line_counter_service.analyse(img)
    log_line_count(result)
    return result


def log_line_count(result: LineCountResult) -> None:
    """
    Log a one-line summary of a counting run.
    """
    path = result.image.path
    filename = Path(path).name if path else "<in-memory>"
    logger.info(f"{filename}: {result.line_count} vertical line(s), "
                f"{result.inspections} pixel reads")
    for i, (x_start, x_end) in enumerate(result.spans, 1):
        logger.debug(f"  line {i}: columns {x_start}-{x_end} (width {x_end - x_start + 1})")

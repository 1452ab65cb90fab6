from typing import Tuple
import logging

from ..models.image import Image
from ..models.column_scan import ColumnScan
from .image_service import ImageService
from .pixel_classifier_service import PixelClassifierService

logger = logging.getLogger(__name__)


class ColumnProbeService:
    """
    Decides whether an image column contains any black pixel.

    Tiered strategy:
      1. Probe the middle, first-quarter and third-quarter rows. A continuous
         vertical stroke is caught here in constant time.
      2. Otherwise scan every remaining row top to bottom. This keeps the
         answer exact for dashed, sparse or partial strokes.
    """

    def __init__(
        self,
        pixel_classifier: PixelClassifierService = None,
        image_service: ImageService = None,
    ):
        self.pixel_classifier = pixel_classifier or PixelClassifierService()
        self.image_service = image_service or ImageService()

    @staticmethod
    def probe_rows(height: int) -> Tuple[int, int, int]:
        """
        Return the probe rows (mid, q1, q3) in inspection order.
        For small heights they may coincide.
        """
        return height // 2, height // 4, (3 * height) // 4

    def scan_column(self, img: Image, x: int) -> ColumnScan:
        """
        Probe column x and report how the answer was reached.

        Args:
            img (Image): An image object
            x (int): Column index in [0, width)

        Returns:
            ColumnScan with the result and the number of pixel reads.

        Raises:
            IndexError: x is outside the image.
        """
        column = self.image_service.get_column(img, x)
        height = len(column)
        if height == 0:
            return ColumnScan(x=x, has_black=False, hit_row=None, inspections=0, via_fallback=False)

        is_black = self.pixel_classifier.is_black
        probes = self.probe_rows(height)
        inspections = 0

        for y in probes:
            inspections += 1
            if is_black(column[y]):
                return ColumnScan(x=x, has_black=True, hit_row=y,
                                  inspections=inspections, via_fallback=False)

        for y in range(height):
            if y in probes:
                continue
            inspections += 1
            if is_black(column[y]):
                logger.debug(f"Column {x}: probes missed, fallback hit at row {y}")
                return ColumnScan(x=x, has_black=True, hit_row=y,
                                  inspections=inspections, via_fallback=True)

        return ColumnScan(x=x, has_black=False, hit_row=None,
                          inspections=inspections, via_fallback=True)

    def column_has_black(self, img: Image, x: int) -> bool:
        return self.scan_column(img, x).has_black

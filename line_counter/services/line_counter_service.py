from typing import Iterable, Iterator, List, Tuple
import logging

from ..models.image import Image
from ..models.column_scan import ColumnScan
from ..models.line_count_result import LineCountResult
from .image_service import ImageService
from .column_probe_service import ColumnProbeService

logger = logging.getLogger(__name__)


class LineCounterService:
    """
    Counts vertical lines: maximal runs of adjacent columns that each hold at
    least one black pixel. Line thickness is irrelevant.
    """

    def __init__(
        self,
        column_probe_service: ColumnProbeService = None,
        image_service: ImageService = None,
    ):
        self.image_service = image_service or ImageService()
        self.column_probe_service = column_probe_service or ColumnProbeService(
            image_service=self.image_service
        )

    @staticmethod
    def count_runs(flags: Iterable[bool]) -> int:
        """
        Count false -> true transitions, with a virtual false before the first flag.
        """
        line_count = 0
        in_line = False
        for is_black in flags:
            if is_black:
                if not in_line:
                    line_count += 1
                    in_line = True
            else:
                in_line = False
        return line_count

    def iter_column_scans(self, img: Image) -> Iterator[ColumnScan]:
        """Yield one ColumnScan per column, left to right."""
        for x in range(self.image_service.get_width(img)):
            yield self.column_probe_service.scan_column(img, x)

    def count_lines(self, img: Image) -> int:
        width = self.image_service.get_width(img)
        return self.count_runs(
            self.column_probe_service.column_has_black(img, x) for x in range(width)
        )

    def find_lines(self, img: Image) -> List[Tuple[int, int]]:
        """
        Returns:
            Inclusive (x_start, x_end) spans, one per vertical line, left to right.
        """
        return self.analyse(img).spans

    def analyse(self, img: Image) -> LineCountResult:
        """
        Probe every column once, count lines with the edge-triggered counter and
        collect the line spans and pixel read total.
        """
        scans = list(self.iter_column_scans(img))
        line_count = self.count_runs(scan.has_black for scan in scans)

        spans: List[Tuple[int, int]] = []
        inspections = 0
        start = None
        last_x = -1

        for scan in scans:
            inspections += scan.inspections
            if scan.has_black:
                if start is None:
                    start = scan.x
            elif start is not None:
                spans.append((start, scan.x - 1))
                start = None
            last_x = scan.x

        # A line touching the right edge is closed by the image border
        if start is not None:
            spans.append((start, last_x))

        logger.debug(f"Found {line_count} line(s) at {spans} after {inspections} pixel reads")
        return LineCountResult(image=img, line_count=line_count, spans=spans, inspections=inspections)

from pathlib import Path
from typing import Tuple, Union
import logging
import numpy as np
import cv2
from ..models.image import Image

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "The file format is not supported or the file is corrupted."
NOT_FOUND_MESSAGE = "The file does not exist at the specified path."


class UnsupportedImageError(OSError):
    """Raised when a readable file does not decode to an intact image."""


class ImageRepository:
    """
    Handles file decoding and raw column access for Image entities.
    """

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        """Return (height, width)."""
        height, width = img.pixels.shape[:2]
        return height, width

    @staticmethod
    def retrieve_column(img: Image, x: int) -> np.ndarray:
        """
        Return column x as an (H, 3) view. No copy is made.
        """
        width = img.pixels.shape[1]
        if not 0 <= x < width:
            raise IndexError(f"Column {x} out of range for image of width {width}")
        return img.pixels[:, x]

    @staticmethod
    def set_decoder_log_level(level: int) -> None:
        """
        Align OpenCV's native log output with a stdlib logging level.

        OpenCV warnings about broken files duplicate UnsupportedImageError, so they
        are only let through at INFO and below.
        """
        if level <= logging.DEBUG:
            cv_level = 5  # LOG_LEVEL_DEBUG
        elif level <= logging.INFO:
            cv_level = 4  # LOG_LEVEL_INFO
        elif level < logging.CRITICAL:
            cv_level = 2  # LOG_LEVEL_ERROR
        else:
            cv_level = 1  # LOG_LEVEL_FATAL
        cv2.setLogLevel(cv_level)

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        """
        Decode an image file into an Image with (H, W, 3) uint8 pixels.

        The file is read in full and closed before decoding. Alpha channels are
        dropped by the decoder; grayscale and palette images are expanded to three
        channels.

        Raises:
            FileNotFoundError: nothing exists at *path*.
            PermissionError: the OS refused to open the file.
            UnsupportedImageError: the bytes are not a recognised, intact image.
            OSError: any other read failure (e.g. *path* is a directory).
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(NOT_FOUND_MESSAGE)

        data = path.read_bytes()
        if not data:
            raise UnsupportedImageError(UNSUPPORTED_MESSAGE)

        buffer = np.frombuffer(data, dtype=np.uint8)
        try:
            arr_bgr = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
        except cv2.error as err:
            raise UnsupportedImageError(UNSUPPORTED_MESSAGE) from err

        if arr_bgr is None:
            raise UnsupportedImageError(UNSUPPORTED_MESSAGE)

        arr = np.ascontiguousarray(arr_bgr[:, :, ::-1])
        arr.flags.writeable = False
        logger.debug(f"Decoded {path.name}: {arr.shape[1]}x{arr.shape[0]}")
        return Image(pixels=arr, path=path)


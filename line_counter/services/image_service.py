from pathlib import Path
from typing import Tuple
import numpy as np
from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O and pixel-access helpers.  No line detection logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def get_image_dimensions(self, img: Image) -> Tuple[int, int]:
        return self.image_repository.retrieve_image_dimensions(img)

    def get_width(self, img: Image) -> int:
        return self.get_image_dimensions(img)[1]

    def get_column(self, img: Image, x: int) -> np.ndarray:
        """
        Args:
            img (Image): An image object
            x (int): Column index in [0, width)

        Returns:
            (np.ndarray): The column's pixels, shape (H, 3), top to bottom.
        """
        return self.image_repository.retrieve_column(img, x)

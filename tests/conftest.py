"""
Pytest fixtures for synthetic in-memory images.

Images are plain (H, W, 3) uint8 numpy arrays wrapped in the Image model,
built from solid fills and hand-drawn columns.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path so tests can import the line_counter package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from line_counter.models.image import Image  # noqa: E402
from line_counter.services.column_probe_service import ColumnProbeService  # noqa: E402
from line_counter.services.line_counter_service import LineCounterService  # noqa: E402
from line_counter.services.pixel_classifier_service import PixelClassifierService  # noqa: E402

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DARK_GRAY = (100, 100, 100)


def blank_image(width, height, color=WHITE):
    """Solid-color Image of the given size."""
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = color
    return Image(pixels=pixels)


def draw_column(img, x, color=BLACK):
    """Fill column x top to bottom."""
    img.pixels[:, x] = color
    return img


def brute_force_black_columns(img):
    """Reference answer: every column with any pixel whose channel mean is < 128."""
    brightness = img.pixels[:, :, :3].astype(np.int32).sum(axis=2) // 3
    return [bool(v) for v in (brightness < 128).any(axis=0)]


@pytest.fixture
def make_image():
    return blank_image


@pytest.fixture
def classifier():
    return PixelClassifierService()


@pytest.fixture
def probe_service():
    return ColumnProbeService()


@pytest.fixture
def counter_service():
    return LineCounterService()


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def write_image(img, path, **save_kwargs):
    """Encode an Image to *path* with Pillow; the suffix picks the format."""
    from PIL import Image as PILImage

    PILImage.fromarray(img.pixels).save(path, **save_kwargs)
    img.path = path
    return path

"""
Tests for PixelClassifierService (services/pixel_classifier_service.py).
"""

import numpy as np
import pytest


class TestBrightness:
    """Unweighted integer channel mean."""

    def test_truncates_toward_zero(self, classifier):
        """(0, 0, 2) has mean 0.67, truncated to 0."""
        assert classifier.brightness((0, 0, 2)) == 0

    def test_uint8_channels_do_not_overflow(self, classifier):
        """Summing three uint8 255s must not wrap around."""
        pixel = np.array([255, 255, 255], dtype=np.uint8)
        assert classifier.brightness(pixel) == 255

    def test_channels_are_not_weighted(self, classifier):
        """Pure red, green and blue of equal value share one brightness."""
        assert (classifier.brightness((150, 0, 0))
                == classifier.brightness((0, 150, 0))
                == classifier.brightness((0, 0, 150))
                == 50)


class TestIsBlack:
    """Black iff brightness < 128."""

    @pytest.mark.parametrize("pixel, expected", [
        ((0, 0, 0), True),
        ((100, 100, 100), True),
        ((127, 127, 127), True),
        ((128, 128, 128), False),
        ((255, 255, 255), False),
        ((127, 128, 129), False),  # mean exactly 128
        ((127, 127, 128), True),   # 382 // 3 == 127
        ((255, 0, 128), True),     # 383 // 3 == 127
    ])
    def test_threshold(self, classifier, pixel, expected):
        """Strict threshold at 128."""
        assert classifier.is_black(pixel) is expected

    def test_alpha_is_ignored(self, classifier):
        """A fully transparent black pixel is still black."""
        assert classifier.is_black((0, 0, 0, 0)) is True
        assert classifier.is_black((255, 255, 255, 255)) is False

    def test_saturated_color_can_be_black(self, classifier):
        """Pure red has mean 85 and classifies as black."""
        assert classifier.is_black((255, 0, 0)) is True

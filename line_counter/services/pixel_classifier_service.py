from typing import Sequence


class PixelClassifierService:
    """
    Decides whether a single RGB pixel counts as black.

    Uses the unweighted channel mean with truncating integer division, so
    dark-gray drift from lossy codecs (e.g. JPEG ringing) still classifies
    as black.
    """

    BLACK_THRESHOLD: int = 128  # brightness strictly below this is black

    @staticmethod
    def brightness(pixel: Sequence[int]) -> int:
        # Channels may arrive as np.uint8; widen before summing.
        r, g, b = pixel[:3]
        return (int(r) + int(g) + int(b)) // 3

    def is_black(self, pixel: Sequence[int]) -> bool:
        """
        Args:
            pixel: (R, G, B) or (R, G, B, A); alpha is ignored.

        Returns:
            True if the mean of R, G and B is below BLACK_THRESHOLD.
        """
        return self.brightness(pixel) < self.BLACK_THRESHOLD

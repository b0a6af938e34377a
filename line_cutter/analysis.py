"""
Analysis — Builds the narrow, binarized image used to find text rows.

The source is squeezed to a few columns (keeping every row), contrast is
stretched with histogram equalization, and every pixel is pushed to pure
black or white by its brightness.
"""

import logging
import math

import cv2
import numpy as np

from .brightness import brightness_map
from .models import ANALYSIS_WIDTH, BINARY_THRESHOLD

logger = logging.getLogger(__name__)

AUTO_WIDTH_DIVISOR = 32.0


def nearest_power_of_2(x: float) -> int:
    return int(2 ** round(math.log2(x)))


def auto_analysis_width(image_width: int) -> int:
    """Pick an analysis width near 1/32 of the source width, rounded to a power of two."""
    return max(1, nearest_power_of_2(image_width / AUTO_WIDTH_DIVISOR))


def _equalize(rgb: np.ndarray) -> np.ndarray:
    ycrcb = cv2.cvtColor(rgb, cv2.COLOR_RGB2YCrCb)
    ycrcb[:, :, 0] = cv2.equalizeHist(ycrcb[:, :, 0])
    return cv2.cvtColor(ycrcb, cv2.COLOR_YCrCb2RGB)


def _binarize(rgb: np.ndarray, threshold: float) -> np.ndarray:
    light = brightness_map(rgb) >= threshold
    result = np.zeros_like(rgb)
    result[light] = [255, 255, 255]
    return result


def build_analysis_image(image: np.ndarray, width: int = ANALYSIS_WIDTH,
                         threshold: float = BINARY_THRESHOLD) -> np.ndarray:
    """
    Produce the analysis image for a source image.

    Args:
        image: Source pixels, (H, W, 3) RGB or (H, W, 4) RGBA, uint8.
        width: Number of columns in the analysis image.
        threshold: Brightness below which a pixel becomes black.

    Returns:
        An (H, width, 3) RGB uint8 array holding only black and white pixels.
    """
    height = image.shape[0]
    rgb = np.ascontiguousarray(image[..., :3])
    resized = cv2.resize(rgb, (width, height), interpolation=cv2.INTER_LANCZOS4)
    equalized = _equalize(resized)
    binary = _binarize(equalized, threshold)
    dark_pixels = int(np.count_nonzero(binary[:, :, 0] == 0))
    logger.debug(f"  Analysis image {width}x{height}: {dark_pixels} dark pixels")
    return binary

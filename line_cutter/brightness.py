"""
Brightness — Perceptual brightness of RGB pixels and per-row darkness probing.

Brightness uses the Rec. 709 luma weights on 8-bit channels and is
normalized to [0, 1]. A pixel is dark when its brightness is strictly
below the threshold.
"""

import logging
from typing import Iterator, Sequence

import numpy as np

logger = logging.getLogger(__name__)

LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def brightness(pixel: Sequence[int]) -> float:
    """Brightness of an RGB(A) pixel in [0, 1]; alpha is ignored."""
    r, g, b = pixel[0], pixel[1], pixel[2]
    return (0.2126 * float(r) + 0.7152 * float(g) + 0.0722 * float(b)) / 255.0


def is_dark(pixel: Sequence[int], threshold: float) -> bool:
    """True when the pixel is strictly darker than ``threshold``."""
    return brightness(pixel) < threshold


def brightness_map(image: np.ndarray) -> np.ndarray:
    """Brightness of every pixel of an (H, W, C) image as an (H, W) float array."""
    rgb = image[..., :3].astype(np.float64)
    return (rgb @ LUMA_WEIGHTS) / 255.0


def row_has_dark(image: np.ndarray, y: int, threshold: float) -> bool:
    """
    Check whether row ``y`` contains at least one dark pixel.

    Stops at the first dark pixel found. ``y`` must lie in [0, height);
    a row past the bottom raises IndexError.
    """
    for pixel in image[y]:
        if is_dark(pixel, threshold):
            return True
    return False


def row_reports(image: np.ndarray, threshold: float) -> Iterator[bool]:
    """Yield the darkness of each row of the image, top to bottom."""
    for y in range(image.shape[0]):
        dark = row_has_dark(image, y, threshold)
        logger.debug(f"  Row {y}: {'dark' if dark else 'light'}")
        yield dark

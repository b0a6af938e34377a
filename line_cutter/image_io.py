"""
Image IO — Loads source images and saves annotated results.
"""

import logging
import os

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

logger = logging.getLogger(__name__)


def load_image(path: str) -> np.ndarray:
    """
    Decode an image file into an RGB (or RGBA) uint8 array.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be decoded as an image.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Image file not found: {path}")
    try:
        with PILImage.open(path) as img:
            mode = "RGBA" if "A" in img.getbands() else "RGB"
            pixels = np.array(img.convert(mode))
    except (UnidentifiedImageError, OSError) as e:
        raise RuntimeError(f"Cannot open image file: {path}") from e
    logger.debug(f"  Loaded {path}: {pixels.shape[1]}x{pixels.shape[0]} {mode}")
    return pixels


def save_image(image: np.ndarray, path: str) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    PILImage.fromarray(image).save(path, "PNG")
    logger.debug(f"  Saved: {path}")
    return os.path.abspath(path)


def derive_output_path(path: str, suffix: str, extension: str = ".png") -> str:
    """Insert ``suffix`` before the extension of ``path`` and switch to ``extension``."""
    directory = os.path.dirname(path)
    stem = os.path.splitext(os.path.basename(path))[0]
    return os.path.join(directory, stem + suffix + extension)

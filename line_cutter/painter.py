"""
Painter — Marks cutting lines and gaps between text blocks on the full image.

Both operations overwrite whole rows of the image in place. When used
together, fill the gaps first so the cutting lines stay visible.
"""

import logging
import math
from typing import Sequence

import numpy as np

from .models import TextBlock

logger = logging.getLogger(__name__)


def _as_pixel(color: Sequence[int], channels: int) -> np.ndarray:
    pixel = list(color[:3])
    if channels == 4:
        pixel.append(255)
    return np.array(pixel[:channels], dtype=np.uint8)


def cut_positions(blocks: Sequence[TextBlock]) -> list[int]:
    """
    Rows through the middle of each gap above a text block.

    The gap above a block runs from the previous block's bottom (or the top
    of the image) to the block's top. Adjacent blocks yield their shared
    boundary row. A block starting on row 0 has an empty gap above it and
    is skipped on purpose, so a page that is text from the top edge down
    gets no line on row 0. Nothing is cut below the last block.
    """
    positions = []
    last_bottom = 0
    for block in blocks:
        if block.top_y > 0:
            positions.append(last_bottom + (block.top_y - last_bottom) // 2)
        last_bottom = block.bottom_y
    return positions


def draw_cutting_lines(image: np.ndarray, blocks: Sequence[TextBlock],
                       knife_color: Sequence[int]) -> list[int]:
    pixel = _as_pixel(knife_color, image.shape[2])
    rows = cut_positions(blocks)
    for y in rows:
        image[y, :] = pixel
    logger.debug(f"  Drew {len(rows)} cutting lines at rows {rows}")
    return rows


def fill_gaps(image: np.ndarray, blocks: Sequence[TextBlock], gap_color: Sequence[int]) -> None:
    """Paint every gap above a block, including the block's own top row."""
    pixel = _as_pixel(gap_color, image.shape[2])
    yy = 0
    for block in blocks:
        image[yy:block.top_y + 1, :] = pixel
        yy = block.bottom_y
    logger.debug(f"  Filled {len(blocks)} gaps")


def scale_blocks(blocks: Sequence[TextBlock], from_height: int, to_height: int) -> list[TextBlock]:
    """
    Map blocks found in an image of ``from_height`` rows onto one of ``to_height`` rows.

    Blocks that land on overlapping rows after scaling are merged, so the
    result stays ordered and disjoint.
    """
    if from_height == to_height:
        return list(blocks)
    scaled: list[TextBlock] = []
    for block in blocks:
        top = block.top_y * to_height // from_height
        bottom = max(min(to_height, math.ceil(block.bottom_y * to_height / from_height)), top + 1)
        if scaled and top < scaled[-1].bottom_y:
            previous = scaled.pop()
            top, bottom = previous.top_y, max(previous.bottom_y, bottom)
        scaled.append(TextBlock(top, bottom))
    return scaled

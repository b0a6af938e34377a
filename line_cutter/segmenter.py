"""
Segmenter — Groups consecutive dark rows into text blocks.

A two-state machine walks the row reports top to bottom. START looks for
the first dark row of a block, IN_BLOCK looks for the first light row
after it. A block still open when the rows run out is closed at the
image height.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from .brightness import row_reports
from .models import TextBlock

logger = logging.getLogger(__name__)


class SeekState(Enum):
    START = "start"
    IN_BLOCK = "in_block"


@dataclass(frozen=True)
class SegmenterState:
    state: SeekState = SeekState.START
    top_y: int = 0


def step(current: SegmenterState, y: int, dark: bool) -> tuple[SegmenterState, Optional[TextBlock]]:
    """Advance the machine by one row, returning the new state and any block closed on this row."""
    if current.state is SeekState.START:
        if dark:
            return SegmenterState(SeekState.IN_BLOCK, top_y=y), None
        return current, None
    if not dark:
        return SegmenterState(SeekState.START), TextBlock(current.top_y, y)
    return current, None


def finish(current: SegmenterState, height: int) -> Optional[TextBlock]:
    if current.state is SeekState.IN_BLOCK:
        return TextBlock(current.top_y, height)
    return None


def segment_rows(reports: Iterable[bool]) -> list[TextBlock]:
    """
    Build the ordered list of text blocks from per-row darkness reports.

    Args:
        reports: One boolean per row, in increasing row order.

    Returns:
        Non-overlapping blocks sorted by ``top_y``.
    """
    state = SegmenterState()
    blocks: list[TextBlock] = []
    height = 0
    for y, dark in enumerate(reports):
        state, block = step(state, y, dark)
        if block is not None:
            blocks.append(block)
        height = y + 1

    trailing = finish(state, height)
    if trailing is not None:
        blocks.append(trailing)
    return blocks


def find_text_blocks(image: np.ndarray, threshold: float) -> list[TextBlock]:
    """Locate the text blocks of an analysis image."""
    blocks = segment_rows(row_reports(image, threshold))
    logger.debug(f"  Found {len(blocks)} text blocks in {image.shape[0]} rows")
    return blocks

"""
Data models used across the line cutting pipeline.
"""

from dataclasses import dataclass

KNIFE_COLOR = (255, 0, 255)
GAP_COLOR = (0, 255, 255)
ANALYSIS_WIDTH = 32
DARK_THRESHOLD = 0.3
BINARY_THRESHOLD = 0.3


@dataclass(frozen=True)
class TextBlock:
    """A run of consecutive dark rows, as the half-open interval [top_y, bottom_y)."""
    top_y: int
    bottom_y: int

    def __post_init__(self):
        if self.top_y < 0 or self.bottom_y <= self.top_y:
            raise ValueError(f"Invalid text block rows: [{self.top_y}, {self.bottom_y})")

    @property
    def height(self) -> int:
        return self.bottom_y - self.top_y


@dataclass
class CutterOptions:
    """Settings for a single run of the pipeline."""
    fill_gaps: bool = False
    knife_color: tuple[int, int, int] = KNIFE_COLOR
    gap_color: tuple[int, int, int] = GAP_COLOR
    analysis_width: int = ANALYSIS_WIDTH
    dark_threshold: float = DARK_THRESHOLD
    binary_threshold: float = BINARY_THRESHOLD
    auto_width: bool = False

"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def make_page(height, width, dark_rows=(), channels=3):
    """White page with the given half-open row ranges painted black."""
    page = np.full((height, width, channels), 255, dtype=np.uint8)
    for top, bottom in dark_rows:
        page[top:bottom, :, :3] = 0
    return page


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def blank_page():
    return make_page(60, 40)


@pytest.fixture
def lined_page():
    """A 60-row page with text in rows [10, 20) and [40, 50)."""
    return make_page(60, 40, dark_rows=[(10, 20), (40, 50)])


@pytest.fixture
def sample_image_path(temp_dir):
    """Save a lined page as a PNG file."""
    from PIL import Image

    page = make_page(120, 200, dark_rows=[(20, 40), (70, 90)])
    img_path = temp_dir / "scan.png"
    Image.fromarray(page).save(img_path)
    return str(img_path)

"""
Unit tests for line_cutter.segmenter module.
"""
import random

import pytest

from line_cutter.models import TextBlock
from line_cutter.segmenter import (SeekState, SegmenterState, find_text_blocks,
                                   finish, segment_rows, step)
from conftest import make_page


class TestStep:
    """Tests for the single-row transition."""

    def test_start_light_stays(self):
        state, block = step(SegmenterState(), 3, False)
        assert state == SegmenterState()
        assert block is None

    def test_start_dark_opens_block(self):
        state, block = step(SegmenterState(), 3, True)
        assert state == SegmenterState(SeekState.IN_BLOCK, top_y=3)
        assert block is None

    def test_in_block_dark_stays(self):
        current = SegmenterState(SeekState.IN_BLOCK, top_y=3)
        state, block = step(current, 4, True)
        assert state == current
        assert block is None

    def test_in_block_light_closes_block(self):
        state, block = step(SegmenterState(SeekState.IN_BLOCK, top_y=3), 7, False)
        assert state.state is SeekState.START
        assert block == TextBlock(3, 7)

    def test_finish_closes_open_block(self):
        assert finish(SegmenterState(SeekState.IN_BLOCK, top_y=5), 9) == TextBlock(5, 9)

    def test_finish_in_start_is_none(self):
        assert finish(SegmenterState(), 9) is None


class TestSegmentRows:
    """Tests for segment_rows."""

    def test_all_light(self):
        assert segment_rows([False] * 10) == []

    def test_empty_input(self):
        assert segment_rows([]) == []

    def test_all_dark(self):
        assert segment_rows([True] * 10) == [TextBlock(0, 10)]

    def test_two_blocks(self):
        reports = [False, True, True, False, False, True, False]
        assert segment_rows(reports) == [TextBlock(1, 3), TextBlock(5, 6)]

    def test_trailing_block_closed_at_height(self):
        reports = [False, False, True, False, True, True]
        blocks = segment_rows(reports)
        assert blocks[-1] == TextBlock(4, 6)

    def test_accepts_generator(self):
        blocks = segment_rows(y in (2, 3) for y in range(5))
        assert blocks == [TextBlock(2, 4)]

    def test_idempotent(self):
        reports = [True, False, True, True, False, False, True]
        assert segment_rows(reports) == segment_rows(reports)

    @pytest.mark.parametrize("seed", range(20))
    def test_blocks_ordered_and_disjoint(self, seed):
        rng = random.Random(seed)
        reports = [rng.random() < 0.5 for _ in range(rng.randint(1, 80))]
        blocks = segment_rows(reports)
        for block in blocks:
            assert 0 <= block.top_y < block.bottom_y <= len(reports)
            assert all(reports[block.top_y:block.bottom_y])
        for prev, nxt in zip(blocks, blocks[1:]):
            assert prev.bottom_y <= nxt.top_y
            assert prev.top_y < nxt.top_y
        assert sum(b.height for b in blocks) == sum(reports)
        if reports[-1]:
            assert blocks[-1].bottom_y == len(reports)


class TestFindTextBlocks:
    """Tests for find_text_blocks on images."""

    def test_blank_page(self, blank_page):
        assert find_text_blocks(blank_page, 0.3) == []

    def test_dark_page(self):
        page = make_page(25, 4, dark_rows=[(0, 25)])
        assert find_text_blocks(page, 0.3) == [TextBlock(0, 25)]

    def test_lined_page(self, lined_page):
        assert find_text_blocks(lined_page, 0.3) == [TextBlock(10, 20), TextBlock(40, 50)]

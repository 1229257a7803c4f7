"""Tests for whiteboard content sizing."""

import pytest

from learning_hour.miro.layout import ContentSizer
from learning_hour.models import Dimensions


@pytest.fixture
def sizer():
    return ContentSizer()


class TestTextDimensions:
    def test_empty_text_is_minimum(self, sizer):
        assert sizer.calculate_text_dimensions("") == Dimensions(width=300, height=200)

    def test_short_text_clamped_to_minimum(self, sizer):
        assert sizer.calculate_text_dimensions("hello world") == Dimensions(width=300, height=200)

    def test_wrapped_text(self, sizer):
        text = " ".join(["word"] * 100)
        # 16 words (79 chars) per line at 80 chars -> 7 lines
        assert sizer.calculate_text_dimensions(text) == Dimensions(width=870, height=276)

    def test_width_capped_at_max_width(self, sizer):
        dims = sizer.calculate_text_dimensions("x" * 100, max_width=800)
        assert dims.width == 880

    def test_whitespace_only_text(self, sizer):
        assert sizer.calculate_text_dimensions("   ") == Dimensions(width=300, height=200)


class TestWrapText:
    def test_greedy_wrap(self, sizer):
        assert sizer.wrap_text("aa bb cc", 40) == ["aa", "bb", "cc"]
        assert sizer.wrap_text("aa bb cc", 50) == ["aa bb", "cc"]

    def test_long_word_kept_whole(self, sizer):
        assert sizer.wrap_text("x" * 20, 50) == ["x" * 20]


class TestFrameDimensions:
    def test_frame_without_content(self, sizer):
        assert sizer.calculate_frame_dimensions(None, "Hi") == Dimensions(width=400, height=300)

    def test_frame_with_content(self, sizer):
        assert sizer.calculate_frame_dimensions("hello world", "T") == Dimensions(width=400, height=300)

    def test_frame_width_capped(self, sizer):
        dims = sizer.calculate_frame_dimensions(" ".join(["word"] * 400), "Title")
        assert dims.width <= 1200


class TestCodeBlockDimensions:
    def test_single_long_line_is_capped(self, sizer):
        assert sizer.calculate_code_block_dimensions("x" * 500, "java") == Dimensions(width=1000, height=200)

    def test_short_code_uses_minimum_width(self, sizer):
        assert sizer.calculate_code_block_dimensions("a = 1").width == 400

    def test_height_grows_with_lines(self, sizer):
        code = "\n".join(["line"] * 20)
        assert sizer.calculate_code_block_dimensions(code).height == 20 * 24 + 80


class TestStickyGrid:
    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, Dimensions(width=300, height=200)),
            (1, Dimensions(width=300, height=320)),
            (3, Dimensions(width=680, height=320)),
            (5, Dimensions(width=680, height=460)),
        ],
    )
    def test_grid(self, sizer, count, expected):
        assert sizer.calculate_sticky_grid_dimensions(count) == expected

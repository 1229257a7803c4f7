"""Pixel sizing for whiteboard content."""

import math
from typing import List, Optional

from ..models import Dimensions

CHAR_WIDTH = 10  # average glyph width at 18pt
LINE_HEIGHT = 28
CODE_LINE_HEIGHT = 24
PADDING = 40
MIN_WIDTH = 300
MIN_HEIGHT = 200
MAX_WIDTH = 1200

TITLE_MAX_WIDTH = 600
CONTENT_MAX_WIDTH = 800
TITLE_ALLOWANCE = 100
EMPTY_FRAME_MIN_WIDTH = 400
EMPTY_FRAME_HEIGHT = 300

CODE_MIN_WIDTH = 400
CODE_MAX_WIDTH = 1000

STICKY_COLUMNS = 3
STICKY_SPACING_X = 200
STICKY_SPACING_Y = 140


class ContentSizer:
    """Estimates element sizes from character counts."""

    def wrap_text(self, text: str, max_width: int) -> List[str]:
        """Greedy word wrap on single spaces."""
        max_chars = max_width // CHAR_WIDTH
        lines: List[str] = []
        current = ""

        for word in text.split(" "):
            if len(current + " " + word) <= max_chars:
                current = f"{current} {word}" if current else word
            else:
                if current:
                    lines.append(current)
                current = word

        if current:
            lines.append(current)
        return lines

    def calculate_text_dimensions(self, text: Optional[str], max_width: int = CONTENT_MAX_WIDTH) -> Dimensions:
        if not text:
            return Dimensions(width=MIN_WIDTH, height=MIN_HEIGHT)

        lines = self.wrap_text(text, max_width)
        content_width = min(max((len(line) * CHAR_WIDTH for line in lines), default=0), max_width)
        content_height = len(lines) * LINE_HEIGHT

        return Dimensions(
            width=max(content_width + PADDING * 2, MIN_WIDTH),
            height=max(content_height + PADDING * 2, MIN_HEIGHT),
        )

    def calculate_frame_dimensions(self, content: Optional[str], title: str) -> Dimensions:
        """Size a titled frame around text content."""
        title_dims = self.calculate_text_dimensions(title, TITLE_MAX_WIDTH)

        if not content:
            return Dimensions(
                width=max(title_dims.width, EMPTY_FRAME_MIN_WIDTH),
                height=EMPTY_FRAME_HEIGHT,
            )

        content_dims = self.calculate_text_dimensions(content, CONTENT_MAX_WIDTH)
        return Dimensions(
            width=min(max(content_dims.width, title_dims.width + TITLE_ALLOWANCE), MAX_WIDTH),
            height=content_dims.height + TITLE_ALLOWANCE,
        )

    def calculate_code_block_dimensions(self, code: str, language: Optional[str] = None) -> Dimensions:
        lines = code.split("\n")
        longest = max(len(line) for line in lines)

        return Dimensions(
            width=min(max(longest * CHAR_WIDTH + PADDING * 2, CODE_MIN_WIDTH), CODE_MAX_WIDTH),
            height=max(len(lines) * CODE_LINE_HEIGHT + PADDING * 2, MIN_HEIGHT),
        )

    def calculate_sticky_grid_dimensions(self, count: int) -> Dimensions:
        """Size a frame holding ``count`` sticky notes in up to three columns."""
        if count <= 0:
            return Dimensions(width=MIN_WIDTH, height=MIN_HEIGHT)

        columns = min(STICKY_COLUMNS, count)
        rows = math.ceil(count / columns)
        return Dimensions(
            width=max(columns * STICKY_SPACING_X + PADDING * 2, MIN_WIDTH),
            height=max(rows * STICKY_SPACING_Y + PADDING * 2 + TITLE_ALLOWANCE, MIN_HEIGHT),
        )

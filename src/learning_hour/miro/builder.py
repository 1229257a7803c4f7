"""Lay out a generated session on a Miro board."""

import logging
from typing import List, Optional

from ..exceptions import InputValidationError, UpstreamError
from ..generator.schemas import BoardSection, SessionContent
from ..models import BoardLayout, Dimensions, SectionPlacement
from ..rendering.code_image import CodeImageGenerator
from .client import DEFAULT_STICKY_COLOR, MiroClient, escape_html
from .layout import (
    PADDING,
    STICKY_COLUMNS,
    STICKY_SPACING_X,
    STICKY_SPACING_Y,
    TITLE_ALLOWANCE,
    ContentSizer,
)

logger = logging.getLogger(__name__)

LAYOUT_STYLES = ("slide", "vertical")
DEFAULT_STYLE = "slide"
SECTION_GAP = 200
CODE_COLUMN_GAP = 40
LABEL_HEIGHT = 40
DEFAULT_CODE_LANGUAGE = "java"


class BoardBuilder:
    """Renders SessionContent sections as frames on a board.

    Frames advance left-to-right in slide style and top-to-bottom in vertical
    style. Coordinates tracked here are frame top-left corners; Miro positions
    items by their center. Items created before a failure stay on the board.
    """

    def __init__(
        self,
        client: MiroClient,
        sizer: Optional[ContentSizer] = None,
        image_generator: Optional[CodeImageGenerator] = None,
    ):
        self.client = client
        self.sizer = sizer or ContentSizer()
        self.image_generator = image_generator

    def create_learning_hour_board(
        self, session: SessionContent, style: Optional[str] = None
    ) -> BoardLayout:
        """Create a new board for the session and lay out every section.

        Raises:
            InputValidationError: Unknown layout style (before any I/O)
            ConfigurationError: No access token
            UpstreamError: A Miro call failed
        """
        style = self._resolve_style(session, style)
        board = self.client.create_board(session.miro_content.board_title, session.session_overview)
        return self._lay_out(board["id"], session, style, board.get("viewLink"))

    def add_sections_to_board(
        self, board_id: str, session: SessionContent, style: Optional[str] = None
    ) -> BoardLayout:
        """Lay out the session on an existing board."""
        if not board_id:
            raise InputValidationError("boardId is required")
        style = self._resolve_style(session, style)
        return self._lay_out(board_id, session, style, self.client.get_board_view_link(board_id))

    def _resolve_style(self, session: SessionContent, style: Optional[str]) -> str:
        resolved = style or session.miro_content.style or DEFAULT_STYLE
        if resolved not in LAYOUT_STYLES:
            raise InputValidationError(
                f"Unknown layout style '{resolved}'. Expected one of: {', '.join(LAYOUT_STYLES)}"
            )
        return resolved

    def _lay_out(
        self, board_id: str, session: SessionContent, style: str, view_link: Optional[str]
    ) -> BoardLayout:
        placements: List[SectionPlacement] = []
        x, y = 0.0, 0.0

        for section in session.miro_content.sections:
            size = self.section_dimensions(section)
            placement = self._add_section(board_id, section, x, y, size)
            placements.append(placement)

            if style == "slide":
                x += size.width + SECTION_GAP
            else:
                y += size.height + SECTION_GAP

        logger.info("Laid out %d section(s) on board %s (%s)", len(placements), board_id, style)
        return BoardLayout(board_id=board_id, style=style, view_link=view_link, sections=placements)

    def section_dimensions(self, section: BoardSection) -> Dimensions:
        """Frame size needed for a section's title and payload."""
        frame = self.sizer.calculate_frame_dimensions(section.content, section.title)

        if section.type == "sticky_notes" and section.items:
            grid = self.sizer.calculate_sticky_grid_dimensions(len(section.items))
            return Dimensions(width=max(frame.width, grid.width), height=max(frame.height, grid.height))

        if section.type == "code_block" and section.code:
            code = self.sizer.calculate_code_block_dimensions(section.code, section.language)
            return Dimensions(
                width=max(frame.width, code.width + PADDING * 2),
                height=code.height + TITLE_ALLOWANCE + PADDING,
            )

        if section.type == "code_examples" and section.before_code and section.after_code:
            before = self.sizer.calculate_code_block_dimensions(section.before_code, section.language)
            after = self.sizer.calculate_code_block_dimensions(section.after_code, section.language)
            return Dimensions(
                width=before.width + after.width + CODE_COLUMN_GAP + PADDING * 2,
                height=max(before.height, after.height) + LABEL_HEIGHT + TITLE_ALLOWANCE + PADDING,
            )

        return frame

    def _add_section(
        self, board_id: str, section: BoardSection, x: float, y: float, size: Dimensions
    ) -> SectionPlacement:
        frame = self.client.create_frame(
            board_id, section.title, x + size.width / 2, y + size.height / 2, size.width, size.height
        )
        item_ids = [frame["id"]]
        # Content area starts below the title allowance.
        top = y + TITLE_ALLOWANCE
        left = x + PADDING

        if section.type == "text_frame" and section.content:
            text = self.client.create_text(
                board_id,
                escape_html(section.content).replace("\n", "<br>"),
                x + size.width / 2,
                top + (size.height - TITLE_ALLOWANCE) / 2,
                width=size.width - PADDING * 2,
            )
            item_ids.append(text["id"])

        elif section.type == "sticky_notes" and section.items:
            item_ids.extend(self._add_sticky_grid(board_id, section, x, top, size))

        elif section.type == "code_block" and section.code:
            code = self.sizer.calculate_code_block_dimensions(section.code, section.language)
            item_ids.append(
                self._add_code(board_id, section.code, section.language, left, top, code, section.title)
            )

        elif section.type == "code_examples" and section.before_code and section.after_code:
            item_ids.extend(self._add_before_after(board_id, section, left, top))

        else:
            logger.debug("Section %r has no %s payload, frame only", section.title, section.type)

        return SectionPlacement(
            title=section.title,
            type=section.type,
            x=x,
            y=y,
            width=size.width,
            height=size.height,
            item_ids=item_ids,
        )

    def _add_sticky_grid(
        self, board_id: str, section: BoardSection, x: float, top: float, size: Dimensions
    ) -> List[str]:
        items = section.items or []
        columns = min(STICKY_COLUMNS, len(items))
        grid_width = columns * STICKY_SPACING_X
        start_x = x + (size.width - grid_width) / 2 + STICKY_SPACING_X / 2
        start_y = top + PADDING / 2 + STICKY_SPACING_Y / 2
        color = section.color or DEFAULT_STICKY_COLOR

        ids = []
        for index, item in enumerate(items):
            row, col = divmod(index, columns)
            note = self.client.create_sticky_note(
                board_id,
                f"• {item}",
                start_x + col * STICKY_SPACING_X,
                start_y + row * STICKY_SPACING_Y,
                color,
            )
            ids.append(note["id"])
        return ids

    def _add_before_after(
        self, board_id: str, section: BoardSection, left: float, top: float
    ) -> List[str]:
        language = section.language or DEFAULT_CODE_LANGUAGE
        before = self.sizer.calculate_code_block_dimensions(section.before_code, language)
        after = self.sizer.calculate_code_block_dimensions(section.after_code, language)
        after_left = left + before.width + CODE_COLUMN_GAP

        ids = []
        for label, column_left, dims in (
            ("Before", left, before),
            ("After", after_left, after),
        ):
            text = self.client.create_text(
                board_id,
                f"<strong>{label} ({escape_html(language)})</strong>",
                column_left + dims.width / 2,
                top + LABEL_HEIGHT / 2,
                width=dims.width,
            )
            ids.append(text["id"])

        ids.append(
            self._add_code(board_id, section.before_code, language, left, top + LABEL_HEIGHT, before, "Before")
        )
        ids.append(
            self._add_code(board_id, section.after_code, language, after_left, top + LABEL_HEIGHT, after, "After")
        )
        return ids

    def _add_code(
        self,
        board_id: str,
        code: str,
        language: Optional[str],
        left: float,
        top: float,
        dims: Dimensions,
        title: Optional[str] = None,
    ) -> str:
        """Place code as an uploaded image when possible, else as a code shape."""
        center_x = left + dims.width / 2
        center_y = top + dims.height / 2

        if self.image_generator is not None:
            cleaned = self.image_generator.clean_code_snippet(code)
            try:
                image = self.image_generator.generate_code_image(cleaned, language=language, title=title)
            except UpstreamError as e:
                logger.warning("Falling back to a code shape: %s", e)
            else:
                return self.client.create_image(board_id, image, center_x, center_y, title=title)["id"]

        shape = self.client.create_code_block(
            board_id, code, center_x, center_y, width=dims.width, height=dims.height
        )
        return shape["id"]

"""Textual TextArea adapters for the motion engine."""

from __future__ import annotations

from textual.widgets import TextArea
from textual.widgets.text_area import Selection as TextAreaSelection

from vimotion.editing.types import Position, Selection


class TextAreaBuffer:
    """Read-only line view over a TextArea's current document."""

    def __init__(self, text_area: TextArea) -> None:
        self._text_area = text_area

    def line_count(self) -> int:
        return self._text_area.document.line_count

    def line_text(self, line: int) -> str:
        return self._text_area.document.get_line(line)

    def first_non_whitespace_column(self, line: int) -> int:
        text = self.line_text(line)
        return len(text) - len(text.lstrip())


class TextAreaSelectionHost:
    """Selection host over a TextArea.

    A TextArea has one selection whose `start` is where the selection began
    and whose `end` is the cursor, exclusive of the larger end. That maps
    directly onto anchor/active.
    """

    def __init__(self, text_area: TextArea) -> None:
        self._text_area = text_area
        self._buffer = TextAreaBuffer(text_area)
        self._viewport_top: int | None = None

    @property
    def buffer(self) -> TextAreaBuffer:
        return self._buffer

    @property
    def selections(self) -> list[Selection]:
        start, end = self._text_area.selection
        return [Selection(Position(*start), Position(*end))]

    @selections.setter
    def selections(self, selections: list[Selection]) -> None:
        if not selections:
            return
        self._viewport_top = self._text_area.scroll_offset.y
        anchor, active = selections[0]
        self._text_area.selection = TextAreaSelection(
            (anchor.line, anchor.character), (active.line, active.character)
        )

    def reveal(self, position: Position, center: bool = True) -> None:
        """Scroll the cursor into view, centering only if it was off screen."""
        text_area = self._text_area
        if center:
            # Writing the selection already scrolled minimally, so visibility is
            # judged against the viewport from before the write
            top = text_area.scroll_offset.y if self._viewport_top is None else self._viewport_top
            row = text_area.wrapped_document.location_to_offset(position).y
            center = not top <= row < top + text_area.scrollable_content_region.height
        text_area.scroll_cursor_visible(center=center)

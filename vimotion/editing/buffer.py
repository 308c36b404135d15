"""In-memory buffer and selection host."""

from __future__ import annotations

from vimotion.editing.types import Position, Selection


class TextBuffer:
    """Line-indexed buffer over a fixed piece of text."""

    def __init__(self, text: str = "") -> None:
        self._lines = text.split("\n")

    @classmethod
    def from_lines(cls, lines: list[str]) -> TextBuffer:
        return cls("\n".join(lines))

    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, line: int) -> str:
        return self._lines[line]

    def first_non_whitespace_column(self, line: int) -> int:
        text = self._lines[line]
        return len(text) - len(text.lstrip())


class SelectionList:
    """Selection host backed by a plain list.

    Used by non-UI callers and tests. Reveal requests are recorded in
    `revealed` instead of scrolling anything.
    """

    def __init__(self, buffer: TextBuffer, selections: list[Selection] | None = None) -> None:
        self._buffer = buffer
        self._selections = list(selections or [Selection.cursor(Position(0, 0))])
        self.revealed: list[tuple[Position, bool]] = []

    @classmethod
    def with_cursors(cls, buffer: TextBuffer, *positions: tuple[int, int]) -> SelectionList:
        """Create a host with one zero-width selection per (line, character)."""
        return cls(buffer, [Selection.cursor(Position(*p)) for p in positions])

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    @property
    def selections(self) -> list[Selection]:
        return list(self._selections)

    @selections.setter
    def selections(self, selections: list[Selection]) -> None:
        self._selections = list(selections)

    @property
    def cursors(self) -> list[Position]:
        """Active position of every selection."""
        return [s.active for s in self._selections]

    def reveal(self, position: Position, center: bool = True) -> None:
        self.revealed.append((position, center))

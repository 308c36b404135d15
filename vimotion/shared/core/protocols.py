"""Protocols for the collaborators the motion engine reads from and writes to.

The engine never owns a buffer or an editor. Hosts (a Textual TextArea, an
in-memory list of selections in tests) implement these protocols and are
passed in on every dispatch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vimotion.editing.types import Position, Selection


@runtime_checkable
class BufferProtocol(Protocol):
    """Read-only, line-indexed view of a text buffer."""

    def line_count(self) -> int:
        """Number of lines. An empty buffer still has one (empty) line."""
        ...

    def line_text(self, line: int) -> str:
        """Text of a line, without its line break."""
        ...

    def first_non_whitespace_column(self, line: int) -> int:
        """Column of the first non-whitespace character.

        Returns the line length for empty or whitespace-only lines.
        """
        ...


@runtime_checkable
class SelectionHostProtocol(Protocol):
    """An editor exposing its selections in its own (end-exclusive) form."""

    @property
    def buffer(self) -> BufferProtocol:
        ...

    @property
    def selections(self) -> list[Selection]:
        """Current selections, primary first."""
        ...

    @selections.setter
    def selections(self, selections: list[Selection]) -> None:
        """Replace all selections. Must receive as many as were read."""
        ...

    def reveal(self, position: Position, center: bool = True) -> None:
        """Scroll so `position` is visible.

        Args:
            position: Position to bring into view.
            center: Center the position if it is off screen.
        """
        ...

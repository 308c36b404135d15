"""Conversion between host selections and vim selections.

Hosts store selections end-exclusive: the cursor sits *between* characters
and a forward selection stops just before its active end. Vim thinks in
cells: a visual selection includes the character under the cursor, and a
visual-line selection covers whole lines.

Each mode gets one `ModeCoordinates` pair. The dispatcher picks the pair
once per call instead of checking the mode in every motion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from vimotion.core.vim import VimMode
from vimotion.editing.types import Position, Selection
from vimotion.shared.core.protocols import BufferProtocol

SelectionConverter = Callable[[BufferProtocol, Selection], Selection]


def _cell_left(buffer: BufferProtocol, position: Position) -> Position:
    """Previous cell, wrapping onto the line break of the previous line."""
    if position.character > 0:
        return position.with_character(position.character - 1)
    if position.line == 0:
        return position
    previous = position.line - 1
    return Position(previous, len(buffer.line_text(previous)))


def _cell_right(buffer: BufferProtocol, position: Position) -> Position:
    """Next cell, wrapping past the line break to the next line."""
    length = len(buffer.line_text(position.line))
    if position.character < length:
        return position.with_character(position.character + 1)
    if position.line < buffer.line_count() - 1:
        return Position(position.line + 1, 0)
    return position.with_character(length)


def host_to_visual(buffer: BufferProtocol, selection: Selection) -> Selection:
    """Read a host selection as an inclusive visual selection.

    The end that lies ahead in the buffer is exclusive on the host side, so
    it is pulled back one cell. A zero-width host selection is read as the
    single cell under the cursor.
    """
    if selection.is_empty:
        return selection
    anchor, active = selection
    if selection.is_reversed:
        return Selection(_cell_left(buffer, anchor), active)
    return Selection(anchor, _cell_left(buffer, active))


def visual_to_host(buffer: BufferProtocol, selection: Selection) -> Selection:
    """Write an inclusive visual selection back in host form.

    The end that lies ahead is pushed one cell forward so the host selects
    exactly the same characters. `anchor == active` selects that one cell.
    """
    anchor, active = selection
    if selection.is_reversed:
        return Selection(_cell_right(buffer, anchor), active)
    return Selection(anchor, _cell_right(buffer, active))


def host_to_visual_line(buffer: BufferProtocol, selection: Selection) -> Selection:
    """Read a host selection as the whole lines between anchor and active."""
    anchor, active = selection
    return Selection(Position(anchor.line, 0), Position(active.line, 0))


def visual_line_to_host(buffer: BufferProtocol, selection: Selection) -> Selection:
    """Expand a visual-line selection to cover its lines completely."""
    anchor, active = selection
    if active.line < anchor.line:
        anchor_end = len(buffer.line_text(anchor.line))
        return Selection(Position(anchor.line, anchor_end), Position(active.line, 0))
    active_end = len(buffer.line_text(active.line))
    return Selection(Position(anchor.line, 0), Position(active.line, active_end))


def host_to_normal(buffer: BufferProtocol, selection: Selection) -> Selection:
    return Selection.cursor(selection.active)


def normal_to_host(buffer: BufferProtocol, selection: Selection) -> Selection:
    """Collapse to the cursor; normal mode has no anchor."""
    return Selection.cursor(selection.active)


@dataclass(frozen=True)
class ModeCoordinates:
    """The host <-> vim converter pair for one mode."""

    mode: VimMode
    to_vim: SelectionConverter
    to_host: SelectionConverter


NORMAL_COORDINATES = ModeCoordinates(VimMode.NORMAL, host_to_normal, normal_to_host)
VISUAL_COORDINATES = ModeCoordinates(VimMode.VISUAL, host_to_visual, visual_to_host)
VISUAL_LINE_COORDINATES = ModeCoordinates(
    VimMode.VISUAL_LINE, host_to_visual_line, visual_line_to_host
)

_COORDINATES: dict[VimMode, ModeCoordinates] = {
    VimMode.NORMAL: NORMAL_COORDINATES,
    VimMode.VISUAL: VISUAL_COORDINATES,
    VimMode.VISUAL_LINE: VISUAL_LINE_COORDINATES,
}


def coordinates_for(mode: VimMode) -> ModeCoordinates | None:
    """Get the converters for a mode, or None if motions don't apply to it."""
    return _COORDINATES.get(mode)

"""Character search motions (f, F, t, T) and the searches behind them."""

from __future__ import annotations

from vimotion.editing.types import MotionContext, Position
from vimotion.shared.core.protocols import BufferProtocol


def search_forward(buffer: BufferProtocol, needle: str, start: Position) -> Position | None:
    """Find the first `needle` at or after `start`.

    Scans the rest of the start line, then each following line from column
    0. Stops at the end of the buffer (no wraparound).
    """
    column = buffer.line_text(start.line).find(needle, start.character)
    if column >= 0:
        return Position(start.line, column)
    for line in range(start.line + 1, buffer.line_count()):
        column = buffer.line_text(line).find(needle)
        if column >= 0:
            return Position(line, column)
    return None


def search_backward(buffer: BufferProtocol, needle: str, start: Position) -> Position | None:
    """Find the last `needle` beginning at or before `start`.

    Scans the start line backwards, then each previous line from its end.
    Stops at the start of the buffer (no wraparound).
    """
    column = buffer.line_text(start.line).rfind(needle, 0, start.character + len(needle))
    if column >= 0:
        return Position(start.line, column)
    for line in range(start.line - 1, -1, -1):
        column = buffer.line_text(line).rfind(needle)
        if column >= 0:
            return Position(line, column)
    return None


def index_of(text: str, needle: str, start: int) -> int:
    """Line-local search forward from `start`. Returns -1 if not found."""
    return text.find(needle, start)


def last_index_of(text: str, needle: str, start: int) -> int:
    """Line-local search for a match beginning at or before `start`."""
    if start < 0:
        return -1
    return text.rfind(needle, 0, start + len(needle))


def _left_wrap(buffer: BufferProtocol, position: Position) -> Position:
    """One cell left, wrapping to the end of the previous line."""
    if position.character > 0:
        return position.with_character(position.character - 1)
    if position.line == 0:
        return position
    previous = position.line - 1
    return Position(previous, len(buffer.line_text(previous)))


def motion_find_forward(ctx: MotionContext, char: str) -> Position:
    """Move to next occurrence of char (f{char})."""
    position = ctx.position
    result = search_forward(ctx.buffer, char, position.with_character(position.character + 1))
    return result if result is not None else position


def motion_find_backward(ctx: MotionContext, char: str) -> Position:
    """Move to previous occurrence of char (F{char})."""
    position = ctx.position
    result = search_backward(ctx.buffer, char, _left_wrap(ctx.buffer, position))
    return result if result is not None else position


def motion_till_forward(ctx: MotionContext, char: str) -> Position:
    """Move to just before next occurrence of char on the line (t{char})."""
    position = ctx.position
    text = ctx.buffer.line_text(position.line)
    column = index_of(text, char, position.character + 1)
    if column < 0:
        return position
    # Stop one before the found character
    return position.with_character(column - 1)


def motion_till_backward(ctx: MotionContext, char: str) -> Position:
    """Move to just after previous occurrence of char on the line (T{char})."""
    position = ctx.position
    text = ctx.buffer.line_text(position.line)
    column = last_index_of(text, char, position.character - 1)
    if column < 0:
        return position
    # Stop one after the found character
    return position.with_character(column + 1)

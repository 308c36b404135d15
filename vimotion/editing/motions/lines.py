"""Linewise motions and paragraph scanning."""

from __future__ import annotations

from vimotion.editing.types import MotionContext, Position
from vimotion.shared.core.protocols import BufferProtocol
from .common import _is_blank, _last_column


def paragraph_forward(buffer: BufferProtocol, from_line: int) -> int:
    """Find the next paragraph boundary after `from_line`.

    A boundary is a blank line right after a non-blank line. Returns the
    last line if there is none.
    """
    last_line = buffer.line_count() - 1
    for line in range(from_line + 1, last_line + 1):
        if _is_blank(buffer.line_text(line)) and not _is_blank(buffer.line_text(line - 1)):
            return line
    return last_line


def paragraph_backward(buffer: BufferProtocol, from_line: int) -> int:
    """Find the previous paragraph boundary before `from_line`.

    A boundary is a blank line right before a non-blank line. Returns 0 if
    there is none.
    """
    last_line = buffer.line_count() - 1
    for line in range(min(from_line, last_line) - 1, -1, -1):
        if _is_blank(buffer.line_text(line)) and not _is_blank(buffer.line_text(line + 1)):
            return line
    return 0


def motion_first_line(ctx: MotionContext) -> Position:
    """Move to first line (gg)."""
    return Position(0, 0)


def motion_last_line(ctx: MotionContext) -> Position:
    """Move to last line (G)."""
    return Position(ctx.buffer.line_count() - 1, 0)


def motion_paragraph_forward(ctx: MotionContext) -> Position:
    """Move to the next paragraph boundary (})."""
    return Position(paragraph_forward(ctx.buffer, ctx.position.line), 0)


def motion_paragraph_backward(ctx: MotionContext) -> Position:
    """Move to the previous paragraph boundary ({)."""
    return Position(paragraph_backward(ctx.buffer, ctx.position.line), 0)


def motion_line_end(ctx: MotionContext) -> Position:
    """Move to the last character of the line ($)."""
    return ctx.position.with_character(_last_column(ctx.buffer, ctx.position.line))


def motion_first_non_blank(ctx: MotionContext) -> Position:
    """Move to the first non-blank character (_)."""
    line = ctx.position.line
    column = ctx.buffer.first_non_whitespace_column(line)
    return ctx.position.with_character(min(column, _last_column(ctx.buffer, line)))

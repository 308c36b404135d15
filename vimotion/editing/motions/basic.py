"""Basic cursor motions."""

from __future__ import annotations

from vimotion.core.vim import VimMode
from vimotion.editing.types import MotionContext, Position
from .common import _has_line_break, _last_column, _line_length


def motion_left(ctx: MotionContext) -> Position:
    """Move cursor left (h)."""
    position = ctx.position
    return position.with_character(max(position.character - 1, 0))


def motion_right(ctx: MotionContext) -> Position:
    """Move cursor right (l).

    In Visual mode the cursor may also rest on the line break, so a visual
    selection can take in the newline. The last line has no line break.
    """
    position = ctx.position
    if ctx.state.mode == VimMode.VISUAL and _has_line_break(ctx.buffer, position.line):
        limit = _line_length(ctx.buffer, position.line)
    else:
        limit = _last_column(ctx.buffer, position.line)
    return position.with_character(max(min(position.character + 1, limit), 0))


def _vertical(ctx: MotionContext, new_line: int) -> Position:
    desired = ctx.state.desired_column(ctx.selection_index, ctx.position.character)
    column = min(desired, _last_column(ctx.buffer, new_line))
    return Position(new_line, int(column))


def motion_up(ctx: MotionContext) -> Position:
    """Move cursor up (k), keeping the desired column."""
    if ctx.position.line == 0:
        return ctx.position
    return _vertical(ctx, ctx.position.line - 1)


def motion_down(ctx: MotionContext) -> Position:
    """Move cursor down (j), keeping the desired column."""
    if ctx.position.line >= ctx.buffer.line_count() - 1:
        return ctx.position
    return _vertical(ctx, ctx.position.line + 1)

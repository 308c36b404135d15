"""Word and WORD segmentation and motions.

A *word* is a run of word characters (letters, digits, underscore) or a run
of other non-blank characters. A *WORD* is any run of non-blank characters.
Word motions stay on the current line.
"""

from __future__ import annotations

from typing import Callable

from vimotion.editing.types import MotionContext, Position, WordRange
from .common import _is_word_char

WordRangesFunc = Callable[[str], list[WordRange]]


def _char_class(ch: str) -> int:
    """0 for whitespace, 1 for word characters, 2 for punctuation."""
    if ch.isspace():
        return 0
    if _is_word_char(ch):
        return 1
    return 2


def _segment(line: str, classify: Callable[[str], int]) -> list[WordRange]:
    ranges: list[WordRange] = []
    start = 0
    current = 0
    for i, ch in enumerate(line):
        cls = classify(ch)
        if cls != current:
            if current != 0:
                ranges.append(WordRange(start, i))
            start = i
            current = cls
    if current != 0:
        ranges.append(WordRange(start, len(line)))
    return ranges


def word_ranges(line: str) -> list[WordRange]:
    """Split a line into words.

    Word characters and punctuation form separate words even when they
    touch: ``"foo.bar"`` is ``foo``, ``.``, ``bar``.
    """
    return _segment(line, _char_class)


def whitespace_word_ranges(line: str) -> list[WordRange]:
    """Split a line into WORDs (whitespace-separated runs)."""
    return _segment(line, lambda ch: 0 if ch.isspace() else 1)


def _word_forward(ranges_func: WordRangesFunc, ctx: MotionContext) -> Position:
    position = ctx.position
    for word in ranges_func(ctx.buffer.line_text(position.line)):
        if word.start > position.character:
            return position.with_character(word.start)
    return position


def _word_backward(ranges_func: WordRangesFunc, ctx: MotionContext) -> Position:
    position = ctx.position
    for word in reversed(ranges_func(ctx.buffer.line_text(position.line))):
        if word.start < position.character:
            return position.with_character(word.start)
    return position


def _word_end(ranges_func: WordRangesFunc, ctx: MotionContext) -> Position:
    position = ctx.position
    for word in ranges_func(ctx.buffer.line_text(position.line)):
        # end is exclusive; land on the word's last character
        if word.end - 1 > position.character:
            return position.with_character(word.end - 1)
    return position


def motion_word_forward(ctx: MotionContext) -> Position:
    """Move to start of next word (w)."""
    return _word_forward(word_ranges, ctx)


def motion_WORD_forward(ctx: MotionContext) -> Position:
    """Move to start of next WORD (W)."""
    return _word_forward(whitespace_word_ranges, ctx)


def motion_word_backward(ctx: MotionContext) -> Position:
    """Move to start of previous word (b)."""
    return _word_backward(word_ranges, ctx)


def motion_WORD_backward(ctx: MotionContext) -> Position:
    """Move to start of previous WORD (B)."""
    return _word_backward(whitespace_word_ranges, ctx)


def motion_word_end(ctx: MotionContext) -> Position:
    """Move to end of current/next word (e)."""
    return _word_end(word_ranges, ctx)


def motion_WORD_end(ctx: MotionContext) -> Position:
    """Move to end of current/next WORD (E)."""
    return _word_end(whitespace_word_ranges, ctx)

"""Shared helpers for motion calculations."""

from __future__ import annotations

from vimotion.editing.types import Position
from vimotion.shared.core.protocols import BufferProtocol


def _is_word_char(ch: str) -> bool:
    """Check if character is a word character (vim 'word')."""
    return ch.isalnum() or ch == "_"


def _is_WORD_char(ch: str) -> bool:
    """Check if character is a WORD character (non-whitespace)."""
    return not ch.isspace()


def _is_blank(text: str) -> bool:
    """Empty and whitespace-only lines are blank."""
    return not text.strip()


def _line_length(buffer: BufferProtocol, line: int) -> int:
    return len(buffer.line_text(line))


def _last_column(buffer: BufferProtocol, line: int) -> int:
    """Last column a normal-mode cursor can rest on."""
    return max(_line_length(buffer, line) - 1, 0)


def _has_line_break(buffer: BufferProtocol, line: int) -> bool:
    return line < buffer.line_count() - 1


def _clamp(buffer: BufferProtocol, position: Position) -> Position:
    """Clamp a position to a real line and an insertion point on it."""
    line = max(0, min(position.line, buffer.line_count() - 1))
    character = max(0, min(position.character, _line_length(buffer, line)))
    return Position(line, character)

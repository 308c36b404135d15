"""Vim motion engine."""

from .buffer import SelectionList, TextBuffer
from .dispatcher import apply_motion
from .engine import MotionEngine
from .exceptions import MissingCharacterError, MotionError, UnknownMotionError
from .motions.lines import paragraph_backward, paragraph_forward
from .motions.registry import CHAR_MOTIONS, MOTIONS, execute_motion, repeat_char_search
from .motions.search import search_backward, search_forward
from .motions.words import whitespace_word_ranges, word_ranges
from .selection import (
    coordinates_for,
    host_to_visual,
    host_to_visual_line,
    visual_line_to_host,
    visual_to_host,
)
from .state import END_OF_LINE, VimState
from .types import (
    CharSearch,
    CharSearchKind,
    MotionContext,
    MotionFunc,
    Position,
    SearchDirection,
    Selection,
    WordRange,
)

__all__ = [
    # Types
    "CharSearch",
    "CharSearchKind",
    "MotionContext",
    "MotionFunc",
    "Position",
    "SearchDirection",
    "Selection",
    "WordRange",
    # State
    "END_OF_LINE",
    "VimState",
    # Buffers and hosts
    "SelectionList",
    "TextBuffer",
    # Scanners
    "paragraph_backward",
    "paragraph_forward",
    "search_backward",
    "search_forward",
    "whitespace_word_ranges",
    "word_ranges",
    # Selection conversion
    "coordinates_for",
    "host_to_visual",
    "host_to_visual_line",
    "visual_line_to_host",
    "visual_to_host",
    # Dispatch
    "CHAR_MOTIONS",
    "MOTIONS",
    "MotionEngine",
    "apply_motion",
    "execute_motion",
    "repeat_char_search",
    # Errors
    "MissingCharacterError",
    "MotionError",
    "UnknownMotionError",
]

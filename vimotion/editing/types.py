"""Types for the vim motion engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Callable, NamedTuple

if TYPE_CHECKING:
    from vimotion.editing.state import VimState
    from vimotion.shared.core.protocols import BufferProtocol


class Position(NamedTuple):
    """A (line, character) location in a line-indexed buffer.

    Character offsets index between characters, so `character == len(line)`
    is the insertion point after the last character.
    """

    line: int
    character: int

    def with_character(self, character: int) -> Position:
        return Position(self.line, character)


class WordRange(NamedTuple):
    """Half-open span of one word within a line."""

    start: int
    end: int


class Selection(NamedTuple):
    """An anchor/active pair. Motions move `active`; `anchor` stays put."""

    anchor: Position
    active: Position

    @classmethod
    def cursor(cls, position: Position) -> Selection:
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    @property
    def is_reversed(self) -> bool:
        """True if the active end comes before the anchor in buffer order."""
        return self.active < self.anchor


class SearchDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    def reversed(self) -> SearchDirection:
        if self is SearchDirection.FORWARD:
            return SearchDirection.BACKWARD
        return SearchDirection.FORWARD


class CharSearchKind(Enum):
    FIND = "find"  # f/F - land on the match
    TILL = "till"  # t/T - land next to the match


@dataclass(frozen=True)
class CharSearch:
    """The last f/F/t/T motion, replayed by ; and ,."""

    direction: SearchDirection
    kind: CharSearchKind
    character: str

    def reversed(self) -> CharSearch:
        return replace(self, direction=self.direction.reversed())


@dataclass
class MotionContext:
    """Arguments handed to a motion function for one selection."""

    buffer: BufferProtocol
    position: Position
    selection_index: int
    state: VimState


# A motion maps the logical active position of one selection to its target.
MotionFunc = Callable[[MotionContext], Position]

"""Motion registry and execution.

Every motion is registered by name with the modes it runs in and what it
does to the desired-column memory. `execute_motion` is the single entry
point a key handler calls once it has matched a motion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from functools import partial
from typing import Callable

from vimotion.core.vim import VimMode
from vimotion.editing.dispatcher import apply_motion, logical_selections, reveal_primary
from vimotion.editing.exceptions import MissingCharacterError, UnknownMotionError
from vimotion.editing.state import VimState
from vimotion.editing.types import (
    CharSearch,
    CharSearchKind,
    MotionContext,
    Position,
    SearchDirection,
)
from vimotion.shared.core.protocols import SelectionHostProtocol
from .basic import motion_down, motion_left, motion_right, motion_up
from .lines import (
    motion_first_line,
    motion_first_non_blank,
    motion_last_line,
    motion_line_end,
    motion_paragraph_backward,
    motion_paragraph_forward,
)
from .search import (
    motion_find_backward,
    motion_find_forward,
    motion_till_backward,
    motion_till_forward,
)
from .words import (
    motion_WORD_backward,
    motion_WORD_end,
    motion_WORD_forward,
    motion_word_backward,
    motion_word_end,
    motion_word_forward,
)

logger = logging.getLogger(__name__)


class ColumnEffect(Enum):
    """What a motion does to the remembered desired columns."""

    CLEAR = auto()  # Horizontal motions and jumps
    TRACK = auto()  # Vertical motions: seed if unset, then read
    KEEP = auto()  # Leave untouched
    LINE_END = auto()  # $: snap to line end from now on


CHARWISE_MODES = frozenset({VimMode.NORMAL, VimMode.VISUAL})
ALL_MODES = frozenset({VimMode.NORMAL, VimMode.VISUAL, VimMode.VISUAL_LINE})


@dataclass(frozen=True)
class MotionDef:
    """Definition of a registered motion."""

    name: str
    func: Callable[..., Position]
    modes: frozenset[VimMode]
    columns: ColumnEffect = ColumnEffect.CLEAR
    search: tuple[SearchDirection, CharSearchKind] | None = None  # f/F/t/T only

    @property
    def takes_char(self) -> bool:
        return self.search is not None


_FORWARD = SearchDirection.FORWARD
_BACKWARD = SearchDirection.BACKWARD
_FIND = CharSearchKind.FIND
_TILL = CharSearchKind.TILL

# Motion registry
MOTIONS: dict[str, MotionDef] = {
    motion.name: motion
    for motion in (
        MotionDef("left", motion_left, CHARWISE_MODES),
        MotionDef("right", motion_right, CHARWISE_MODES),
        MotionDef("up", motion_up, ALL_MODES, ColumnEffect.TRACK),
        MotionDef("down", motion_down, ALL_MODES, ColumnEffect.TRACK),
        MotionDef("word_forward", motion_word_forward, CHARWISE_MODES),
        MotionDef("WORD_forward", motion_WORD_forward, CHARWISE_MODES),
        MotionDef("word_backward", motion_word_backward, CHARWISE_MODES),
        MotionDef("WORD_backward", motion_WORD_backward, CHARWISE_MODES),
        MotionDef("word_end", motion_word_end, CHARWISE_MODES),
        MotionDef("WORD_end", motion_WORD_end, CHARWISE_MODES),
        MotionDef("find_forward", motion_find_forward, CHARWISE_MODES, search=(_FORWARD, _FIND)),
        MotionDef("find_backward", motion_find_backward, CHARWISE_MODES, search=(_BACKWARD, _FIND)),
        MotionDef("till_forward", motion_till_forward, CHARWISE_MODES, search=(_FORWARD, _TILL)),
        MotionDef("till_backward", motion_till_backward, CHARWISE_MODES, search=(_BACKWARD, _TILL)),
        MotionDef("first_line", motion_first_line, ALL_MODES),
        MotionDef("last_line", motion_last_line, ALL_MODES),
        MotionDef("paragraph_forward", motion_paragraph_forward, ALL_MODES, ColumnEffect.KEEP),
        MotionDef("paragraph_backward", motion_paragraph_backward, ALL_MODES),
        MotionDef("line_end", motion_line_end, ALL_MODES, ColumnEffect.LINE_END),
        MotionDef("first_non_blank", motion_first_non_blank, ALL_MODES),
    )
}

# Motions that require a character argument
CHAR_MOTIONS = frozenset(name for name, motion in MOTIONS.items() if motion.takes_char)

# Dispatch table used to replay a recorded CharSearch
CHAR_SEARCH_MOTIONS: dict[tuple[SearchDirection, CharSearchKind], str] = {
    motion.search: name for name, motion in MOTIONS.items() if motion.search is not None
}

# ; and , - value is whether the direction is reversed
REPEAT_MOTIONS: dict[str, bool] = {
    "repeat_char_search": False,
    "repeat_char_search_reverse": True,
}


def get_motion(name: str) -> MotionDef:
    """Get a motion definition by name."""
    try:
        return MOTIONS[name]
    except KeyError:
        raise UnknownMotionError(name) from None


def execute_motion(
    state: VimState,
    host: SelectionHostProtocol | None,
    name: str,
    char: str | None = None,
    *,
    center: bool = True,
) -> bool:
    """Run a motion by name on every selection of `host`.

    Args:
        state: Session state, updated in place.
        host: Editor to move. None is a no-op.
        name: Registered motion name, or one of `REPEAT_MOTIONS`.
        char: Target character for find/till motions.
        center: Reveal policy for the primary cursor.

    Returns:
        True if the motion ran, False if it was skipped (no host, motion not
        available in the current mode, nothing to repeat).

    Raises:
        UnknownMotionError: `name` is not registered.
        MissingCharacterError: a find/till motion was given no character.
    """
    if name in REPEAT_MOTIONS:
        return repeat_char_search(state, host, reverse=REPEAT_MOTIONS[name], center=center)

    motion = get_motion(name)
    if motion.takes_char and not char:
        raise MissingCharacterError(name)
    return _run(state, host, motion, char, record=True, center=center)


def repeat_char_search(
    state: VimState,
    host: SelectionHostProtocol | None,
    *,
    reverse: bool = False,
    center: bool = True,
) -> bool:
    """Replay the last f/F/t/T motion (;), or its reverse (,).

    The recorded search is left as it is, so , followed by ; still goes in
    the original direction.
    """
    search = state.last_char_search
    if search is None:
        logger.debug("No character search to repeat")
        return False
    if reverse:
        search = search.reversed()
    motion = MOTIONS[CHAR_SEARCH_MOTIONS[(search.direction, search.kind)]]
    return _run(state, host, motion, search.character, record=False, center=center)


def _run(
    state: VimState,
    host: SelectionHostProtocol | None,
    motion: MotionDef,
    char: str | None,
    *,
    record: bool,
    center: bool,
) -> bool:
    if host is None or state.mode not in motion.modes:
        logger.debug("Skipping %s in %s mode", motion.name, state.mode.value)
        return False

    if motion.columns is ColumnEffect.TRACK:
        _seed_desired_columns(state, host)

    func: Callable[[MotionContext], Position]
    func = partial(motion.func, char=char) if motion.takes_char else motion.func
    if not apply_motion(state, host, func, reveal=False):
        return False

    if motion.columns is ColumnEffect.CLEAR:
        state.clear_desired_columns()
    elif motion.columns is ColumnEffect.LINE_END:
        state.stick_to_line_end(len(host.selections))

    if record and motion.search is not None and char:
        direction, kind = motion.search
        state.record_char_search(CharSearch(direction, kind, char))

    reveal_primary(host, center=center)
    return True


def _seed_desired_columns(state: VimState, host: SelectionHostProtocol) -> None:
    selections = logical_selections(state, host)
    if selections is not None:
        state.ensure_desired_columns(s.active.character for s in selections)

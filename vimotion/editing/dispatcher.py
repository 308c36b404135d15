"""Apply a motion to every selection of a host."""

from __future__ import annotations

import logging

from vimotion.editing.motions.common import _clamp
from vimotion.editing.selection import coordinates_for
from vimotion.editing.state import VimState
from vimotion.editing.types import MotionContext, MotionFunc, Selection
from vimotion.shared.core.protocols import SelectionHostProtocol

logger = logging.getLogger(__name__)


def logical_selections(state: VimState, host: SelectionHostProtocol) -> list[Selection] | None:
    """Current host selections in the vim coordinates of the active mode.

    Returns None if the mode is not one motions apply to.
    """
    coordinates = coordinates_for(state.mode)
    if coordinates is None:
        return None
    buffer = host.buffer
    return [coordinates.to_vim(buffer, selection) for selection in host.selections]


def apply_motion(
    state: VimState,
    host: SelectionHostProtocol | None,
    motion: MotionFunc,
    *,
    reveal: bool = True,
    center: bool = True,
) -> bool:
    """Move every selection of `host` with `motion`.

    Each selection is converted to vim coordinates for the current mode, its
    active end is moved, and the result is converted back. All selections are
    committed together, then the primary cursor is revealed.

    Args:
        state: Session state (mode, desired columns).
        host: Editor whose selections move. None means there is no live
            session and nothing happens.
        motion: Function computing the new active position.
        reveal: Scroll to the primary cursor after committing. Callers that
            still have state to update pass False and call `reveal_primary`.
        center: Center the primary cursor if it is off screen.

    Returns:
        True if the selections were updated.
    """
    if host is None:
        logger.debug("No active editor, skipping motion")
        return False

    coordinates = coordinates_for(state.mode)
    if coordinates is None:
        logger.debug("Motions are inactive in %s mode", state.mode.value)
        return False

    buffer = host.buffer
    updated: list[Selection] = []
    for index, selection in enumerate(host.selections):
        vim_selection = coordinates.to_vim(buffer, selection)
        target = motion(
            MotionContext(
                buffer=buffer,
                position=vim_selection.active,
                selection_index=index,
                state=state,
            )
        )
        moved = coordinates.to_host(buffer, Selection(vim_selection.anchor, target))
        updated.append(Selection(_clamp(buffer, moved.anchor), _clamp(buffer, moved.active)))

    host.selections = updated
    logger.debug("Moved %d selection(s) in %s mode", len(updated), state.mode.value)
    if reveal:
        reveal_primary(host, center=center)
    return True


def reveal_primary(host: SelectionHostProtocol, *, center: bool = True) -> None:
    """Scroll the host to the active end of its primary selection."""
    selections = host.selections
    if selections:
        host.reveal(selections[0].active, center=center)

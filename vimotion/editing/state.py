"""Per-session vim motion state.

One `VimState` lives for the length of an editing session and is passed to
every motion call. It remembers:
- the current mode
- the desired column of each cursor across vertical motions
- the last f/F/t/T search, replayed by ; and ,
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from vimotion.core.vim import VimMode
from vimotion.editing.types import CharSearch

# Desired column that always snaps to the end of the line (set by $)
END_OF_LINE = math.inf


@dataclass
class VimState:
    """Tracks the motion state of one editing session."""

    mode: VimMode = VimMode.NORMAL

    # One entry per selection while a vertical gesture is in progress
    desired_columns: list[float] = field(default_factory=list)

    # Last f/F/t/T motion
    last_char_search: CharSearch | None = None

    def clear_desired_columns(self) -> None:
        """Forget remembered columns (any horizontal motion or jump)."""
        self.desired_columns = []

    def ensure_desired_columns(self, columns: Iterable[int]) -> None:
        """Seed desired columns unless a vertical gesture already set them."""
        if self.desired_columns:
            return
        self.desired_columns = list(columns)

    def stick_to_line_end(self, selection_count: int) -> None:
        """Make every cursor snap to line end on vertical motion ($)."""
        self.desired_columns = [END_OF_LINE] * selection_count

    def desired_column(self, selection_index: int, fallback: int) -> float:
        """Get the desired column for a selection, or `fallback` if unset."""
        if selection_index < len(self.desired_columns):
            return self.desired_columns[selection_index]
        return fallback

    def record_char_search(self, search: CharSearch) -> None:
        self.last_char_search = search

    def enter_mode(self, mode: VimMode) -> None:
        """Switch mode. Remembered columns don't survive a mode change."""
        if mode != self.mode:
            self.clear_desired_columns()
        self.mode = mode

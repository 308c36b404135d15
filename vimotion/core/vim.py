"""Vim mode definitions shared by the engine and its hosts."""

from __future__ import annotations

from enum import Enum


class VimMode(Enum):
    """Vim editing modes.

    Motions move selections in NORMAL, VISUAL and VISUAL_LINE. Any other
    mode leaves the selections alone.
    """

    NORMAL = "NORMAL"
    INSERT = "INSERT"
    VISUAL = "VISUAL"
    VISUAL_LINE = "V-LINE"

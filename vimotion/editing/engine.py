"""Motion engine bound to one editing session."""

from __future__ import annotations

from vimotion.core.keymap import MotionKeymapProvider, get_keymap
from vimotion.core.vim import VimMode
from vimotion.editing.motions.registry import execute_motion, repeat_char_search
from vimotion.editing.state import VimState
from vimotion.shared.core.protocols import SelectionHostProtocol
from vimotion.stores.settings import MotionSettings, load_motion_settings


class MotionEngine:
    """Runs motions against one host with one `VimState`.

    Create one per editing session. Pass `host=None` (or detach) when the
    session has no live editor; motions are then no-ops.
    """

    def __init__(
        self,
        host: SelectionHostProtocol | None,
        state: VimState | None = None,
        settings: MotionSettings | None = None,
        keymap: MotionKeymapProvider | None = None,
    ) -> None:
        self.host = host
        self.state = state or VimState()
        self.settings = settings or load_motion_settings()
        self._keymap = keymap

    @property
    def keymap(self) -> MotionKeymapProvider:
        return self._keymap or get_keymap()

    @property
    def mode(self) -> VimMode:
        return self.state.mode

    def set_mode(self, mode: VimMode) -> None:
        self.state.enter_mode(mode)

    def detach(self) -> None:
        """Forget the host, e.g. when the editor closes."""
        self.host = None

    def run(self, motion: str, char: str | None = None) -> bool:
        """Run a motion by name. See `execute_motion`."""
        return execute_motion(
            self.state, self.host, motion, char, center=self.settings.reveal_center
        )

    def run_key(self, key: str, char: str | None = None) -> bool:
        """Run the motion bound to `key`. Unbound keys do nothing."""
        motion = self.keymap.motion_for_key(key)
        if motion is None:
            return False
        return self.run(motion, char)

    def repeat(self, reverse: bool = False) -> bool:
        """Repeat the last f/F/t/T (;), or reverse it (,)."""
        return repeat_char_search(
            self.state, self.host, reverse=reverse, center=self.settings.reveal_center
        )

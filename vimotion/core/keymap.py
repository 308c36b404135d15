"""Motion keymap definitions (UI-agnostic).

Maps the keys a key-sequence matcher recognizes to registered motion names.
Matching the keys themselves (waiting for the character after f, the second
g of gg) is the host's job.

Usage:
    from vimotion.core.keymap import get_keymap

    keymap = get_keymap()
    keymap.motion_for_key("w")  # "word_forward"
    keymap.key_for_motion("line_end")  # "$"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class MotionKeyDef:
    """Definition of a motion keybinding."""

    key: str  # Key sequence (e.g., "w", "gg")
    motion: str  # Registered motion name
    takes_char: bool = False  # Key is followed by a target character (f, t)


class MotionKeymapProvider(ABC):
    """Abstract base class for motion keymap providers."""

    @abstractmethod
    def get_motion_keys(self) -> list[MotionKeyDef]:
        """Get all motion key definitions."""
        raise NotImplementedError

    def motion_for_key(self, key: str) -> str | None:
        """Get the motion bound to a key."""
        for mk in self.get_motion_keys():
            if mk.key == key:
                return mk.motion
        return None

    def key_for_motion(self, motion: str) -> str | None:
        """Get the key for a motion."""
        for mk in self.get_motion_keys():
            if mk.motion == motion:
                return mk.key
        return None

    def char_keys(self) -> set[str]:
        """Keys that wait for a target character."""
        return {mk.key for mk in self.get_motion_keys() if mk.takes_char}

    def prefixes(self) -> set[str]:
        """Proper prefixes of multi-key sequences (e.g. "g" for "gg")."""
        result: set[str] = set()
        for mk in self.get_motion_keys():
            for i in range(1, len(mk.key)):
                result.add(mk.key[:i])
        return result


class DefaultMotionKeymapProvider(MotionKeymapProvider):
    """Default keymap with the standard vim keys."""

    def get_motion_keys(self) -> list[MotionKeyDef]:
        return [
            # Basic
            MotionKeyDef("h", "left"),
            MotionKeyDef("l", "right"),
            MotionKeyDef("k", "up"),
            MotionKeyDef("j", "down"),
            # Words
            MotionKeyDef("w", "word_forward"),
            MotionKeyDef("W", "WORD_forward"),
            MotionKeyDef("b", "word_backward"),
            MotionKeyDef("B", "WORD_backward"),
            MotionKeyDef("e", "word_end"),
            MotionKeyDef("E", "WORD_end"),
            # Character search
            MotionKeyDef("f", "find_forward", takes_char=True),
            MotionKeyDef("F", "find_backward", takes_char=True),
            MotionKeyDef("t", "till_forward", takes_char=True),
            MotionKeyDef("T", "till_backward", takes_char=True),
            MotionKeyDef(";", "repeat_char_search"),
            MotionKeyDef(",", "repeat_char_search_reverse"),
            # Lines
            MotionKeyDef("gg", "first_line"),
            MotionKeyDef("G", "last_line"),
            MotionKeyDef("}", "paragraph_forward"),
            MotionKeyDef("{", "paragraph_backward"),
            MotionKeyDef("$", "line_end"),
            MotionKeyDef("_", "first_non_blank"),
        ]


class ConfigMotionKeymapProvider(DefaultMotionKeymapProvider):
    """Default keymap with per-motion key overrides from settings."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    @classmethod
    def from_settings(cls) -> ConfigMotionKeymapProvider:
        from vimotion.stores.settings import load_motion_settings

        return cls(load_motion_settings().keymap)

    def get_motion_keys(self) -> list[MotionKeyDef]:
        keys = super().get_motion_keys()
        if not self._overrides:
            return keys
        return [
            replace(mk, key=self._overrides[mk.motion]) if mk.motion in self._overrides else mk
            for mk in keys
        ]


# Global keymap instance
_keymap_provider: MotionKeymapProvider | None = None


def get_keymap() -> MotionKeymapProvider:
    """Get the current keymap provider (settings overrides applied)."""
    global _keymap_provider
    if _keymap_provider is None:
        _keymap_provider = ConfigMotionKeymapProvider.from_settings()
    return _keymap_provider


def set_keymap(provider: MotionKeymapProvider) -> None:
    """Set the keymap provider (for testing or custom keymaps)."""
    global _keymap_provider
    _keymap_provider = provider


def reset_keymap() -> None:
    """Reset to the default keymap provider."""
    global _keymap_provider
    _keymap_provider = None

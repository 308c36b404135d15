"""Settings store for motion engine settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from vimotion.shared.core.store import JSONFileStore, config_dir

MOTIONS_KEY = "motions"


def _resolve_settings_path() -> Path:
    override = os.environ.get("VIMOTION_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return config_dir() / "settings.json"


class SettingsStore(JSONFileStore):
    """Store for managing settings.

    Settings are stored as a JSON object in ~/.vimotion/settings.json
    """

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or _resolve_settings_path())

    def load_all(self) -> dict[str, Any]:
        """Load all settings.

        Returns:
            Dictionary of settings, or empty dict if none exist.
        """
        data = self._read_json()
        return data if isinstance(data, dict) else {}

    def save_all(self, settings: dict[str, Any]) -> None:
        """Save all settings, replacing existing."""
        self._write_json(settings)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a specific setting, or `default` if not set."""
        return self.load_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a specific setting."""
        settings = self.load_all()
        settings[key] = value
        self.save_all(settings)

    def delete(self, key: str) -> bool:
        """Delete a specific setting.

        Returns:
            True if key existed and was deleted, False otherwise.
        """
        settings = self.load_all()
        if key in settings:
            del settings[key]
            self.save_all(settings)
            return True
        return False


@dataclass
class MotionSettings:
    """User settings for the motion engine.

    Read from the "motions" object of settings.json:

        {"motions": {"reveal_center": false, "keymap": {"word_forward": "W"}}}
    """

    # Center the cursor when a motion takes it off screen
    reveal_center: bool = True
    # Motion name -> key overrides
    keymap: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> MotionSettings:
        """Build settings from raw JSON, ignoring unknown or mistyped values."""
        settings = cls()
        if not isinstance(data, dict):
            return settings
        reveal_center = data.get("reveal_center")
        if isinstance(reveal_center, bool):
            settings.reveal_center = reveal_center
        keymap = data.get("keymap")
        if isinstance(keymap, dict):
            settings.keymap = {
                str(name): key for name, key in keymap.items() if isinstance(key, str) and key
            }
        return settings

    def to_dict(self) -> dict[str, Any]:
        return {"reveal_center": self.reveal_center, "keymap": dict(self.keymap)}


_store: SettingsStore | None = None
_store_path: Path | None = None


def _get_store() -> SettingsStore:
    global _store, _store_path
    path = _resolve_settings_path()
    if _store is None or _store_path != path:
        _store = SettingsStore(file_path=path)
        _store_path = path
    return _store


def load_settings() -> dict:
    """Load settings from the config file."""
    return _get_store().load_all()


def save_settings(settings: dict) -> None:
    """Save settings to the config file."""
    _get_store().save_all(settings)


def load_motion_settings() -> MotionSettings:
    """Load the motion engine section of the settings file."""
    return MotionSettings.from_dict(load_settings().get(MOTIONS_KEY))


def save_motion_settings(settings: MotionSettings) -> None:
    """Write the motion engine section, keeping other settings as they are."""
    store = _get_store()
    store.set(MOTIONS_KEY, settings.to_dict())

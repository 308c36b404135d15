"""Exceptions raised for misuse of the motion engine.

Motions themselves never raise: a target that can't be found leaves the
cursor where it is. These exceptions flag caller bugs.
"""


class MotionError(Exception):
    """Base class for motion engine errors."""


class UnknownMotionError(MotionError, KeyError):
    """Raised when a motion name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown motion: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class MissingCharacterError(MotionError, ValueError):
    """Raised when a find/till motion is run without its target character."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Motion {name!r} requires a character")

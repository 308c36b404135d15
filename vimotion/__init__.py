"""vimotion - vim motion engine for text editors."""

from typing import TYPE_CHECKING, Any

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MotionEngine",
    "VimMode",
    "VimState",
]

if TYPE_CHECKING:
    from vimotion.core.vim import VimMode
    from vimotion.editing.engine import MotionEngine
    from vimotion.editing.state import VimState


def __getattr__(name: str) -> Any:
    """Lazy import so `import vimotion` stays side-effect free."""
    if name == "MotionEngine":
        from vimotion.editing.engine import MotionEngine

        return MotionEngine
    if name == "VimMode":
        from vimotion.core.vim import VimMode

        return VimMode
    if name == "VimState":
        from vimotion.editing.state import VimState

        return VimState
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

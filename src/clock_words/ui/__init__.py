"""UI layer - PySide6 presentation components."""

from .clock_window import ClockWindow

__all__ = ["ClockWindow"]

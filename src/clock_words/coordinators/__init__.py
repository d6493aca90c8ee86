"""Coordinators - Orchestration layer connecting the clock UI with the word store."""

from .word_clock_coordinator import WordClockCoordinator

__all__ = ["WordClockCoordinator"]

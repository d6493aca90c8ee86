"""Services layer - settings, word rotation and suffix formatting."""

from clock_words.services.settings_manager import SettingsManager, WordDisplaySettings
from clock_words.services.text_builder import BoundedTextBuilder
from clock_words.services.word_store import (
    DEFAULT_SUFFIX_CAPACITY,
    WordStore,
    truncate_translation,
)

__all__ = [
    "SettingsManager",
    "WordDisplaySettings",
    "BoundedTextBuilder",
    "WordStore",
    "DEFAULT_SUFFIX_CAPACITY",
    "truncate_translation",
]

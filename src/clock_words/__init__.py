"""
Clock Words - vocabulary suffix for a desktop clock.

Cycles through a bundled CET-4 word list and renders the current word,
its phonetic transcription and a short translation next to the time.
"""

__version__ = "0.1.0"

# Make key components available at package level
from clock_words.core import PhoneticMode, WordEntry
from clock_words.io import PackageResourceProvider, parse_word_list
from clock_words.services import WordDisplaySettings, WordStore

__all__ = [
    "WordEntry",
    "PhoneticMode",
    "PackageResourceProvider",
    "parse_word_list",
    "WordDisplaySettings",
    "WordStore",
]

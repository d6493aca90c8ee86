"""Domain layer - Word entries, display modes and error kinds."""

from .errors import (
    InsufficientDataError,
    NoUsableEntriesError,
    ResourceUnavailableError,
    WordListError,
    WordListParseError,
)
from .word_entry import PhoneticMode, WordEntry

__all__ = [
    "WordEntry",
    "PhoneticMode",
    "WordListError",
    "ResourceUnavailableError",
    "WordListParseError",
    "InsufficientDataError",
    "NoUsableEntriesError",
]

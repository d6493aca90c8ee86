"""I/O layer - Word list resources and TSV parsing."""

from .resource_provider import (
    DEFAULT_WORD_LIST_KEY,
    InMemoryResourceProvider,
    PackageResourceProvider,
    ResourceProvider,
)
from .word_list_parser import MIN_LINE_COUNT, parse_word_list

__all__ = [
    "ResourceProvider",
    "PackageResourceProvider",
    "InMemoryResourceProvider",
    "DEFAULT_WORD_LIST_KEY",
    "parse_word_list",
    "MIN_LINE_COUNT",
]

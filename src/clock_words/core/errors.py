"""Failures raised while loading the word list."""


class WordListError(Exception):
    """Base class for word list loading failures."""


class ResourceUnavailableError(WordListError):
    """The resource provider could not supply the word list buffer."""


class WordListParseError(WordListError):
    """The word list buffer could not be turned into entries."""


class InsufficientDataError(WordListParseError):
    """The buffer has fewer lines than a real word list would."""

    def __init__(self, line_count: int, minimum: int):
        super().__init__(
            f"Word list has {line_count} lines, expected at least {minimum}"
        )
        self.line_count = line_count
        self.minimum = minimum


class NoUsableEntriesError(WordListParseError):
    """Every row was dropped because its word column was empty."""

"""Word list parser - turns the tab-separated vocabulary buffer into entries.

Format: one word per line, up to four tab-separated columns
(word, UK phonetic, US phonetic, translation). No header, no escaping.
"""

from typing import List, Optional, Union

from clock_words.core import (
    InsufficientDataError,
    NoUsableEntriesError,
    WordEntry,
    WordListParseError,
)

# A real list has hundreds of rows; fewer lines than this means a broken resource.
MIN_LINE_COUNT = 10

_FIELD_COUNT = 4
_TRIM_CHARS = " \t\r\n"


def parse_word_list(data: Union[bytes, str]) -> List[WordEntry]:
    """
    Parse a UTF-8 word list into entries, keeping source order.

    Rows whose word column is blank are dropped. The whole buffer is
    rejected when it holds fewer than MIN_LINE_COUNT newline characters
    or when no row survives.

    Args:
        data: Raw resource bytes (UTF-8, optional BOM) or decoded text.

    Returns:
        Non-empty list of WordEntry.

    Raises:
        InsufficientDataError: Fewer than MIN_LINE_COUNT lines.
        NoUsableEntriesError: Every row had an empty word column.
        WordListParseError: The bytes are not valid UTF-8.
    """
    text = _decode(data)

    line_count = text.count("\n")
    if line_count < MIN_LINE_COUNT:
        raise InsufficientDataError(line_count, MIN_LINE_COUNT)

    entries: List[WordEntry] = []
    for line in text.split("\n"):
        entry = _parse_line(line)
        if entry is not None:
            entries.append(entry)

    if not entries:
        raise NoUsableEntriesError("Word list contains no usable rows")
    return entries


def _decode(data: Union[bytes, str]) -> str:
    if isinstance(data, str):
        return data.lstrip("\ufeff")
    try:
        return bytes(data).decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise WordListParseError(f"Word list is not valid UTF-8: {exc}") from exc


def _parse_line(line: str) -> Optional[WordEntry]:
    # maxsplit keeps any further tabs inside the translation column
    fields = [field.strip(_TRIM_CHARS) for field in line.split("\t", _FIELD_COUNT - 1)]
    if not fields[0]:
        return None

    fields.extend([""] * (_FIELD_COUNT - len(fields)))
    name, uk, us, translation = fields
    return WordEntry(name=name, phonetic_uk=uk, phonetic_us=us, translation=translation)

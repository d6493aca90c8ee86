"""Word entry entity and phonetic display mode."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


@dataclass(frozen=True)
class WordEntry:
    """A single vocabulary row: headword, UK/US transcriptions and translation."""

    name: str
    phonetic_uk: str = ""
    phonetic_us: str = ""
    translation: str = ""


class PhoneticMode(IntEnum):
    """Which transcription(s) to show next to the word."""

    UK = 0
    US = 1
    BOTH = 2

    @classmethod
    def parse(cls, value: Union["PhoneticMode", int, str, None]) -> "PhoneticMode":
        """Coerce a stored config value into a mode.

        Accepts the numeric form (0/1/2, as int or string) or the member
        name in any case. Unknown values fall back to UK.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return cls.UK
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                return cls.UK
        return cls.UK

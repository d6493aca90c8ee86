"""Settings Manager - word display configuration backed by a .env file."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, set_key

from clock_words.core import PhoneticMode

ENABLED_KEY = "WORD_DISPLAY_ENABLED"
INTERVAL_KEY = "WORD_SWITCH_INTERVAL_SEC"
SHOW_PHONETIC_KEY = "WORD_SHOW_PHONETIC"
PHONETIC_MODE_KEY = "WORD_PHONETIC_MODE"
SHOW_TRANSLATION_KEY = "WORD_SHOW_TRANSLATION"
TRANSLATION_MAX_LEN_KEY = "WORD_TRANSLATION_MAX_LEN"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class WordDisplaySettings:
    """Word display options read by WordStore on every call.

    switch_interval_sec and translation_max_len use 0 to mean
    "disabled" and "unlimited" respectively.
    """

    enabled: bool = False
    switch_interval_sec: int = 20
    show_phonetic: bool = True
    phonetic_mode: PhoneticMode = PhoneticMode.UK
    show_translation: bool = True
    translation_max_len: int = 10


class SettingsManager:
    """
    Loads and persists word display settings.

    Values live in a .env file in the project root; malformed entries
    fall back to the WordDisplaySettings defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = Path(project_root)
        self._env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=self._env_path)

    @property
    def env_path(self) -> Path:
        return self._env_path

    def get_word_display_settings(self) -> WordDisplaySettings:
        """Build settings from the environment, defaulting missing values."""
        defaults = WordDisplaySettings()
        return WordDisplaySettings(
            enabled=_read_bool(ENABLED_KEY, defaults.enabled),
            switch_interval_sec=_read_non_negative_int(
                INTERVAL_KEY, defaults.switch_interval_sec
            ),
            show_phonetic=_read_bool(SHOW_PHONETIC_KEY, defaults.show_phonetic),
            phonetic_mode=PhoneticMode.parse(
                os.getenv(PHONETIC_MODE_KEY, str(int(defaults.phonetic_mode)))
            ),
            show_translation=_read_bool(SHOW_TRANSLATION_KEY, defaults.show_translation),
            translation_max_len=_read_non_negative_int(
                TRANSLATION_MAX_LEN_KEY, defaults.translation_max_len
            ),
        )

    def save_word_display_settings(self, settings: WordDisplaySettings) -> None:
        """Write settings to the .env file and the current environment."""
        values = {
            ENABLED_KEY: "1" if settings.enabled else "0",
            INTERVAL_KEY: str(max(0, int(settings.switch_interval_sec))),
            SHOW_PHONETIC_KEY: "1" if settings.show_phonetic else "0",
            PHONETIC_MODE_KEY: str(int(PhoneticMode.parse(settings.phonetic_mode))),
            SHOW_TRANSLATION_KEY: "1" if settings.show_translation else "0",
            TRANSLATION_MAX_LEN_KEY: str(max(0, int(settings.translation_max_len))),
        }

        self._env_path.parent.mkdir(parents=True, exist_ok=True)
        self._env_path.touch(exist_ok=True)
        for key, value in values.items():
            set_key(str(self._env_path), key, value)
            os.environ[key] = value

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._env_path, override=True)


def _read_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _read_non_negative_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return max(0, int(raw.strip()))
    except ValueError:
        return default

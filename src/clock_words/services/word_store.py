"""Word Store - rotates through the vocabulary list and formats the clock suffix.

One store per clock window. Not thread-safe: call it from the UI thread.
"""

import time
from typing import Callable, List, Optional, Tuple

from clock_words.core import PhoneticMode, WordEntry, WordListError
from clock_words.io import DEFAULT_WORD_LIST_KEY, ResourceProvider, parse_word_list
from clock_words.services.settings_manager import WordDisplaySettings
from clock_words.services.text_builder import BoundedTextBuilder

# Millisecond ticks wrap like a 32-bit counter.
TICK_MASK = 0xFFFFFFFF

DEFAULT_SUFFIX_CAPACITY = 256
TRANSLATION_HARD_CAP = 240

LEADING_SPACING = "  "
TRANSLATION_SEPARATOR = " · "
ELLIPSIS = "…"


def monotonic_ticks() -> int:
    """Milliseconds from the monotonic clock, wrapped to 32 bits."""
    return int(time.monotonic() * 1000) & TICK_MASK


def ticks_elapsed(now: int, since: int) -> int:
    """Milliseconds from since to now, tolerating one counter wraparound."""
    return (now - since) & TICK_MASK


def truncate_translation(translation: str, max_len: int) -> str:
    """
    Shorten a translation for display.

    max_len <= 0 keeps the full text. Longer text is cut to max_len
    characters (never more than TRANSLATION_HARD_CAP) plus an ellipsis.
    """
    if max_len <= 0 or len(translation) <= max_len:
        return translation
    return translation[: min(max_len, TRANSLATION_HARD_CAP)] + ELLIPSIS


class WordStore:
    """
    Holds the parsed word list and the current word pointer.

    The list is loaded lazily on first use from a ResourceProvider and
    never changes afterwards; only the index moves. Load failures are
    recorded in last_error and turn every query into a no-op.
    """

    def __init__(
        self,
        settings: WordDisplaySettings,
        provider: ResourceProvider,
        resource_key: str = DEFAULT_WORD_LIST_KEY,
        clock: Optional[Callable[[], int]] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            settings: Display options; read on every call, so callers may mutate it.
            provider: Source of the raw word list bytes.
            resource_key: Key passed to provider.load().
            clock: Millisecond tick source. Defaults to the monotonic clock.
            seed: Picks the starting word (seed % count). Defaults to a clock reading.
        """
        if settings is None:
            raise ValueError("WordDisplaySettings must not be None")
        if provider is None:
            raise ValueError("ResourceProvider must not be None")

        self.settings = settings
        self._provider = provider
        self._resource_key = resource_key
        self._clock = clock or monotonic_ticks
        self._seed = seed

        self._entries: List[WordEntry] = []
        self._current_index: Optional[int] = None
        self._armed_at = 0
        self._initialized = False
        self._load_attempted = False
        self._last_error: Optional[WordListError] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def last_error(self) -> Optional[WordListError]:
        """Failure from the most recent load attempt, if any."""
        return self._last_error

    @property
    def word_count(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[WordEntry, ...]:
        return tuple(self._entries)

    @property
    def current_index(self) -> Optional[int]:
        return self._current_index

    @property
    def current_entry(self) -> Optional[WordEntry]:
        index = self._current_index
        if index is None or not 0 <= index < len(self._entries):
            return None
        return self._entries[index]

    @property
    def next_switch_tick(self) -> int:
        """Tick at which tick() will next rotate, for the current interval."""
        return (self._armed_at + self._interval_ms()) & TICK_MASK

    def now(self) -> int:
        """Current tick from the store's clock, wrapped to 32 bits."""
        return int(self._clock()) & TICK_MASK

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> bool:
        """
        Load and parse the word list. Safe to call repeatedly.

        Returns:
            True if the store holds words, False if loading failed.
        """
        if self._initialized:
            return True
        self._load_attempted = True

        try:
            data = self._provider.load(self._resource_key)
            entries = parse_word_list(data)
        except WordListError as exc:
            self._last_error = exc
            print(f"WordStore: failed to load word list '{self._resource_key}': {exc}")
            return False

        self._entries = entries
        self._last_error = None
        self._initialized = True

        # Random-ish start so the clock does not always open on the first word
        now = self.now()
        seed = self._seed if self._seed is not None else now
        self._current_index = seed % len(entries)
        self._armed_at = now

        print(f"WordStore initialized with {len(entries)} words")
        return True

    def shutdown(self) -> None:
        """Drop all words and return to the uninitialized state."""
        self._entries = []
        self._current_index = None
        self._armed_at = 0
        self._initialized = False
        self._load_attempted = False
        self._last_error = None

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def next(self) -> bool:
        """Advance to the next word and restart the auto-switch countdown.

        Returns:
            True if the current word changed.
        """
        if not self._ensure_loaded():
            return False

        changed = self._advance()
        interval_ms = self._interval_ms()
        if interval_ms > 0:
            self._armed_at = self.now()
        return changed

    def tick(self, now: int) -> bool:
        """
        Advance one word if the auto-switch deadline has passed.

        Cheap when idle; meant to be called on every UI refresh. Never
        skips more than one word however late the call is.

        Args:
            now: Millisecond tick from the same clock as the store's.

        Returns:
            True if the current word changed.
        """
        if not self.settings.enabled:
            return False
        if not self._ensure_loaded():
            return False

        interval_ms = self._interval_ms()
        if interval_ms <= 0:
            return False

        now &= TICK_MASK
        # Elapsed since arming; valid for any pause shorter than the full counter range.
        if ticks_elapsed(now, self._armed_at) < interval_ms:
            return False

        changed = self._advance()
        self._armed_at = now
        return changed

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_suffix(self, capacity: int = DEFAULT_SUFFIX_CAPACITY) -> str:
        """
        Render the current word for display after the clock time.

        Example: "  abandon [əˈbændən] · 放弃…"

        Args:
            capacity: Output size including a terminator slot; the result
                      is at most capacity - 1 characters.

        Returns:
            The suffix, or "" if word display is off or no word is available.
        """
        builder = BoundedTextBuilder(capacity)
        if builder.is_full or not self.settings.enabled:
            return builder.text
        if not self._ensure_loaded():
            return builder.text

        entry = self.current_entry
        if entry is None:
            return builder.text

        builder.append(LEADING_SPACING)
        builder.append(entry.name)

        if self.settings.show_phonetic:
            mode = PhoneticMode.parse(self.settings.phonetic_mode)
            if mode in (PhoneticMode.UK, PhoneticMode.BOTH):
                _append_phonetic(builder, entry.phonetic_uk)
            if mode in (PhoneticMode.US, PhoneticMode.BOTH):
                _append_phonetic(builder, entry.phonetic_us)

        if self.settings.show_translation and entry.translation:
            builder.append(TRANSLATION_SEPARATOR)
            builder.append(
                truncate_translation(entry.translation, int(self.settings.translation_max_len))
            )

        return builder.text

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_loaded(self) -> bool:
        # Lazy callers try once; an explicit init() is needed to retry a failure.
        if not self._initialized and not self._load_attempted:
            self.init()
        return self._initialized and bool(self._entries)

    def _interval_ms(self) -> int:
        seconds = int(self.settings.switch_interval_sec)
        return seconds * 1000 if seconds > 0 else 0

    def _advance(self) -> bool:
        if not self._entries:
            return False
        index = (self._current_index if self._current_index is not None else -1) + 1
        if index >= len(self._entries):
            index = 0
        if index == self._current_index:
            return False
        self._current_index = index
        return True


def _append_phonetic(builder: BoundedTextBuilder, phonetic: str) -> None:
    if phonetic:
        builder.append(" [")
        builder.append(phonetic)
        builder.append("]")

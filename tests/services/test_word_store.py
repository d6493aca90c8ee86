"""Unit tests for WordStore - loading, rotation, timer and suffix formatting."""

from unittest.mock import MagicMock

import pytest

from clock_words.core import (
    InsufficientDataError,
    NoUsableEntriesError,
    PhoneticMode,
    ResourceUnavailableError,
)
from clock_words.io import DEFAULT_WORD_LIST_KEY, InMemoryResourceProvider, ResourceProvider
from clock_words.services import WordDisplaySettings, WordStore, truncate_translation
from clock_words.services.word_store import TICK_MASK, ticks_elapsed

pytestmark = pytest.mark.service

ABANDON_ROW = "abandon\təˈbændən\t\t放弃；抛弃"


class FakeClock:
    """Settable millisecond tick source."""

    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


def word_list(rows, min_lines=10):
    """Encode rows as a TSV buffer padded with blank lines to the minimum size."""
    lines = list(rows) + [""] * max(0, min_lines - len(rows))
    return "".join(line + "\n" for line in lines).encode("utf-8")


def numbered_rows(count):
    return [f"word{i}\tuk{i}\tus{i}\ttrans{i}" for i in range(count)]


def make_store(rows=None, settings=None, clock=None, seed=0, data=None):
    if data is None:
        data = word_list(rows if rows is not None else numbered_rows(10))
    provider = InMemoryResourceProvider({DEFAULT_WORD_LIST_KEY: data})
    return WordStore(
        settings=settings or WordDisplaySettings(enabled=True),
        provider=provider,
        clock=clock or FakeClock(),
        seed=seed,
    )


def failing_provider(*errors_or_data):
    provider = MagicMock(spec=ResourceProvider)
    provider.load.side_effect = list(errors_or_data)
    return provider


class TestWordStoreInit:
    """Loading the word list."""

    def test_init_loads_entries(self):
        store = make_store()

        assert store.init() is True
        assert store.is_initialized
        assert store.word_count == 10
        assert store.last_error is None

    def test_init_is_idempotent(self):
        provider = MagicMock(spec=ResourceProvider)
        provider.load.return_value = word_list(numbered_rows(10))
        store = WordStore(WordDisplaySettings(), provider, clock=FakeClock(), seed=0)

        assert store.init() is True
        assert store.init() is True
        provider.load.assert_called_once_with(DEFAULT_WORD_LIST_KEY)

    def test_seed_picks_starting_index(self):
        store = make_store(seed=13)
        store.init()

        assert store.current_index == 3

    def test_default_seed_comes_from_clock(self):
        store = make_store(clock=FakeClock(now=1007), seed=None)
        store.init()

        assert store.current_index == 7

    def test_init_arms_deadline(self):
        settings = WordDisplaySettings(enabled=True, switch_interval_sec=20)
        store = make_store(settings=settings, clock=FakeClock(now=1000))
        store.init()

        assert store.next_switch_tick == 21000

    def test_resource_unavailable_leaves_store_uninitialized(self):
        store = WordStore(
            WordDisplaySettings(enabled=True),
            InMemoryResourceProvider(),
            clock=FakeClock(),
        )

        assert store.init() is False
        assert not store.is_initialized
        assert isinstance(store.last_error, ResourceUnavailableError)
        assert store.current_entry is None

    def test_short_resource_reports_insufficient_data(self):
        store = make_store(data="".join(r + "\n" for r in numbered_rows(9)).encode())

        assert store.init() is False
        assert isinstance(store.last_error, InsufficientDataError)

    def test_nameless_resource_reports_no_usable_entries(self):
        store = make_store(rows=["\tuk\tus\ttrans"] * 10)

        assert store.init() is False
        assert isinstance(store.last_error, NoUsableEntriesError)

    def test_explicit_init_retries_after_failure(self):
        provider = failing_provider(
            ResourceUnavailableError("missing"), word_list(numbered_rows(10))
        )
        store = WordStore(WordDisplaySettings(enabled=True), provider, clock=FakeClock(), seed=0)

        assert store.init() is False
        assert store.init() is True
        assert store.word_count == 10
        assert store.last_error is None

    def test_lazy_calls_do_not_retry_failed_load(self):
        provider = failing_provider(ResourceUnavailableError("missing"))
        store = WordStore(WordDisplaySettings(enabled=True), provider, clock=FakeClock())

        assert store.format_suffix() == ""
        assert store.next() is False
        assert store.tick(10**6) is False
        provider.load.assert_called_once()

    def test_shutdown_resets_state(self):
        store = make_store()
        store.init()
        store.shutdown()

        assert not store.is_initialized
        assert store.word_count == 0
        assert store.current_index is None
        assert store.current_entry is None

    def test_shutdown_without_init_is_safe(self):
        store = make_store()
        store.shutdown()
        assert not store.is_initialized

    def test_lazy_load_after_shutdown(self):
        store = make_store()
        store.init()
        store.shutdown()

        assert store.next() is True
        assert store.is_initialized


class TestWordStoreRotation:
    """next() and tick() advancement."""

    def test_next_lazily_initializes(self):
        store = make_store(seed=0)

        assert store.next() is True
        assert store.current_index == 1

    def test_next_wraps_to_first_entry(self):
        store = make_store(rows=numbered_rows(3), seed=2)
        store.init()
        assert store.current_index == 2

        assert store.next() is True
        assert store.current_index == 0

    def test_next_with_single_entry_reports_no_change(self):
        store = make_store(rows=["only\tuk\tus\tt"])

        assert store.next() is False
        assert store.current_index == 0

    def test_next_rearms_deadline(self):
        clock = FakeClock(now=1000)
        store = make_store(
            settings=WordDisplaySettings(enabled=True, switch_interval_sec=20), clock=clock
        )
        store.init()

        clock.now = 5000
        store.next()
        assert store.next_switch_tick == 25000

    def test_next_works_while_display_disabled(self):
        store = make_store(settings=WordDisplaySettings(enabled=False))
        assert store.next() is True

    def test_tick_disabled_is_noop_and_does_not_load(self):
        provider = MagicMock(spec=ResourceProvider)
        store = WordStore(WordDisplaySettings(enabled=False), provider, clock=FakeClock())

        assert store.tick(10**6) is False
        provider.load.assert_not_called()

    def test_tick_before_deadline_does_nothing(self):
        store = make_store(settings=WordDisplaySettings(enabled=True, switch_interval_sec=20))
        store.init()

        assert store.tick(20999) is False
        assert store.current_index == 0

    def test_tick_at_deadline_advances_once(self):
        store = make_store(settings=WordDisplaySettings(enabled=True, switch_interval_sec=20))
        store.init()

        assert store.tick(21000) is True
        assert store.current_index == 1
        assert store.next_switch_tick == 41000

    def test_late_tick_advances_only_one_step(self):
        store = make_store(settings=WordDisplaySettings(enabled=True, switch_interval_sec=1))
        store.init()

        assert store.tick(1000 + 50_000) is True
        assert store.current_index == 1
        assert store.next_switch_tick == 52000

    def test_tick_with_zero_interval_never_changes(self):
        store = make_store(settings=WordDisplaySettings(enabled=True, switch_interval_sec=0))
        store.init()

        for now in (0, 1000, 21000, 10**9, TICK_MASK):
            assert store.tick(now) is False
        assert store.current_index == 0

    def test_tick_handles_counter_wraparound(self):
        clock = FakeClock(now=0xFFFFFF00)
        store = make_store(
            settings=WordDisplaySettings(enabled=True, switch_interval_sec=1), clock=clock
        )
        store.init()
        assert store.next_switch_tick == (0xFFFFFF00 + 1000) & TICK_MASK

        assert store.tick(0xFFFFFFF0) is False
        assert store.tick(store.next_switch_tick) is True

    def test_ticks_elapsed_across_wraparound(self):
        assert ticks_elapsed(100, 100) == 0
        assert ticks_elapsed(1100, 100) == 1000
        assert ticks_elapsed(5, TICK_MASK - 5) == 11

    def test_tick_lazily_initializes_enabled_store(self):
        provider = MagicMock(spec=ResourceProvider)
        provider.load.return_value = word_list(numbered_rows(10))
        store = WordStore(
            WordDisplaySettings(enabled=True, switch_interval_sec=20),
            provider,
            clock=FakeClock(now=1000),
            seed=0,
        )
        assert not store.is_initialized

        assert store.tick(21000) is True
        assert store.is_initialized
        assert store.current_index == 1
        provider.load.assert_called_once_with(DEFAULT_WORD_LIST_KEY)

    def test_tick_rotates_after_long_disabled_pause(self):
        settings = WordDisplaySettings(enabled=True, switch_interval_sec=20)
        store = make_store(settings=settings, clock=FakeClock(now=1000))
        store.init()

        late = (1000 + 20000 + 2**31 + 5000) & TICK_MASK
        settings.enabled = False
        assert store.tick(late) is False

        settings.enabled = True
        assert store.tick(late) is True
        assert store.current_index == 1


class TestWordStoreFormatting:
    """format_suffix() output."""

    def test_disabled_display_renders_empty(self):
        store = make_store(
            rows=[ABANDON_ROW],
            settings=WordDisplaySettings(
                enabled=False, show_phonetic=True, show_translation=True
            ),
        )
        store.init()

        assert store.format_suffix() == ""

    def test_uk_phonetic_with_truncated_translation(self):
        settings = WordDisplaySettings(
            enabled=True,
            show_phonetic=True,
            phonetic_mode=PhoneticMode.UK,
            show_translation=True,
            translation_max_len=2,
        )
        store = make_store(rows=[ABANDON_ROW], settings=settings)

        assert store.format_suffix() == "  abandon [əˈbændən] · 放弃…"

    def test_both_phonetics_in_sequence(self):
        settings = WordDisplaySettings(
            enabled=True,
            show_phonetic=True,
            phonetic_mode=PhoneticMode.BOTH,
            show_translation=True,
            translation_max_len=2,
        )
        store = make_store(rows=["abandon\təˈbændən\təˈbændən\t放弃；抛弃"], settings=settings)

        assert store.format_suffix() == "  abandon [əˈbændən] [əˈbændən] · 放弃…"

    def test_us_mode_skips_missing_transcription(self):
        settings = WordDisplaySettings(enabled=True, phonetic_mode=PhoneticMode.US)
        store = make_store(rows=[ABANDON_ROW], settings=settings)

        assert store.format_suffix() == "  abandon · 放弃；抛弃"

    def test_both_mode_uses_whichever_is_present(self):
        settings = WordDisplaySettings(enabled=True, phonetic_mode=PhoneticMode.BOTH)
        store = make_store(rows=["cat\t\tkæt\t猫"], settings=settings)

        assert store.format_suffix() == "  cat [kæt] · 猫"

    def test_phonetic_hidden_when_disabled(self):
        settings = WordDisplaySettings(enabled=True, show_phonetic=False)
        store = make_store(rows=[ABANDON_ROW], settings=settings)

        assert store.format_suffix() == "  abandon · 放弃；抛弃"

    def test_translation_hidden_when_disabled(self):
        settings = WordDisplaySettings(enabled=True, show_translation=False)
        store = make_store(rows=[ABANDON_ROW], settings=settings)

        assert store.format_suffix() == "  abandon [əˈbændən]"

    def test_empty_translation_omits_separator(self):
        store = make_store(rows=["cat\tkæt"])
        assert store.format_suffix() == "  cat [kæt]"

    def test_unlimited_translation_length(self):
        settings = WordDisplaySettings(enabled=True, translation_max_len=0)
        store = make_store(rows=[ABANDON_ROW], settings=settings)

        assert store.format_suffix().endswith(" · 放弃；抛弃")

    def test_small_capacity_never_overflows(self):
        store = make_store(rows=[ABANDON_ROW])

        suffix = store.format_suffix(5)
        assert suffix == "  ab"
        assert len(suffix) <= 4

    @pytest.mark.parametrize("capacity", [0, 1])
    def test_degenerate_capacity_renders_empty(self, capacity):
        store = make_store(rows=[ABANDON_ROW])
        assert store.format_suffix(capacity) == ""

    def test_capacity_cuts_inside_phonetic(self):
        store = make_store(rows=[ABANDON_ROW])
        assert store.format_suffix(14) == "  abandon [əˈ"

    def test_settings_changes_apply_on_next_call(self):
        settings = WordDisplaySettings(enabled=True)
        store = make_store(rows=[ABANDON_ROW], settings=settings)
        assert store.format_suffix() != ""

        settings.enabled = False
        assert store.format_suffix() == ""

    def test_suffix_follows_rotation(self):
        store = make_store(
            rows=numbered_rows(3),
            settings=WordDisplaySettings(enabled=True, show_phonetic=False, show_translation=False),
        )

        assert store.format_suffix() == "  word0"
        store.next()
        assert store.format_suffix() == "  word1"


class TestTruncateTranslation:
    """Translation shortening rules."""

    def test_short_translation_kept(self):
        assert truncate_translation("放弃", 2) == "放弃"

    def test_long_translation_gets_ellipsis(self):
        assert truncate_translation("放弃；抛弃", 2) == "放弃…"

    def test_zero_means_unlimited(self):
        assert truncate_translation("x" * 500, 0) == "x" * 500

    def test_hard_cap_at_240_characters(self):
        result = truncate_translation("x" * 500, 300)
        assert result == "x" * 240 + "…"

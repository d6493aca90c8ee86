"""Word Clock Coordinator - drives the clock refresh timer and word rotation."""

from dataclasses import fields
from datetime import datetime
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from clock_words.core import PhoneticMode
from clock_words.services import SettingsManager, WordDisplaySettings, WordStore


class WordClockCoordinator(QObject):
    """Refreshes the clock once per timer period and rotates words.

    Responsibilities:
    - Emit the current time text on every refresh
    - Tick the word store and emit the suffix when the word changes
    - Force the next word on user request
    - Apply and persist display option changes from the menu
    - Release the store when stopped
    """

    # Emitted with the formatted word suffix ("" when word display is off)
    suffix_changed = Signal(str)
    # Emitted with the formatted clock time on every refresh
    time_changed = Signal(str)
    # Emitted with the WordDisplaySettings after the user changes an option
    settings_changed = Signal(object)

    DEFAULT_REFRESH_MS = 1000

    def __init__(
        self,
        word_store: WordStore,
        settings_manager: Optional[SettingsManager] = None,
        refresh_interval_ms: int = DEFAULT_REFRESH_MS,
        time_format: str = "%H:%M:%S",
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)

        if word_store is None:
            raise ValueError("WordStore must not be None")
        if refresh_interval_ms <= 0:
            raise ValueError(f"refresh_interval_ms must be positive, got {refresh_interval_ms}")

        self.word_store = word_store
        self.settings_manager = settings_manager
        self.time_format = time_format

        self._timer = QTimer(self)
        self._timer.setInterval(refresh_interval_ms)
        self._timer.timeout.connect(self.handle_timeout)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @property
    def refresh_interval_ms(self) -> int:
        return self._timer.interval()

    def start(self) -> None:
        """Start periodic refresh and publish the initial state."""
        self._timer.start()
        self._emit_time()
        self.refresh()

    def stop(self) -> None:
        """Stop refreshing and free the word list."""
        self._timer.stop()
        self.word_store.shutdown()

    def refresh(self) -> str:
        """Re-render and publish the current suffix (e.g., after settings change)."""
        suffix = self.word_store.format_suffix()
        self.suffix_changed.emit(suffix)
        return suffix

    @Slot()
    def handle_timeout(self) -> None:
        """Timer callback: update time, rotate the word when due."""
        self._emit_time()
        if self.word_store.tick(self.word_store.now()):
            self.refresh()

    @Slot()
    def handle_next_requested(self) -> None:
        """Handle when user asks for the next word."""
        self.word_store.next()
        self.refresh()

    def update_settings(self, **changes) -> str:
        """
        Change display options, persist them and re-render the suffix.

        Args:
            **changes: WordDisplaySettings field names and their new values.

        Returns:
            The suffix rendered with the new settings.

        Raises:
            ValueError: If a name is not a WordDisplaySettings field.
        """
        settings = self.word_store.settings
        known = {field.name for field in fields(WordDisplaySettings)}
        for name in changes:
            if name not in known:
                raise ValueError(f"Unknown word display setting: {name}")
        for name, value in changes.items():
            setattr(settings, name, value)

        if self.settings_manager is not None:
            self.settings_manager.save_word_display_settings(settings)

        self.settings_changed.emit(settings)
        return self.refresh()

    @Slot(bool)
    def handle_word_display_toggled(self, enabled: bool) -> None:
        self.update_settings(enabled=bool(enabled))

    @Slot(bool)
    def handle_phonetic_toggled(self, show: bool) -> None:
        self.update_settings(show_phonetic=bool(show))

    @Slot(int)
    def handle_phonetic_mode_selected(self, mode: int) -> None:
        self.update_settings(phonetic_mode=PhoneticMode.parse(mode))

    @Slot(bool)
    def handle_translation_toggled(self, show: bool) -> None:
        self.update_settings(show_translation=bool(show))

    def _emit_time(self) -> None:
        self.time_changed.emit(datetime.now().strftime(self.time_format))

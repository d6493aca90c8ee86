"""Main entry point for the clock words application."""

import sys
from PySide6.QtWidgets import QApplication

from clock_words.coordinators import WordClockCoordinator
from clock_words.io import PackageResourceProvider
from clock_words.services import SettingsManager, WordStore
from clock_words.ui import ClockWindow


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Clock Words")
    app.setOrganizationName("ClockWords")

    # 2. Load configuration and the embedded word list
    settings_manager = SettingsManager()
    settings = settings_manager.get_word_display_settings()
    word_store = WordStore(settings=settings, provider=PackageResourceProvider())

    # 3. Construct UI
    window = ClockWindow()
    window.set_display_settings(settings)

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = WordClockCoordinator(word_store=word_store, settings_manager=settings_manager)

    # 5. Signal Wiring
    coordinator.time_changed.connect(window.update_time)
    coordinator.suffix_changed.connect(window.set_suffix)
    window.next_word_requested.connect(coordinator.handle_next_requested)
    window.word_display_toggled.connect(coordinator.handle_word_display_toggled)
    window.phonetic_toggled.connect(coordinator.handle_phonetic_toggled)
    window.phonetic_mode_selected.connect(coordinator.handle_phonetic_mode_selected)
    window.translation_toggled.connect(coordinator.handle_translation_toggled)
    coordinator.settings_changed.connect(window.set_display_settings)
    app.aboutToQuit.connect(coordinator.stop)

    # 6. Show UI and start event loop
    window.show()
    coordinator.start()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

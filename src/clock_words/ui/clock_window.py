"""Clock Window - shows the time with the current word appended."""

import sys
from typing import Optional

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QActionGroup, QContextMenuEvent, QFont, QKeyEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMenu, QWidget

from clock_words.core import PhoneticMode
from clock_words.services import WordDisplaySettings


class ClockWindow(QWidget):
    """Small always-on-top clock with a vocabulary suffix."""

    # Signal emitted when user asks for another word (N key or context menu)
    next_word_requested = Signal()
    # Signals emitted when user flips a display option in the context menu
    word_display_toggled = Signal(bool)
    phonetic_toggled = Signal(bool)
    phonetic_mode_selected = Signal(int)
    translation_toggled = Signal(bool)

    PHONETIC_MODE_LABELS = {
        PhoneticMode.UK: "&UK",
        PhoneticMode.US: "U&S",
        PhoneticMode.BOTH: "&Both",
    }

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Clock Words")
        self.setWindowFlag(Qt.WindowStaysOnTopHint, True)
        self._display_settings: Optional[WordDisplaySettings] = None

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the label layout."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(0)

        self.time_label = QLabel("--:--:--")
        time_font = QFont()
        time_font.setPointSize(28)
        time_font.setBold(True)
        self.time_label.setFont(time_font)
        layout.addWidget(self.time_label)

        self.word_label = QLabel("")
        word_font = QFont()
        word_font.setPointSize(14)
        self.word_label.setFont(word_font)
        self.word_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.word_label.hide()
        layout.addWidget(self.word_label)

    @property
    def display_text(self) -> str:
        """Time and suffix as shown to the user."""
        return self.time_label.text() + self.word_label.text()

    def update_time(self, text: str) -> None:
        self.time_label.setText(text)

    def set_display_settings(self, settings: WordDisplaySettings) -> None:
        """Remember current options so the menu shows matching check marks."""
        self._display_settings = settings

    def set_suffix(self, text: str) -> None:
        """Show the word suffix; an empty string hides the word label."""
        self.word_label.setText(text)
        self.word_label.setVisible(bool(text))

    @override
    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_N:
            self.next_word_requested.emit()
            event.accept()
            return
        super().keyPressEvent(event)

    @override
    def contextMenuEvent(self, event: QContextMenuEvent) -> None:
        menu = self._build_context_menu()
        menu.exec(event.globalPos())

    def _build_context_menu(self) -> QMenu:
        menu = QMenu(self)

        next_action = QAction("&Next Word", menu)
        next_action.setShortcut("N")
        next_action.triggered.connect(self.next_word_requested)
        menu.addAction(next_action)

        menu.addSeparator()
        self._add_display_actions(menu)
        menu.addSeparator()

        exit_action = QAction("E&xit", menu)
        exit_action.triggered.connect(self.close)
        menu.addAction(exit_action)
        return menu

    def _add_display_actions(self, menu: QMenu) -> None:
        """Add checkable word display options reflecting the current settings."""
        settings = self._display_settings or WordDisplaySettings()

        show_word_action = QAction("Show &Word", menu)
        show_word_action.setCheckable(True)
        show_word_action.setChecked(settings.enabled)
        show_word_action.triggered.connect(self.word_display_toggled)
        menu.addAction(show_word_action)

        show_phonetic_action = QAction("Show &Phonetic", menu)
        show_phonetic_action.setCheckable(True)
        show_phonetic_action.setChecked(settings.show_phonetic)
        show_phonetic_action.triggered.connect(self.phonetic_toggled)
        menu.addAction(show_phonetic_action)

        # Phonetic mode submenu, one exclusive choice
        mode_menu = menu.addMenu("Phonetic &Mode")
        mode_group = QActionGroup(mode_menu)
        mode_group.setExclusive(True)
        current_mode = PhoneticMode.parse(settings.phonetic_mode)
        for mode, label in self.PHONETIC_MODE_LABELS.items():
            mode_action = QAction(label, mode_menu)
            mode_action.setCheckable(True)
            mode_action.setChecked(mode == current_mode)
            mode_action.setData(int(mode))
            mode_action.triggered.connect(
                lambda checked=False, value=int(mode): self.phonetic_mode_selected.emit(value)
            )
            mode_group.addAction(mode_action)
            mode_menu.addAction(mode_action)

        show_translation_action = QAction("Show &Translation", menu)
        show_translation_action.setCheckable(True)
        show_translation_action.setChecked(settings.show_translation)
        show_translation_action.triggered.connect(self.translation_toggled)
        menu.addAction(show_translation_action)

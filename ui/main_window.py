# ui/main_window.py
from __future__ import annotations
import logging

from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import QTimer

from app.config import Settings
from app.themes import find_theme, load_custom_themes
from core.game import Game
from services.keyboard import event_from_qt
from services.phrases import PhraseGenerator
from ui.game_view import GameView

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: Settings):
        super().__init__()
        self.setWindowTitle("Keyrace")
        self.resize(1200, 720)

        load_custom_themes()
        self.theme = find_theme(settings.theme)

        phrases = PhraseGenerator.from_file(settings.words_file, seed=settings.seed)
        self.game = Game(
            phrases.generate,
            first_round_words=settings.first_round_words,
            next_round_words=settings.next_round_words,
        )

        self.view = GameView(self.game, self.theme, self)
        self.setCentralWidget(self.view)
        self.setStyleSheet(f"QMainWindow {{ background: {self.theme.background}; }}")

        # repaint only; the model computes elapsed time on demand
        self._ui_tick = QTimer(self)
        self._ui_tick.setInterval(100)
        self._ui_tick.timeout.connect(self._on_tick)
        self._ui_tick.start()

        self._caret_timer = QTimer(self)
        self._caret_timer.setInterval(500)
        self._caret_timer.timeout.connect(self._toggle_caret)
        self._caret_timer.start()

        self.view.refresh()

    def _on_tick(self):
        if self.game.is_ongoing:
            self.view.refresh()

    def _toggle_caret(self):
        self.view.toggle_caret()
        if self.game.is_ongoing:
            self.view.refresh()

    def keyPressEvent(self, ev):
        event = event_from_qt(ev)
        log.debug("key %s %r", event.kind.value, event.char)
        if self.game.handle_input(event):
            self.close()
            return
        ev.accept()
        self._update_title()
        self.view.refresh()

    def _update_title(self):
        last = self.game.last_round
        if self.game.is_complete and last is not None:
            self.setWindowTitle(f"Keyrace - {last.words_per_minute()} WPM")
        else:
            self.setWindowTitle("Keyrace")

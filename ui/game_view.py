# ui/game_view.py
from __future__ import annotations
from html import escape

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QStackedLayout, QSizePolicy
import pyqtgraph as pg

from app.themes import Theme
from core.game import Game
from core.round import Round
from core.typed_text import CharStatus
from services.leaderboard import leaderboard, summarize
from utils.graph_helper import setup_rounds_plot, update_curve

SPLASH_TITLE = "KEYRACE"
CONTROLS = ("[Enter]: New Game", "[Esc]: Exit Game")


def _span(txt: str, color: str, underline: str | None = None) -> str:
    style = f"color:{color}"
    if underline:
        style += f";border-bottom:2px solid {underline}"
    return f'<span style="{style}">{txt}</span>'


def render_prompt(rnd: Round, theme: Theme, caret: bool = True) -> str:
    """Prompt as HTML, each character coloured by its status."""
    colors = {
        CharStatus.CORRECT: theme.correct,
        CharStatus.INCORRECT: theme.error,
        CharStatus.EMPTY: theme.muted,
    }
    text = rnd.text
    parts: list[str] = []
    for i in range(len(text)):
        status = text.status_at(i)
        underline = theme.error if status is CharStatus.INCORRECT else None
        parts.append(_span(escape(text.display_char(i)), colors[status], underline))
    caret_color = theme.accent if caret else "transparent"
    parts.insert(text.cursor, _span("|", caret_color))
    return "".join(parts)


def render_stats(game: Game) -> str:
    rnd = game.current_round
    if rnd is None:
        return ""
    secs = game.elapsed_time()
    return (
        f"Word Accuracy: {rnd.accuracy_percent():g}%   |   "
        f"Time Elapsed: {secs:0.3f} s   |   WPM: {rnd.words_per_minute()}"
    )


class GameView(QWidget):
    """Read-only view of a Game. Three pages, one per phase."""

    def __init__(self, game: Game, theme: Theme, parent=None):
        super().__init__(parent)
        self.game = game
        self.theme = theme
        self._caret_on = True

        self._stack = QStackedLayout(self)

        # --- Waiting ---
        self.splash = QWidget(self)
        v = QVBoxLayout(self.splash)
        self.lblTitle = QLabel(SPLASH_TITLE, self.splash)
        self.lblTitle.setObjectName("lblTitle")
        self.lblTitle.setAlignment(Qt.AlignCenter)
        self.lblTitle.setStyleSheet("font-size: 64px; font-weight: 700; letter-spacing: 8px;")
        self.lblControls = QLabel("<br>".join(CONTROLS), self.splash)
        self.lblControls.setObjectName("lblControls")
        self.lblControls.setAlignment(Qt.AlignCenter)
        v.addStretch(1)
        v.addWidget(self.lblTitle)
        v.addWidget(self.lblControls)
        v.addStretch(1)

        # --- Ongoing ---
        self.ongoing = QWidget(self)
        v = QVBoxLayout(self.ongoing)
        v.setSpacing(28)
        self.lblLine = QLabel("", self.ongoing)
        self.lblLine.setObjectName("lblLine")
        self.lblLine.setTextFormat(Qt.RichText)
        self.lblLine.setWordWrap(True)
        self.lblLine.setAlignment(Qt.AlignCenter)
        self.lblLine.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.lblLine.setStyleSheet("font-size: 34px; line-height: 1.35;")
        self.lblStats = QLabel("", self.ongoing)
        self.lblStats.setObjectName("lblStats")
        self.lblStats.setAlignment(Qt.AlignCenter)
        v.addWidget(self.lblLine, 1)
        v.addWidget(self.lblStats)

        # --- Complete ---
        self.summary = QWidget(self)
        v = QVBoxLayout(self.summary)
        self.lblRounds = QLabel("", self.summary)
        self.lblRounds.setObjectName("lblRounds")
        self.lblRounds.setTextFormat(Qt.RichText)
        self.lblBoard = QLabel("", self.summary)
        self.lblBoard.setObjectName("lblBoard")
        self.lblBoard.setTextFormat(Qt.RichText)
        self.plot = pg.PlotWidget(self.summary)
        self.curve = setup_rounds_plot(self.plot, theme.accent)
        self.lblHint = QLabel("[Enter]: Next Round    [Esc]: Exit Game", self.summary)
        self.lblHint.setAlignment(Qt.AlignCenter)
        v.addWidget(self.lblRounds)
        v.addWidget(self.lblBoard)
        v.addWidget(self.plot, 1)
        v.addWidget(self.lblHint)

        for page in (self.splash, self.ongoing, self.summary):
            self._stack.addWidget(page)

        self.set_theme(theme)

    def set_theme(self, theme: Theme):
        self.theme = theme
        self.setStyleSheet(
            f"""
            QWidget {{ background: {theme.background}; color: {theme.primary}; }}
            QLabel#lblControls {{ color: {theme.accent}; }}
            QLabel#lblStats {{ color: {theme.secondary}; }}
            """
        )
        self.curve.setPen(pg.mkPen(theme.accent, width=2.5))
        self.refresh()

    def toggle_caret(self):
        self._caret_on = not self._caret_on

    def refresh(self):
        game = self.game
        if game.is_waiting:
            self._stack.setCurrentWidget(self.splash)
        elif game.is_ongoing:
            self.lblLine.setText(render_prompt(game.current_round, self.theme, self._caret_on))
            self.lblStats.setText(render_stats(game))
            self._stack.setCurrentWidget(self.ongoing)
        else:
            self._render_summary()
            self._stack.setCurrentWidget(self.summary)

    def _render_summary(self):
        rows = summarize(self.game.history)
        lines = ["Previous rounds:"]
        lines += [_span(escape(s.describe()), self.theme.correct) for s in rows]
        self.lblRounds.setText("<br>".join(lines))

        board = ["Leaderboard:"]
        board += [
            f"{rank}. Round {s.number} - {s.wpm} wpm, {s.accuracy:g}%"
            for rank, s in enumerate(leaderboard(self.game.history), start=1)
        ]
        self.lblBoard.setText("<br>".join(board))
        update_curve(self.curve, [s.wpm for s in rows])

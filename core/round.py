# core/round.py
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from app.calculation import words_per_minute
from core.keys import KeyEvent, KeyKind
from core.typed_text import TypedText

Clock = Callable[[], float]

log = logging.getLogger(__name__)


class Round:
    """One timed attempt at a phrase. The end time latches on completion."""

    def __init__(self, phrase: str, clock: Clock = time.monotonic):
        self._clock = clock
        self.text = TypedText.from_phrase(phrase)
        self.start_time: float = clock()
        self._end_time: Optional[float] = None

    @property
    def end_time(self) -> Optional[float]:
        return self._end_time

    @property
    def is_finished(self) -> bool:
        return self._end_time is not None

    def handle_key(self, event: KeyEvent) -> None:
        if event.kind is KeyKind.CHAR:
            self.text.advance(event.char)
            if self._end_time is None and self.text.is_completed():
                self._end_time = self._clock()
                log.debug("round finished after %.3f s", self.elapsed())
        elif event.kind is KeyKind.BACKSPACE:
            self.text.retreat()

    def elapsed(self) -> float:
        end = self._end_time if self._end_time is not None else self._clock()
        return end - self.start_time

    def words_per_minute(self) -> int:
        return words_per_minute(self.text.completed_word_count(), self.elapsed())

    def accuracy_percent(self) -> float:
        return self.text.accuracy_percent()

    def copy(self) -> "Round":
        clone = Round.__new__(Round)
        clone._clock = self._clock
        clone.text = self.text.copy()
        clone.start_time = self.start_time
        clone._end_time = self._end_time
        return clone

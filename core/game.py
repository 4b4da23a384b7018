# core/game.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from core.keys import KeyEvent, KeyKind
from core.round import Clock, Round

log = logging.getLogger(__name__)

FIRST_ROUND_WORDS = 5
NEXT_ROUND_WORDS = 10

PhraseSource = Callable[[int], str]


@dataclass(frozen=True)
class Waiting:
    pass


@dataclass(frozen=True)
class Ongoing:
    round: Round


@dataclass(frozen=True)
class Complete:
    pass


Phase = Union[Waiting, Ongoing, Complete]


class Game:
    """
    Session state machine: Waiting -> Ongoing -> Complete -> Ongoing ...

    handle_input() consumes exactly one key event and returns True when the
    session should end (Escape, in any phase).
    """

    def __init__(
        self,
        generate: PhraseSource,
        clock: Clock = time.monotonic,
        first_round_words: int = FIRST_ROUND_WORDS,
        next_round_words: int = NEXT_ROUND_WORDS,
    ):
        self._generate = generate
        self._clock = clock
        self.first_round_words = first_round_words
        self.next_round_words = next_round_words
        self.phase: Phase = Waiting()
        self.history: List[Round] = []

    # ---------- phase helpers ----------
    @property
    def is_waiting(self) -> bool:
        return isinstance(self.phase, Waiting)

    @property
    def is_ongoing(self) -> bool:
        return isinstance(self.phase, Ongoing)

    @property
    def is_complete(self) -> bool:
        return isinstance(self.phase, Complete)

    @property
    def current_round(self) -> Optional[Round]:
        if isinstance(self.phase, Ongoing):
            return self.phase.round
        return None

    @property
    def last_round(self) -> Optional[Round]:
        return self.history[-1] if self.history else None

    def elapsed_time(self) -> float:
        if isinstance(self.phase, Ongoing):
            return self.phase.round.elapsed()
        return 0.0

    # ---------- transitions ----------
    def _start_round(self, word_count: int) -> None:
        phrase = self._generate(word_count)
        self.phase = Ongoing(Round(phrase, clock=self._clock))
        log.info("round %d started (%d chars)", len(self.history) + 1, len(phrase))

    def handle_input(self, event: KeyEvent) -> bool:
        if event.kind is KeyKind.ESCAPE:
            log.info("quit requested")
            return True

        phase = self.phase
        if isinstance(phase, Waiting):
            if event.kind is KeyKind.ENTER:
                self._start_round(self.first_round_words)
        elif isinstance(phase, Ongoing):
            rnd = phase.round
            rnd.handle_key(event)
            if rnd.is_finished:
                self.history.append(rnd.copy())
                self.phase = Complete()
                log.info(
                    "round %d complete: %.0f%% accuracy, %d wpm",
                    len(self.history), rnd.accuracy_percent(), rnd.words_per_minute(),
                )
        elif isinstance(phase, Complete):
            if event.kind is KeyKind.ENTER:
                self._start_round(self.next_round_words)
        return False

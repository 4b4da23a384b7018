# core/typed_text.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from app.calculation import percent

WORD_STRIDE = 5
TYPED_SPACE = "·"


class CharStatus(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    EMPTY = "empty"


@dataclass
class CharSlot:
    expected: str
    given: Optional[str] = None

    @property
    def is_correct(self) -> bool:
        return self.given is not None and self.given == self.expected


class TypedText:
    """
    Target phrase plus what the user has typed so far.

    Slots before the cursor always hold a given character, slots at or after
    it never do. The number of slots is fixed by the phrase.
    """

    def __init__(self, slots: List[CharSlot]):
        self._slots = slots
        self._cursor = 0

    @classmethod
    def from_phrase(cls, phrase: str) -> "TypedText":
        return cls([CharSlot(expected=ch) for ch in phrase])

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def slots(self) -> tuple:
        return tuple(self._slots)

    @property
    def phrase(self) -> str:
        return "".join(s.expected for s in self._slots)

    @property
    def typed(self) -> str:
        return "".join(s.given for s in self._slots[: self._cursor])

    def is_completed(self) -> bool:
        return self._cursor == len(self._slots)

    # ---------- input ----------
    def advance(self, ch: str) -> None:
        if self._cursor < len(self._slots):
            self._slots[self._cursor].given = ch
            self._cursor += 1

    def retreat(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1
            self._slots[self._cursor].given = None

    # ---------- per-character queries ----------
    def _slot(self, index: int) -> Optional[CharSlot]:
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def expected_at(self, index: int) -> Optional[str]:
        slot = self._slot(index)
        return slot.expected if slot else None

    def given_at(self, index: int) -> Optional[str]:
        slot = self._slot(index)
        return slot.given if slot else None

    def status_at(self, index: int) -> CharStatus:
        slot = self._slot(index)
        if slot is None or slot.given is None:
            return CharStatus.EMPTY
        return CharStatus.CORRECT if slot.is_correct else CharStatus.INCORRECT

    def display_char(self, index: int) -> str:
        """Given char if typed (spaces shown as a dot), else the expected one."""
        slot = self._slot(index)
        if slot is None:
            return ""
        if slot.given is None:
            return slot.expected
        return TYPED_SPACE if slot.given == " " else slot.given

    # ---------- aggregates ----------
    def completed_word_count(self) -> int:
        # Approximation: one word per WORD_STRIDE committed characters.
        words = 0
        for index, slot in enumerate(self._slots):
            if slot.given is None:
                break
            if index % WORD_STRIDE == 0:
                words += 1
        return words

    def accuracy_percent(self) -> float:
        if self._cursor == 0:
            return 0.0
        hits = sum(1 for s in self._slots[: self._cursor] if s.is_correct)
        return percent(hits, self._cursor)

    def copy(self) -> "TypedText":
        clone = TypedText([CharSlot(s.expected, s.given) for s in self._slots])
        clone._cursor = self._cursor
        return clone

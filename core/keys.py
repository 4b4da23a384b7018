# core/keys.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """One discrete key press. `char` is only set for KeyKind.CHAR."""
    kind: KeyKind
    char: Optional[str] = None

    def __post_init__(self):
        if self.kind is KeyKind.CHAR and not (isinstance(self.char, str) and len(self.char) == 1):
            raise ValueError(f"expected a single character, got {self.char!r}")

    @classmethod
    def of(cls, ch: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, ch)

    @classmethod
    def backspace(cls) -> "KeyEvent":
        return cls(KeyKind.BACKSPACE)

    @classmethod
    def enter(cls) -> "KeyEvent":
        return cls(KeyKind.ENTER)

    @classmethod
    def escape(cls) -> "KeyEvent":
        return cls(KeyKind.ESCAPE)

    @classmethod
    def other(cls) -> "KeyEvent":
        return cls(KeyKind.OTHER)

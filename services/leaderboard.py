# services/leaderboard.py
from dataclasses import dataclass
from typing import List, Sequence

from core.round import Round


@dataclass(frozen=True)
class RoundSummary:
    number: int
    accuracy: float
    wpm: int
    elapsed: float

    def describe(self) -> str:
        return f"Round {self.number}: {self.accuracy:g}% word accuracy, {self.wpm} wpm"


def summarize(history: Sequence[Round]) -> List[RoundSummary]:
    return [
        RoundSummary(
            number=i,
            accuracy=rnd.accuracy_percent(),
            wpm=rnd.words_per_minute(),
            elapsed=rnd.elapsed(),
        )
        for i, rnd in enumerate(history, start=1)
    ]


def leaderboard(history: Sequence[Round], limit: int = 5) -> List[RoundSummary]:
    """Best rounds by WPM, then accuracy; earlier rounds win ties."""
    ranked = sorted(summarize(history), key=lambda s: (-s.wpm, -s.accuracy, s.number))
    return ranked[:max(0, limit)]

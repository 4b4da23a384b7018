# services/phrases.py
from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

from app.errors import PhraseSourceError
from utils.file_handler import load_words

log = logging.getLogger(__name__)

LOREM_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua enim ad minim veniam "
    "quis nostrud exercitation ullamco laboris nisi aliquip ex ea commodo "
    "consequat duis aute irure in reprehenderit voluptate velit esse cillum "
    "eu fugiat nulla pariatur excepteur sint occaecat cupidatat non proident "
    "sunt culpa qui officia deserunt mollit anim id est laborum"
).split()

MIN_SENTENCE = 4
MAX_SENTENCE = 10


class PhraseGenerator:
    """
    Lorem-ipsum style prose with an exact word count.
    Sentences are 4-10 words, capitalised, ending with a period.
    """

    def __init__(self, words: Optional[Sequence[str]] = None, seed: Optional[int] = None):
        pool = list(words) if words is not None else list(LOREM_WORDS)
        pool = [w for w in pool if w]
        if not pool:
            raise PhraseSourceError("word list is empty")
        self.words: List[str] = pool
        self._rng = random.Random(seed)

    @classmethod
    def from_file(cls, path: Path, seed: Optional[int] = None) -> "PhraseGenerator":
        words = load_words(Path(path))
        if words is None:
            return cls(seed=seed)
        if not words:
            raise PhraseSourceError(f"{path}: word list is empty")
        log.info("Loaded %d words from %s", len(words), path)
        return cls(words, seed=seed)

    def __call__(self, word_count: int) -> str:
        return self.generate(word_count)

    def generate(self, word_count: int) -> str:
        if word_count < 0:
            raise ValueError(f"word_count must be >= 0, got {word_count}")
        sentences = []
        remaining = word_count
        while remaining > 0:
            size = min(remaining, self._rng.randint(MIN_SENTENCE, MAX_SENTENCE))
            # don't leave a dangling short sentence at the end
            if 0 < remaining - size < MIN_SENTENCE:
                size = remaining
            chosen = [self._rng.choice(self.words) for _ in range(size)]
            chosen[0] = chosen[0][:1].upper() + chosen[0][1:]
            sentences.append(" ".join(chosen) + ".")
            remaining -= size
        return " ".join(sentences)

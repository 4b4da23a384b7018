"""Tests for services.phrases – lorem-ipsum phrase generation."""

from __future__ import annotations

import pytest

from app.errors import PhraseSourceError
from services.phrases import LOREM_WORDS, PhraseGenerator


class TestGenerate:
    @pytest.mark.parametrize("count", [1, 3, 5, 10, 27])
    def test_exact_word_count(self, count):
        phrase = PhraseGenerator(seed=1).generate(count)
        assert len(phrase.split()) == count

    def test_zero_words(self):
        assert PhraseGenerator(seed=1).generate(0) == ""

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            PhraseGenerator().generate(-1)

    def test_sentence_shape(self):
        phrase = PhraseGenerator(seed=4).generate(10)
        assert phrase[0].isupper()
        assert phrase.endswith(".")

    def test_uses_known_words(self):
        phrase = PhraseGenerator(seed=2).generate(20)
        for word in phrase.split():
            assert word.strip(".").lower() in LOREM_WORDS

    def test_seed_is_deterministic(self):
        assert PhraseGenerator(seed=9).generate(10) == PhraseGenerator(seed=9).generate(10)

    def test_callable(self):
        assert len(PhraseGenerator(seed=9)(4).split()) == 4


class TestWordSource:
    def test_empty_word_list_rejected(self):
        with pytest.raises(PhraseSourceError):
            PhraseGenerator(words=[])

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("alpha beta\ngamma\n", encoding="utf-8")
        gen = PhraseGenerator.from_file(path, seed=0)
        assert gen.words == ["alpha", "beta", "gamma"]

    def test_missing_file_falls_back(self, tmp_path):
        gen = PhraseGenerator.from_file(tmp_path / "nope.txt")
        assert gen.words == list(LOREM_WORDS)

    def test_blank_file_rejected(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("   \n", encoding="utf-8")
        with pytest.raises(PhraseSourceError):
            PhraseGenerator.from_file(path)

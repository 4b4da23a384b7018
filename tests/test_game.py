"""Tests for core.game – phase transitions and history."""

from __future__ import annotations

import pytest

from core.game import Complete, Game, Ongoing, Waiting
from core.keys import KeyEvent


def type_all(game: Game, chars: str) -> None:
    for ch in chars:
        assert game.handle_input(KeyEvent.of(ch)) is False


@pytest.fixture
def game(phrases, clock):
    return Game(phrases, clock=clock)


class TestStart:
    def test_starts_waiting(self, game):
        assert isinstance(game.phase, Waiting)
        assert game.history == []
        assert game.current_round is None
        assert game.elapsed_time() == 0.0

    def test_enter_starts_round(self, game, phrases):
        assert game.handle_input(KeyEvent.enter()) is False
        assert isinstance(game.phase, Ongoing)
        assert game.current_round.text.phrase == "ab cd"
        assert phrases.calls == [5]

    @pytest.mark.parametrize("event", [KeyEvent.of("a"), KeyEvent.backspace(), KeyEvent.other()])
    def test_other_keys_keep_waiting(self, game, event):
        game.handle_input(event)
        assert game.is_waiting


class TestEscape:
    def test_escape_while_waiting(self, game):
        assert game.handle_input(KeyEvent.escape()) is True

    def test_escape_while_ongoing(self, game):
        game.handle_input(KeyEvent.enter())
        assert game.handle_input(KeyEvent.escape()) is True
        assert game.is_ongoing

    def test_escape_while_complete(self, game):
        game.handle_input(KeyEvent.enter())
        type_all(game, "ab cd")
        assert game.handle_input(KeyEvent.escape()) is True


class TestOngoing:
    def test_typing_updates_round(self, game, clock):
        game.handle_input(KeyEvent.enter())
        clock.advance(2.0)
        type_all(game, "ab")
        assert game.current_round.text.cursor == 2
        assert game.elapsed_time() == 2.0

    def test_enter_is_ignored(self, game):
        game.handle_input(KeyEvent.enter())
        rnd = game.current_round
        game.handle_input(KeyEvent.enter())
        assert game.current_round is rnd
        assert rnd.text.cursor == 0


class TestCompletion:
    def test_completion_appends_history(self, game):
        game.handle_input(KeyEvent.enter())
        type_all(game, "ab c")
        assert game.history == []
        type_all(game, "d")
        assert isinstance(game.phase, Complete)
        assert len(game.history) == 1
        assert game.last_round.is_finished
        assert game.elapsed_time() == 0.0

    def test_keys_in_complete_do_nothing(self, game):
        game.handle_input(KeyEvent.enter())
        type_all(game, "ab cd")
        type_all(game, "xyz")
        game.handle_input(KeyEvent.backspace())
        assert game.is_complete
        assert len(game.history) == 1

    def test_enter_starts_fresh_round(self, game, phrases):
        game.handle_input(KeyEvent.enter())
        type_all(game, "ab cd")
        game.handle_input(KeyEvent.enter())
        assert game.is_ongoing
        assert game.current_round.text.cursor == 0
        assert phrases.calls == [5, 10]

    def test_history_in_completion_order(self, game, clock):
        for seconds in (6.0, 12.0):
            game.handle_input(KeyEvent.enter())
            clock.advance(seconds)
            type_all(game, "ab cd")
        assert [r.words_per_minute() for r in game.history] == [10, 5]

    def test_empty_phrase_completes_on_next_key(self, clock):
        game = Game(lambda n: "", clock=clock)
        game.handle_input(KeyEvent.enter())
        assert game.is_ongoing
        game.handle_input(KeyEvent.of("a"))
        assert game.is_complete
        assert len(game.history) == 1

    def test_backspace_on_empty_phrase_stays_ongoing(self, clock):
        game = Game(lambda n: "", clock=clock)
        game.handle_input(KeyEvent.enter())
        game.handle_input(KeyEvent.backspace())
        assert game.is_ongoing
        assert game.history == []

    def test_custom_word_counts(self, phrases, clock):
        game = Game(phrases, clock=clock, first_round_words=3, next_round_words=7)
        game.handle_input(KeyEvent.enter())
        type_all(game, "ab cd")
        game.handle_input(KeyEvent.enter())
        assert phrases.calls == [3, 7]


class TestCollaboratorFailure:
    def test_generator_error_propagates(self, clock):
        def broken(n):
            raise RuntimeError("no words")

        game = Game(broken, clock=clock)
        with pytest.raises(RuntimeError):
            game.handle_input(KeyEvent.enter())
        assert game.is_waiting

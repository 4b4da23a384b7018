"""Shared fixtures: a hand-driven clock and a fixed phrase source."""

from __future__ import annotations

import pytest


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def phrases():
    """Records requested word counts; returns a fixed phrase per call."""
    calls = []

    def generate(word_count: int) -> str:
        calls.append(word_count)
        return "ab cd"

    generate.calls = calls
    return generate

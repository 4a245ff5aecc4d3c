"""Shared test fixtures for Terminal Typer tests."""

import pytest


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class SequenceWordSupply:
    """Word supply that hands out a fixed list of words in order."""

    def __init__(self, words):
        self.words = list(words)
        self.calls = 0

    def next_random_word(self):
        word = self.words[self.calls % len(self.words)]
        self.calls += 1
        return word


class FailingWordSupply:
    def next_random_word(self):
        raise OSError("dictionary unavailable")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def word_supply():
    return SequenceWordSupply(["cat", "dog", "sun"])


@pytest.fixture
def failing_supply():
    return FailingWordSupply()

"""Target phrase generation.

A phrase is a handful of random words joined by single spaces. Words come
from a word supply, anything with a ``next_random_word()`` method; the
default one draws from the most frequent English words in wordfreq.
"""
import logging
import random
from typing import Iterable, Optional, Protocol

from wordfreq import top_n_list

from termtyper_config import MIN_WORD_LENGTH, VOCABULARY_SIZE

log = logging.getLogger("termtyper.phrase")


class PhraseGenerationError(Exception):
    """The word supply could not produce a phrase."""


class WordSupply(Protocol):
    def next_random_word(self) -> str:
        ...


def load_words(vocabulary_size: int = VOCABULARY_SIZE, min_length: int = MIN_WORD_LENGTH):
    words = top_n_list("en", vocabulary_size)
    return [w for w in words if w.isalpha() and w.islower() and len(w) >= min_length]


class WordfreqSupply:
    """Random words drawn with replacement from a fixed vocabulary.

    Args:
        words: Vocabulary to draw from. Loaded from wordfreq when omitted.
        rng: Source of randomness, a fresh ``random.Random`` when omitted.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None):
        self.words = list(words) if words is not None else load_words()
        self.rng = rng or random.Random()
        log.debug("Word supply ready with %d words", len(self.words))

    def next_random_word(self) -> str:
        if not self.words:
            raise PhraseGenerationError("vocabulary is empty")
        return self.rng.choice(self.words)


def generate_phrase(word_count: int, word_supply: WordSupply) -> str:
    """Draw ``word_count`` words from ``word_supply`` and join them with spaces.

    Raises:
        ValueError: ``word_count`` is not a positive integer.
        PhraseGenerationError: the supply failed; no partial phrase is returned.
    """
    if isinstance(word_count, bool) or not isinstance(word_count, int) or word_count < 1:
        raise ValueError(f"word_count must be a positive integer, got {word_count!r}")

    try:
        words = [word_supply.next_random_word() for _ in range(word_count)]
    except PhraseGenerationError:
        raise
    except Exception as exc:
        raise PhraseGenerationError(f"word supply failed: {exc}") from exc

    phrase = " ".join(words)
    log.debug("Generated phrase of %d words (%d chars)", word_count, len(phrase))
    return phrase

"""Typing session engine.

One session is one phrase. The session starts idle, begins timing on the
first keystroke and freezes once the typed text reaches the phrase length.
Nothing here touches the terminal; the UI reads ``current_phase()``,
``snapshot_diff()`` and ``stats()`` after each event.
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from termtyper_config import CHARS_PER_WORD
from termtyper_diff import DiffEntry, count_correct, diff

log = logging.getLogger("termtyper.session")

Clock = Callable[[], float]


class SessionPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


def compute_wpm(correct_chars: int, elapsed_seconds: int) -> float:
    """Words per minute from correct characters, five characters to a word.

    Sessions shorter than a second count as one second.
    """
    minutes = max(elapsed_seconds, 1) / 60.0
    return (correct_chars / CHARS_PER_WORD) / minutes


@dataclass(frozen = True)
class SessionStats:
    elapsed_seconds: int
    correct_char_count: int
    total_char_count: int
    wpm: float

    @property
    def accuracy(self) -> float:
        if not self.total_char_count:
            return 0.0
        return self.correct_char_count / self.total_char_count * 100

    @property
    def duration(self) -> str:
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return f"{minutes:02}:{seconds:02}"


class TypingSession:
    def __init__(self, phrase: str, clock: Clock = time.monotonic):
        self._clock = clock
        self._reset(phrase)

    def _reset(self, phrase: str):
        self._phrase = phrase
        self._typed: List[str] = []
        self._phase = SessionPhase.IDLE
        self._start_timestamp: Optional[float] = None
        self._stats: Optional[SessionStats] = None

    @property
    def phrase(self) -> str:
        return self._phrase

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    def apply_character(self, c: str):
        if self._phase is SessionPhase.FINISHED:
            return

        self._typed.append(c)
        if self._phase is SessionPhase.IDLE:
            self._phase = SessionPhase.RUNNING
            self._start_timestamp = self._clock()
            log.debug("Session started")

        if len(self._typed) >= len(self._phrase):
            self._finish()

    def apply_backspace(self):
        if self._phase is SessionPhase.FINISHED or not self._typed:
            return
        self._typed.pop()

    def restart(self, new_phrase: str):
        log.debug("Session restarted from %s", self._phase.value)
        self._reset(new_phrase)

    def _finish(self):
        elapsed = int(self._clock() - self._start_timestamp)
        correct = count_correct(self._phrase, self._typed)
        self._stats = SessionStats(
            elapsed_seconds = elapsed,
            correct_char_count = correct,
            total_char_count = len(self._phrase),
            wpm = compute_wpm(correct, elapsed),
        )
        self._phase = SessionPhase.FINISHED
        log.info(
            "Session finished: %ss, %d/%d correct, %.1f wpm",
            elapsed, correct, len(self._phrase), self._stats.wpm,
        )

    def is_finished(self) -> bool:
        return self._phase is SessionPhase.FINISHED

    def current_phase(self) -> SessionPhase:
        return self._phase

    def snapshot_diff(self) -> List[DiffEntry]:
        return diff(self._phrase, self._typed)

    def stats(self) -> Optional[SessionStats]:
        return self._stats

    def elapsed(self) -> float:
        """Seconds since the first keystroke, frozen once finished."""
        if self._stats is not None:
            return float(self._stats.elapsed_seconds)
        if self._start_timestamp is None:
            return 0.0
        return self._clock() - self._start_timestamp

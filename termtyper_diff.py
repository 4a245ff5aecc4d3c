"""Position-wise comparison of typed text against the target phrase."""
from enum import Enum
from typing import List, Sequence, Tuple

from termtyper_config import MISMATCHED_SPACE_MARKER


class Classification(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNTYPED = "untyped"


DiffEntry = Tuple[str, Classification]


def diff(phrase: Sequence[str], typed: Sequence[str]) -> List[DiffEntry]:
    """Classify every phrase position against what has been typed so far.

    Typed characters past the end of the phrase are left out. A wrong
    character where the phrase has a space is shown as the marker so that
    a missed space stands out from a missed letter.
    """
    entries = []
    for i, expected in enumerate(phrase):
        if i >= len(typed):
            entries.append((expected, Classification.UNTYPED))
            continue

        actual = typed[i]
        if actual == expected:
            entries.append((actual, Classification.CORRECT))
        elif expected == " ":
            entries.append((MISMATCHED_SPACE_MARKER, Classification.INCORRECT))
        else:
            entries.append((actual, Classification.INCORRECT))
    return entries


def count_correct(phrase: Sequence[str], typed: Sequence[str]) -> int:
    return sum(1 for expected, actual in zip(phrase, typed) if expected == actual)

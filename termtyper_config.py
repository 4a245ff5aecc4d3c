"""Settings for Terminal Typer.

Plain constants, plus the logging switches which come from the environment.
"""
import os

# phrase

PHRASE_WORD_COUNT = 9
VOCABULARY_SIZE = 5000
MIN_WORD_LENGTH = 3

# scoring

CHARS_PER_WORD = 5
MISMATCHED_SPACE_MARKER = "_"

# ui

TITLE = " Terminal Typer "
KEY_HINT = " Quit <Esc>  Restart <Tab> "

STYLE = {
    "diff.correct": "ansibrightyellow",
    "diff.incorrect": "ansired",
    "diff.untyped": "ansibrightblack",
    "results": "bold",
    "status": "reverse",
    "status.error": "reverse ansired",
    "hint": "ansiblue bold",
}

# logging

LOG_FILE = os.environ.get("TERMTYPER_LOG_FILE")
LOG_LEVEL = os.environ.get("TERMTYPER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

import logging
from typing import List, Optional, Tuple

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, HSplit, Window
from prompt_toolkit.layout.controls import DummyControl
from prompt_toolkit.widgets import Frame, Label
from prompt_toolkit.keys import Keys
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from termtyper_config import (
    KEY_HINT,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
    PHRASE_WORD_COUNT,
    STYLE,
    TITLE,
)
from termtyper_diff import DiffEntry
from termtyper_phrase import PhraseGenerationError, WordSupply, WordfreqSupply, generate_phrase
from termtyper_session import SessionPhase, SessionStats, TypingSession

log = logging.getLogger("termtyper.app")

Fragments = List[Tuple[str, str]]

style = Style.from_dict(STYLE)


def configure_logging(log_file: Optional[str] = LOG_FILE, level: str = LOG_LEVEL):
    if not log_file:
        return
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.basicConfig(filename = log_file, level = level, format = LOG_FORMAT)


# rendering

def render_diff(entries: List[DiffEntry]) -> Fragments:
    return [(f"class:diff.{cls.value}", ch) for ch, cls in entries]


def render_results(stats: SessionStats) -> Fragments:
    return [
        ("class:results", f"You took: {stats.duration}\n"),
        ("class:results", f"Accuracy: {stats.correct_char_count}/{stats.total_char_count}\n"),
        ("class:results", f"WPM: {stats.wpm:.1f}"),
    ]


def render_body(session: TypingSession) -> Fragments:
    stats = session.stats()
    if stats is not None:
        return render_results(stats)
    return render_diff(session.snapshot_diff())


def format_status(session: TypingSession, error: Optional[str] = None) -> Fragments:
    if error:
        return [("class:status.error", f" {error} ")]

    phase = session.current_phase()
    if phase is SessionPhase.IDLE:
        text = "Start typing to begin"
    elif phase is SessionPhase.RUNNING:
        text = f"Typing...  {int(session.elapsed())}s  {len(session.typed)}/{len(session.phrase)}"
    else:
        stats = session.stats()
        text = f"Done  {stats.wpm:5.1f} WPM  {stats.accuracy:5.1f}%"
    return [("class:status", f" {text} ")]


# events

def restart_session(session: TypingSession, word_supply: WordSupply) -> Optional[str]:
    """Start over on a fresh phrase; on failure keep the current session."""
    try:
        phrase = generate_phrase(PHRASE_WORD_COUNT, word_supply)
    except PhraseGenerationError as exc:
        log.error("Could not restart session: %s", exc)
        return f"Could not generate a new phrase: {exc}"
    session.restart(phrase)
    return None


def handle_key(
    session: TypingSession,
    key: str,
    word_supply: WordSupply,
    error: Optional[str] = None
) -> Optional[str]:
    """Apply one key press to the session and return the status error to show.

    A restart error stays up until the next character is typed.
    """
    if key == Keys.Tab:
        return restart_session(session, word_supply)
    if key == Keys.Backspace:
        session.apply_backspace()
        return error
    if len(key) != 1 or not key.isprintable():
        return error
    session.apply_character(key)
    return None


def run_typing_test(word_supply: WordSupply):
    session = TypingSession(generate_phrase(PHRASE_WORD_COUNT, word_supply))
    error = None

    status_area = Label(text = "")
    body_area = Label(text = "")
    hint_area = Label(text = FormattedText([("class:hint", KEY_HINT)]))
    focus_sink = Window(
        content = DummyControl(),
        height = 0,
        width = 0
    )

    def refresh():
        status_area.text = FormattedText(format_status(session, error))
        body_area.text = FormattedText(render_body(session))

    kb = KeyBindings()

    @kb.add(Keys.Escape, eager = True)
    @kb.add(Keys.ControlC)
    def _(event):
        event.app.exit()

    @kb.add(Keys.Tab)
    @kb.add(Keys.Backspace)
    @kb.add(Keys.Any)
    def _(event):
        nonlocal error
        key = event.key_sequence[0].key
        error = handle_key(session, key, word_supply, error)
        refresh()

    refresh()

    app = Application(
        layout = Layout(
            HSplit([
                status_area,
                Frame(body_area, title = TITLE),
                hint_area,
                focus_sink
            ]),
            focused_element = focus_sink
        ),
        key_bindings = kb,
        full_screen = True,
        style = style
    )

    app.run()


def main():
    configure_logging()
    run_typing_test(WordfreqSupply())


if __name__ == "__main__":
    main()

"""Line editor setup: completion, highlighting, history and key bindings."""

from __future__ import annotations

from itertools import islice
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.shortcuts import CompleteStyle
from prompt_toolkit.styles import Style

from minsh.completion import MinshCompleter
from minsh.highlighter import DynamicHighlighter

HISTORY_MAX_ENTRIES = 1000


def history_path() -> Path:
    """Return the location of the command history file."""
    try:
        home = Path.home()
    except RuntimeError:
        home = Path(".")
    return home / ".minshrc_history"


class ShellCompleter(Completer):
    """Feeds suggestions from a shell completer into the line editor."""

    def __init__(self, completer: MinshCompleter | None = None) -> None:
        self.completer = completer or MinshCompleter()

    def get_completions(self, document, complete_event):
        pos = document.cursor_position
        for s in self.completer.complete(document.text, pos):
            yield Completion(
                s.value + (" " if s.append_whitespace else ""),
                start_position=s.span.start - pos,
                display=s.value,
                display_meta=s.description or "",
            )


class ShellLexer(Lexer):
    """Colours each line of the input with a command highlighter."""

    def __init__(self, highlighter: DynamicHighlighter | None = None) -> None:
        self.highlighter = highlighter or DynamicHighlighter()

    def lex_document(self, document):
        lines = document.lines

        def get_line(lineno: int):
            if 0 <= lineno < len(lines):
                return list(self.highlighter.highlight(lines[lineno]))
            return []

        return get_line


class _BoundedFileHistory(FileHistory):
    """File history that loads at most a fixed number of the newest entries."""

    def load_history_strings(self):
        return islice(super().load_history_strings(), HISTORY_MAX_ENTRIES)


def create_editor(history_file: str | Path | None = None) -> PromptSession:
    """Build the interactive line editor."""
    bindings = KeyBindings()

    @bindings.add("tab")
    def _complete(event) -> None:
        buffer = event.current_buffer
        if buffer.complete_state:
            buffer.complete_next()
        else:
            buffer.start_completion(select_first=False)

    return PromptSession(
        history=_BoundedFileHistory(str(history_file or history_path())),
        completer=ShellCompleter(),
        complete_while_typing=False,
        complete_style=CompleteStyle.MULTI_COLUMN,
        lexer=ShellLexer(),
        auto_suggest=AutoSuggestFromHistory(),
        key_bindings=bindings,
        style=Style.from_dict({"auto-suggestion": "ansibrightblack"}),
    )
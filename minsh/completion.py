"""Tab completion for command names and directories."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

BUILTIN_COMMANDS = ("cd", "exit", "vim", "cargo", "ls", "mkdir", "rm", "git")

_LAST_WORD = re.compile(r"\S*\Z")
_LAST_ASCII_WORD = re.compile(r"[^ \t\n\r\x0c]*\Z")


@dataclass(frozen=True)
class Span:
    """Half-open range of the line that a suggestion replaces."""

    start: int
    end: int


@dataclass(frozen=True)
class Suggestion:
    """One completion candidate."""

    value: str
    description: str | None
    span: Span
    append_whitespace: bool = False
    style: Any = None
    extra: Any = None


def _command(value: str, span: Span) -> Suggestion:
    return Suggestion(value, "Command", span, append_whitespace=True)


class WordListCompleter:
    """Completes the word before the cursor from a fixed list of words."""

    def __init__(self, words: Iterable[str], min_word_len: int = 2) -> None:
        self.min_word_len = min_word_len
        self.words = sorted({word for word in words if len(word) >= min_word_len})

    def complete(self, line: str, pos: int) -> list[Suggestion]:
        word = _LAST_WORD.search(line[:pos]).group()
        if not word:
            return []
        span = Span(pos - len(word), pos)
        return [
            Suggestion(candidate, None, span)
            for candidate in self.words
            if candidate.startswith(word) and len(candidate) > len(word)
        ]


class CommandCompleter:
    """Completes built-in command names, then words from the command list."""

    def __init__(self) -> None:
        self.command_registry = list(BUILTIN_COMMANDS)
        self.file_completer = WordListCompleter(self.command_registry, 2)

    def get_command_suggestions(
        self, partial: str, start_pos: int, end_pos: int
    ) -> list[Suggestion]:
        span = Span(start_pos, end_pos)
        return [_command(cmd, span) for cmd in self.command_registry if cmd.startswith(partial)]

    def complete(self, line: str, pos: int) -> list[Suggestion]:
        start = _LAST_WORD.search(line[:pos]).start()
        suggestions = []
        if start == 0:
            suggestions.extend(self.get_command_suggestions(line[:pos], 0, pos))
        suggestions.extend(self.file_completer.complete(line, pos))
        return suggestions


class MinshCompleter:
    """Completes commands from builtins and PATH, and directories after ``cd``."""

    def __init__(self, path_commands: Iterable[str] | None = None) -> None:
        self.builtins = list(BUILTIN_COMMANDS)
        self.path_commands = (
            self.load_path_commands() if path_commands is None else list(path_commands)
        )

    @staticmethod
    def load_path_commands(path_var: str | None = None) -> list[str]:
        """Return the sorted, de-duplicated names of the files found in PATH."""
        if path_var is None:
            path_var = os.environ.get("PATH", "")
        names = set()
        for directory in filter(None, path_var.split(os.pathsep)):
            try:
                names.update(e.name for e in Path(directory).iterdir() if e.is_file())
            except OSError:
                continue
        return sorted(names)

    @staticmethod
    def directory_suggestions(prefix: str, span: Span) -> list[Suggestion]:
        """List the directories that complete ``prefix``."""
        path = Path(prefix or ".")
        parent = path if path.is_dir() else path.parent
        name_prefix = "" if path.name == ".." else path.name
        try:
            entries = sorted(parent.iterdir())
        except OSError:
            return []
        return [
            Suggestion(entry.name, "Directory", span, append_whitespace=True)
            for entry in entries
            if entry.is_dir() and entry.name.startswith(name_prefix)
        ]

    def command_suggestions(self, prefix: str, span: Span) -> list[Suggestion]:
        return [
            _command(cmd, span)
            for cmd in [*self.builtins, *self.path_commands]
            if cmd.startswith(prefix)
        ]

    def complete(self, line: str, pos: int) -> list[Suggestion]:
        match = _LAST_ASCII_WORD.search(line[:pos])
        current_word = match.group()
        span = Span(match.start(), pos)

        tokens = line.split()
        if tokens and tokens[0] == "cd":
            return self.directory_suggestions(current_word, span)
        if len(tokens) <= 1:
            return self.command_suggestions(current_word, span)
        return []
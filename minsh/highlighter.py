"""Colouring of the command line as it is typed."""

from __future__ import annotations

import os
from pathlib import Path

VALID_COMMAND_STYLE = "ansigreen"
UNKNOWN_COMMAND_STYLE = "ansired"
NON_COMMAND_STYLE = "#8a949f"

_WINDOWS_SUFFIXES = (".exe", ".cmd", ".bat")


class DynamicHighlighter:
    """Marks the first word green if it names a known command, red otherwise."""

    def __init__(self) -> None:
        self.builtins = ["cd", "exit", "history"]

    def command_exists(self, cmd: str) -> bool:
        if cmd in self.builtins:
            return True
        if "/" in cmd or "\\" in cmd:
            return Path(cmd).exists()
        path_var = os.environ.get("PATH")
        if path_var is None:
            return False
        for entry in path_var.split(os.pathsep):
            directory = Path(entry)
            if (directory / cmd).is_file():
                return True
            if os.name == "nt" and any(
                (directory / f"{cmd}{suffix}").exists() for suffix in _WINDOWS_SUFFIXES
            ):
                return True
        return False

    def highlight(self, line: str, cursor: int = 0) -> list[tuple[str, str]]:
        """Split ``line`` into (style, text) fragments."""
        parts = line.split()
        if not parts:
            return [(NON_COMMAND_STYLE, line)]

        cmd = parts[0]
        style = VALID_COMMAND_STYLE if self.command_exists(cmd) else UNKNOWN_COMMAND_STYLE
        start = line.find(cmd)
        end = start + len(cmd)

        fragments = []
        if start > 0:
            fragments.append((NON_COMMAND_STYLE, line[:start]))
        fragments.append((style, line[start:end]))
        if end < len(line):
            fragments.append((NON_COMMAND_STYLE, line[end:]))
        return fragments
"""Prompt text shown before each input line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CustomPrompt:
    """A prompt with user-chosen text on the left."""

    text: str
    indicator: str = "> "
    multiline_indicator: str = "‣ "
    history_search_indicator: str = "(reverse-i-search) "

    def render_prompt_left(self) -> str:
        return self.text

    def render_prompt_right(self) -> str:
        return ""

    def render_prompt_indicator(self, edit_mode: Any = None) -> str:
        return self.indicator

    def render_prompt_multiline_indicator(self) -> str:
        return self.multiline_indicator

    def render_prompt_history_search_indicator(self, search: Any = None) -> str:
        return self.history_search_indicator
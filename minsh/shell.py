"""Shell configuration and command execution."""

from __future__ import annotations

import subprocess
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR_NAME = ".config"
CONFIG_FILE_NAME = ".minshrc.toml"


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        return Path(".")


def default_config_path() -> Path:
    """Return the location of the user's configuration file."""
    return _home_dir() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


@dataclass(frozen=True)
class ShellConfig:
    """User settings read from the TOML configuration file."""

    prompt: str | None = None
    history_max_entries: int | None = None

    @classmethod
    def _from_mapping(cls, data: dict) -> ShellConfig:
        prompt = data.get("prompt")
        if prompt is not None and not isinstance(prompt, str):
            raise ValueError(f"invalid type for `prompt`: expected a string, found {prompt!r}")
        entries = data.get("history_max_entries")
        if entries is not None:
            if isinstance(entries, bool) or not isinstance(entries, int):
                raise ValueError(
                    f"invalid type for `history_max_entries`: expected an integer, found {entries!r}"
                )
            if not 0 <= entries < 2**64:
                raise ValueError(
                    f"invalid value for `history_max_entries`: {entries} is out of range"
                )
        return cls(prompt=prompt, history_max_entries=entries)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ShellConfig:
        """Load the configuration, falling back to defaults when it is missing or invalid."""
        config_path = Path(path) if path is not None else default_config_path()
        if not config_path.exists():
            return cls()

        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            content = ""

        try:
            config = cls._from_mapping(tomllib.loads(content))
        except ValueError as exc:
            print(f"ERROR {exc}", file=sys.stderr)
            print("Use default config as fallback")
            return cls()

        print(config)
        return config


class ShellState:
    """Runs command lines and remembers the exit code of the last one."""

    def __init__(self, config: ShellConfig) -> None:
        self.config = config
        self.last_exit_code = 0

    def run_command(self, input_line: str) -> None:
        """Run one command line; ``exit`` leaves the shell."""
        parts = input_line.split()
        if not parts:
            return

        command, *args = parts
        if command == "exit":
            raise SystemExit(0)

        try:
            completed = subprocess.run([command, *args])
        except OSError as exc:
            print(f"Command not found {command}", file=sys.stderr)
            print(f"{exc} \n", file=sys.stderr)
            return

        code = completed.returncode
        self.last_exit_code = code if code >= 0 else 1
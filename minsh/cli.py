"""Interactive read-run loop of the shell."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from minsh.editor import create_editor
from minsh.shell import ShellConfig, ShellState


def _prompt_left() -> str:
    return f"{Path.cwd()}〉"


def _prompt_right() -> str:
    return datetime.now().strftime("%m/%d/%Y %I:%M:%S %p")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell until end of input or interruption."""
    argparse.ArgumentParser(prog="minsh", description="A minimal interactive shell.").parse_args(argv)

    state = ShellState(ShellConfig.load())
    session = create_editor()

    while True:
        try:
            line = session.prompt(_prompt_left, rprompt=_prompt_right)
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            return 0
        except OSError as exc:
            print(f"Error: {exc!r}", file=sys.stderr)
            return 0
        state.run_command(line)


if __name__ == "__main__":
    sys.exit(main())
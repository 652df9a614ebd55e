# minsh

A small interactive shell. It reads a line, splits it on whitespace and
runs the first word as a program with the remaining words as its arguments.
The program shares the shell's terminal for input and output, and the shell
waits for it to finish before prompting again.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minsh
```

The only option is `--help`.

The prompt shows the current directory on the left and the date and time on
the right. Type `exit` to leave; Ctrl-D or Ctrl-C at the prompt prints
`Goodbye!` and quits as well.

If a program cannot be started, the shell prints `Command not found`
followed by the reason, and carries on.

## Line editing

- Emacs key bindings.
- History stored in `~/.minshrc_history`; the 1000 most recent entries are
  loaded at start-up.
- Suggestions from history shown as you type.
- Tab opens the completion menu, pressing it again moves to the next entry.
  The first word completes from a few fixed names (`cd`, `exit`, `vim`,
  `cargo`, `ls`, `mkdir`, `rm`, `git`) and from every file found in the
  directories on `PATH`. When the line starts with `cd`, directory names are
  completed instead.
- The first word is coloured green when it is `cd`, `exit` or `history`,
  an existing path, or a file on `PATH`, and red otherwise.

## Configuration

On start-up the shell reads an optional TOML file at
`~/.config/.minshrc.toml`:

```toml
prompt = "minsh"
history_max_entries = 1000
```

When the file is read successfully its settings are printed. If it cannot be
parsed, or a value has the wrong type, the error is printed and the default
configuration is used. The settings are read and checked but do not yet
change the prompt or the history size.

## Using it as a library

- `minsh.shell`: `ShellConfig.load(path=None)` reads the configuration
  (`default_config_path()` gives the default location); `ShellState(config)`
  runs lines with `run_command(line)` and keeps the exit status of the last
  program in `last_exit_code` (1 when the program was killed by a signal).
  `run_command("exit")` raises `SystemExit(0)`.
- `minsh.completion`: `MinshCompleter(path_commands=None).complete(line, pos)`
  returns a list of `Suggestion` objects, each with a `value`, a
  `description` and the `Span` of the line it replaces. `CommandCompleter`
  and `WordListCompleter` are simpler completers over fixed word lists.
- `minsh.highlighter`: `DynamicHighlighter().highlight(line)` returns a list of
  `(style, text)` fragments; `command_exists(cmd)` tells whether a command
  would be found.
- `minsh.prompt`: `CustomPrompt(text)` renders prompt pieces as strings.
- `minsh.editor`: `create_editor(history_file=None)` builds the
  prompt-toolkit session used by the shell.

## What it does not do

The shell has no built-in commands other than `exit`. In particular `cd` is
run as an ordinary program, so it does not change the shell's working
directory. There are no pipes, redirections, quoting, variables, globbing or
job control; words are split on whitespace only. The exit status of the last
command is recorded but not shown.

## Running the tests

```
pip install ".[test]"
pytest
```
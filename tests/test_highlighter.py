import pytest

from minsh.highlighter import (
    NON_COMMAND_STYLE,
    UNKNOWN_COMMAND_STYLE,
    VALID_COMMAND_STYLE,
    DynamicHighlighter,
)


@pytest.mark.parametrize("cmd", ["cd", "exit", "history"])
def test_builtins_exist(cmd, monkeypatch):
    monkeypatch.setenv("PATH", "")
    assert DynamicHighlighter().command_exists(cmd) is True


def test_command_with_slash_checks_path(tmp_path):
    target = tmp_path / "tool"
    target.write_text("")
    highlighter = DynamicHighlighter()
    assert highlighter.command_exists(str(target)) is True
    assert highlighter.command_exists(str(tmp_path / "missing")) is False


def test_command_found_in_path(tmp_path, monkeypatch):
    (tmp_path / "mytool").write_text("")
    (tmp_path / "adir").mkdir()
    monkeypatch.setenv("PATH", str(tmp_path))
    highlighter = DynamicHighlighter()
    assert highlighter.command_exists("mytool") is True
    assert highlighter.command_exists("adir") is False
    assert highlighter.command_exists("othertool") is False


def test_missing_path_variable(monkeypatch):
    monkeypatch.delenv("PATH", raising=False)
    assert DynamicHighlighter().command_exists("whatever-cmd") is False


def test_highlight_known_command_with_surroundings(monkeypatch):
    monkeypatch.setenv("PATH", "")
    line = "  cd foo"
    fragments = DynamicHighlighter().highlight(line, 0)
    assert fragments == [
        (NON_COMMAND_STYLE, "  "),
        (VALID_COMMAND_STYLE, "cd"),
        (NON_COMMAND_STYLE, " foo"),
    ]


def test_highlight_unknown_command_alone(monkeypatch):
    monkeypatch.setenv("PATH", "")
    assert DynamicHighlighter().highlight("nosuchcmd", 0) == [
        (UNKNOWN_COMMAND_STYLE, "nosuchcmd")
    ]


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_highlight_blank_line(line):
    assert DynamicHighlighter().highlight(line, 0) == [(NON_COMMAND_STYLE, line)]


@pytest.mark.parametrize("line", ["ls -la", " exit now ", "x", "git  commit  -m msg"])
def test_highlight_preserves_text(line, monkeypatch):
    monkeypatch.setenv("PATH", "")
    fragments = DynamicHighlighter().highlight(line, len(line))
    assert "".join(text for _, text in fragments) == line
    assert sum(1 for style, _ in fragments if style != NON_COMMAND_STYLE) == 1
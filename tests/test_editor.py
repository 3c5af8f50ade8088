import io
import subprocess
import sys
from pathlib import Path
from unittest import mock

import pytest

from queuestack.config import Config
from queuestack.editor import EditorError, open_in_editor
from queuestack.global_config import GlobalConfig
from queuestack.project_config import ProjectConfig


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def config_with(editor):
    return Config(GlobalConfig(editor=editor), ProjectConfig(), Path("/work/proj"))


@pytest.fixture
def terminal(monkeypatch):
    monkeypatch.setattr(sys, "stdout", _Terminal())


def ok(*_args, **_kwargs):
    return subprocess.CompletedProcess(args=[], returncode=0)


def test_skipped_when_not_a_terminal(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    with mock.patch("queuestack.editor.subprocess.run") as run:
        assert open_in_editor("item.md", config_with("nvim")) is None
    assert run.call_count == 0


def test_runs_editor_with_quoted_arguments(terminal):
    with mock.patch("queuestack.editor.subprocess.run", side_effect=ok) as run:
        result = open_in_editor(Path("item.md"), config_with('nvim -c ":normal G"'))
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["nvim", "-c", ":normal G", "item.md"]


def test_falls_back_to_vi(terminal, monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    with mock.patch("queuestack.editor.subprocess.run", side_effect=ok) as run:
        result = open_in_editor("item.md", config_with(None))
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["vi", "item.md"]


def test_nonzero_exit_raises(terminal):
    failed = subprocess.CompletedProcess(args=[], returncode=2)
    with mock.patch("queuestack.editor.subprocess.run", return_value=failed):
        with pytest.raises(EditorError, match="Editor exited with error"):
            open_in_editor("item.md", config_with("nvim"))


def test_launch_failure_raises(terminal):
    with mock.patch("queuestack.editor.subprocess.run", side_effect=FileNotFoundError("nope")):
        with pytest.raises(EditorError, match="Failed to launch editor"):
            open_in_editor("item.md", config_with("missing-editor"))


def test_invalid_syntax_raises(terminal):
    with pytest.raises(EditorError, match="Invalid editor command syntax"):
        open_in_editor("item.md", config_with('nvim "unterminated'))


def test_empty_command_raises(terminal):
    with pytest.raises(EditorError, match="Empty editor command"):
        open_in_editor("item.md", config_with(""))
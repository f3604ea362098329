"""Tests for the Shell class (unit tests for the read/dispatch loop)."""

import pytest

from myshell.config import ShellSettings
from myshell.shell import Shell


@pytest.fixture
def shell(tmp_path):
    return Shell(ShellSettings(history_file=tmp_path / "history"))


class TestShellInit:
    def test_initial_state(self, shell):
        assert shell.last_exit_code == 0
        assert shell.dispatcher.settings is shell.settings


class TestRunCommand:
    def test_builtin_pwd(self, shell, capsys):
        shell.run_command("pwd")
        assert capsys.readouterr().out.strip() == shell.dispatcher.cwd

    def test_empty_command(self, shell, capsys):
        shell.run_command("")
        assert capsys.readouterr().out == ""

    def test_whitespace_command(self, shell, capsys):
        shell.run_command("   \n")
        assert capsys.readouterr().out == ""

    def test_quoted_echo(self, shell, capsys):
        shell.run_command("echo 'a  b'   c\n")
        assert capsys.readouterr().out == "a  b c\n"

    def test_command_not_found_uses_line(self, shell, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path))
        shell.run_command("  nonexistent_command_xyz  'x y' \n")
        assert capsys.readouterr().err == "nonexistent_command_xyz  'x y': command not found\n"
        assert shell.last_exit_code == 127

    def test_exit(self, shell):
        with pytest.raises(SystemExit) as exc:
            shell.run_command("exit 7")
        assert exc.value.code == 7

    def test_exit_saves_history(self, shell, monkeypatch):
        saved = []
        monkeypatch.setattr(shell, "save_history", lambda: saved.append(True))
        shell.dispatcher._on_exit = shell.save_history
        with pytest.raises(SystemExit):
            shell.run_command("exit 0")
        assert saved == [True]


class TestReadLine:
    def test_returns_input(self, shell, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "echo hi")
        assert shell.read_line() == "echo hi"

    def test_uses_prompt(self, tmp_path, monkeypatch):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return ""

        monkeypatch.setattr("builtins.input", fake_input)
        Shell(ShellSettings(prompt="> ", history_file=tmp_path / "h")).read_line()
        assert prompts == ["> "]

    def test_eof_is_fatal(self, shell, monkeypatch):
        def fake_input(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
        with pytest.raises(SystemExit) as exc:
            shell.read_line()
        assert exc.value.code == 1

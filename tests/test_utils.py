"""
Tests for console and import helpers.
"""
import io
import sys
from types import SimpleNamespace
from unittest.mock import patch

from pubg_qna.utils import clear_screen, import_quietly, with_suppressed_audio_warnings


class FakeStdout(io.StringIO):
    def __init__(self, is_terminal):
        super().__init__()
        self.is_terminal = is_terminal

    def isatty(self):
        return self.is_terminal


def fake_sys(is_terminal):
    return SimpleNamespace(stdout=FakeStdout(is_terminal))


def test_clear_screen_skipped_when_not_a_terminal(monkeypatch):
    monkeypatch.setattr("pubg_qna.utils.console.sys", fake_sys(False))
    with patch("pubg_qna.utils.console.subprocess.run") as run:
        clear_screen()
    run.assert_not_called()


def test_clear_screen_runs_clear_without_a_shell(monkeypatch):
    monkeypatch.setattr("pubg_qna.utils.console.sys", fake_sys(True))
    monkeypatch.setattr("pubg_qna.utils.console.os", SimpleNamespace(name="posix"))
    with patch("pubg_qna.utils.console.subprocess.run") as run:
        clear_screen()
    run.assert_called_once_with(["clear"], check=False)


def test_clear_screen_uses_cls_on_windows(monkeypatch):
    monkeypatch.setattr("pubg_qna.utils.console.sys", fake_sys(True))
    monkeypatch.setattr("pubg_qna.utils.console.os", SimpleNamespace(name="nt"))
    with patch("pubg_qna.utils.console.subprocess.run") as run:
        clear_screen()
    run.assert_called_once_with("cls", shell=True, check=False)


def test_clear_screen_falls_back_to_ansi_sequence(monkeypatch):
    fake = fake_sys(True)
    monkeypatch.setattr("pubg_qna.utils.console.sys", fake)
    monkeypatch.setattr("pubg_qna.utils.console.os", SimpleNamespace(name="posix"))
    with patch("pubg_qna.utils.console.subprocess.run", side_effect=FileNotFoundError("clear")):
        clear_screen()
    assert fake.stdout.getvalue() == "\033[2J\033[H"


def test_import_quietly_returns_value_and_restores_stderr():
    original = sys.stderr

    def noisy():
        print("banner", file=sys.stderr)
        return 42

    assert import_quietly(noisy) == 42
    assert sys.stderr is original


def test_suppressed_audio_warnings_keeps_return_value_and_name():
    @with_suppressed_audio_warnings
    def open_device(name):
        return f"opened {name}"

    assert open_device("mic") == "opened mic"
    assert open_device.__name__ == "open_device"

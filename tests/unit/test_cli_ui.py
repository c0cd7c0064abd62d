"""Tests for the rich selection prompts."""

import pytest

from create_specra import cli_ui
from create_specra.core.init_impl import Answered, Cancelled, Choice

OPTIONS = [
    Choice(value="minimal", label="minimal", description="Single-version site"),
    Choice(value="versioned", label="versioned", description="Multi-version site"),
]


@pytest.fixture
def answers(monkeypatch):
    """Feed canned lines to the console's input()."""
    lines: list[str] = []

    def fake_input(*args, **kwargs):
        return lines.pop(0)

    monkeypatch.setattr(cli_ui.console, "input", fake_input)
    return lines


def test_numbered_fallback_without_tty(monkeypatch, answers):
    monkeypatch.setattr(cli_ui, "IS_TTY", False)
    answers.append("2")

    assert cli_ui.select_interactive(OPTIONS, "Template?") == Answered("versioned")


def test_empty_answer_cancels(monkeypatch, answers):
    monkeypatch.setattr(cli_ui, "IS_TTY", False)
    answers.append("")

    assert cli_ui.select_interactive(OPTIONS, "Template?") == Cancelled()


def test_terminal_error_falls_back_to_numbered_menu(monkeypatch, answers):
    termios = pytest.importorskip("termios")

    def broken_terminal(*args, **kwargs):
        raise termios.error(25, "Inappropriate ioctl for device")

    monkeypatch.setattr(cli_ui, "IS_TTY", True)
    monkeypatch.setattr(cli_ui, "_select_with_keyboard", broken_terminal)
    answers.append("minimal")

    assert cli_ui.select_interactive(OPTIONS, "Template?") == Answered("minimal")


def test_os_error_falls_back_to_numbered_menu(monkeypatch, answers):
    pytest.importorskip("termios")

    def broken_terminal(*args, **kwargs):
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(cli_ui, "IS_TTY", True)
    monkeypatch.setattr(cli_ui, "_select_with_keyboard", broken_terminal)
    answers.append("1")

    assert cli_ui.select_interactive(OPTIONS, "Template?") == Answered("minimal")

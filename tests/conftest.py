"""Shared pytest fixtures for create-specra tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from create_specra.core.environment import BUNDLED_TEMPLATES_DIR, InvocationContext
from create_specra.core.init_impl import Answered, Cancelled, Choice, list_templates


class FakeExecutor:
    """
    CommandExecutor that records calls instead of spawning processes.

    Exit codes are looked up by command-line prefix in ``returncodes``;
    anything unmatched exits with ``default``.
    """

    def __init__(self, returncodes: dict[str, int] | None = None, default: int = 0):
        self.returncodes = dict(returncodes or {})
        self.default = default
        self.calls: list[tuple[tuple[str, ...], Path, bool]] = []

    def run(self, args: Sequence[str], cwd: Path, *, quiet: bool = False) -> int:
        self.calls.append((tuple(args), cwd, quiet))
        command = " ".join(args)
        for prefix, code in self.returncodes.items():
            if command.startswith(prefix):
                return code
        return self.default

    @property
    def commands(self) -> list[str]:
        return [" ".join(args) for args, _, _ in self.calls]


class ScriptedPrompter:
    """Prompter that replays canned answers and records the questions."""

    def __init__(self, *answers: str | None):
        self.answers = list(answers)
        self.questions: list[str] = []
        self.choices: list[list[Choice]] = []

    def _next(self, question: str):
        self.questions.append(question)
        answer = self.answers.pop(0)
        return Cancelled() if answer is None else Answered(answer)

    def ask_text(self, question: str, default: str):
        return self._next(question)

    def ask_choice(self, question: str, choices: Sequence[Choice], default: str | None = None):
        self.choices.append(list(choices))
        return self._next(question)


@pytest.fixture
def executor() -> FakeExecutor:
    """Executor where git reports no enclosing repository."""
    return FakeExecutor(returncodes={"git rev-parse": 128, "hg": 255})


@pytest.fixture
def context(tmp_path: Path) -> InvocationContext:
    """Invocation rooted in a temporary directory with an empty environment."""
    return InvocationContext(environ={}, cwd=tmp_path, templates_dir=BUNDLED_TEMPLATES_DIR)


@pytest.fixture
def templates():
    return list_templates(BUNDLED_TEMPLATES_DIR)


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A small custom templates root with a single 'basic' template."""
    root = tmp_path / "templates"
    basic = root / "basic"
    (basic / "src" / "nested").mkdir(parents=True)
    (basic / "empty").mkdir()
    (basic / "template.toml").write_text('[template]\ndescription = "Basic"\n')
    (basic / "package.json").write_text('{\n  "name": "basic",\n  "private": true\n}\n')
    (basic / "gitignore").write_text("node_modules\n")
    (basic / "src" / "nested" / "page.mdx").write_text("# Hello\n")
    (basic / "logo.bin").write_bytes(bytes(range(256)))
    return root


def snapshot(directory: Path) -> dict[str, bytes | None]:
    """Map each entry under a directory to its bytes (None for directories)."""
    return {
        p.relative_to(directory).as_posix(): (None if p.is_dir() else p.read_bytes())
        for p in sorted(directory.rglob("*"))
    }


@pytest.fixture
def make_executor():
    """Factory for FakeExecutor with custom exit codes."""
    return FakeExecutor


@pytest.fixture
def make_prompter():
    """Factory for ScriptedPrompter; pass None to cancel a prompt."""
    return ScriptedPrompter


@pytest.fixture(name="snapshot")
def snapshot_fixture():
    return snapshot

"""
Input resolution.

Merges what the user passed on the command line with answers to
interactive prompts for anything missing. Prompt outcomes are values
(Answered or Cancelled), not exceptions; the resolver turns a cancellation
into PromptCancelledError before anything touches the filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from ..errors import ConflictingOptionsError, PromptCancelledError
from .package_manager import PackageManager
from .templates import DEFAULT_TEMPLATE, TemplateDescriptor

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PROJECT_PATH = "my-docs"

PROJECT_PATH_QUESTION = "What is your project named?"
TEMPLATE_QUESTION = "Which template would you like to use?"


@dataclass(frozen=True)
class Answered(Generic[T]):
    """The user answered a prompt."""

    value: T


@dataclass(frozen=True)
class Cancelled:
    """The user aborted a prompt."""


PromptResult = Answered[T] | Cancelled


@dataclass(frozen=True)
class Choice:
    """One option of a single-choice prompt."""

    value: str
    label: str
    description: str = ""
    badge: str = ""


class Prompter(Protocol):
    """Asks the user questions, blocking until answered or cancelled."""

    def ask_text(self, question: str, default: str) -> PromptResult[str]: ...

    def ask_choice(
        self, question: str, choices: Sequence[Choice], default: str | None = None
    ) -> PromptResult[str]: ...


@dataclass(frozen=True)
class RawProjectInput:
    """Request fields as gathered from the command line; any may be missing."""

    raw_path: str | None = None
    template_id: str | None = None
    package_manager: PackageManager | None = None
    skip_install: bool = False
    skip_git: bool = False


@dataclass(frozen=True)
class ProjectRequest:
    """A fully resolved request to create one project."""

    raw_path: str
    template_id: str
    package_manager: PackageManager | None = None
    skip_install: bool = False
    skip_git: bool = False


def select_package_manager(
    use_npm: bool = False,
    use_yarn: bool = False,
    use_pnpm: bool = False,
) -> PackageManager | None:
    """
    Turn the --use-* flags into an explicit package manager choice.

    Returns:
        The chosen package manager, or None if no flag was given

    Raises:
        ConflictingOptionsError: If more than one flag was given
    """
    flags = {
        "--use-npm": (use_npm, PackageManager.NPM),
        "--use-yarn": (use_yarn, PackageManager.YARN),
        "--use-pnpm": (use_pnpm, PackageManager.PNPM),
    }
    chosen = [(flag, kind) for flag, (enabled, kind) in flags.items() if enabled]
    if len(chosen) > 1:
        raise ConflictingOptionsError([flag for flag, _ in chosen])
    return chosen[0][1] if chosen else None


def template_choices(templates: Sequence[TemplateDescriptor]) -> list[Choice]:
    """Build prompt choices for the available templates."""
    return [
        Choice(
            value=t.id,
            label=t.id,
            description=t.description,
            badge="RECOMMENDED" if t.id == DEFAULT_TEMPLATE else "",
        )
        for t in templates
    ]


def resolve_request(
    raw: RawProjectInput,
    prompter: Prompter,
    templates: Sequence[TemplateDescriptor],
) -> ProjectRequest:
    """
    Fill in missing request fields by prompting, path first then template.

    The package manager is never prompted for; when absent it is detected
    later from the environment.

    Args:
        raw: Fields gathered from the command line
        prompter: Asks for whatever is missing
        templates: Templates offered by the template prompt

    Returns:
        The resolved ProjectRequest

    Raises:
        PromptCancelledError: If the user cancels any prompt
    """
    raw_path = raw.raw_path.strip() if raw.raw_path else None
    if not raw_path:
        answer = prompter.ask_text(PROJECT_PATH_QUESTION, DEFAULT_PROJECT_PATH)
        if isinstance(answer, Cancelled):
            raise PromptCancelledError(PROJECT_PATH_QUESTION)
        raw_path = answer.value.strip() or DEFAULT_PROJECT_PATH
        logger.debug("Project path answered: %r", raw_path)

    template_id = raw.template_id
    if not template_id:
        answer = prompter.ask_choice(
            TEMPLATE_QUESTION, template_choices(templates), default=DEFAULT_TEMPLATE
        )
        if isinstance(answer, Cancelled):
            raise PromptCancelledError(TEMPLATE_QUESTION)
        template_id = answer.value
        logger.debug("Template answered: %r", template_id)

    return ProjectRequest(
        raw_path=raw_path,
        template_id=template_id,
        package_manager=raw.package_manager,
        skip_install=raw.skip_install,
        skip_git=raw.skip_git,
    )

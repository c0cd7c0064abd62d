"""
Error types for the create-specra scaffolding pipeline.

Every failure the pipeline can report derives from SpecraError. The CLI
catches SpecraError, prints the message (and hint, when present) and exits
with status 1. Best-effort steps such as git initialization never raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .init_impl.validation import NameValidation


class SpecraError(Exception):
    """Base exception for all create-specra errors."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the recovery hint if available."""
        if self.hint:
            return f"{self.message}\n{self.hint}"
        return self.message


# =============================================================================
# User input
# =============================================================================


class UserInputError(SpecraError):
    """
    Raised when the user's input cannot be used.

    Examples:
    - Project name breaks npm naming rules
    - A prompt was cancelled
    - Conflicting command-line flags
    """

    pass


class InvalidNameError(UserInputError):
    """Raised when the project name fails package-name validation."""

    def __init__(self, name: str, validation: NameValidation):
        self.name = name
        self.validation = validation
        problems = "\n".join(f"    * {problem}" for problem in validation.errors)
        super().__init__(
            f"Could not create a project called '{name}' because of npm naming restrictions:\n"
            f"{problems}",
            hint="Choose a lowercase, URL-friendly directory name such as 'my-docs'.",
        )


class PromptCancelledError(UserInputError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, question: str):
        self.question = question
        super().__init__(f"Cancelled while answering: {question}")


class ConflictingOptionsError(UserInputError):
    """Raised when mutually exclusive flags are combined."""

    def __init__(self, options: Sequence[str]):
        self.options = tuple(options)
        super().__init__(
            f"Options {', '.join(self.options)} cannot be used together.",
            hint="Pass at most one of --use-npm, --use-yarn or --use-pnpm.",
        )


# =============================================================================
# Environment
# =============================================================================


class SetupEnvironmentError(SpecraError):
    """
    Raised when the environment rules out creating the project.

    Examples:
    - Destination directory is not writable
    - Destination directory has conflicting files
    - Requested template is not bundled
    """

    pass


class UnwritableDestinationError(SetupEnvironmentError):
    """Raised when the destination exists but cannot be written to."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"The directory {path} is not writable.",
            hint="Check the directory permissions or choose another location.",
        )


class DestinationNotEmptyError(SetupEnvironmentError):
    """Raised when the destination holds files that could conflict."""

    def __init__(self, path: str, conflicts: Sequence[str]):
        self.path = path
        self.conflicts = tuple(conflicts)
        listing = "\n".join(f"  {entry}" for entry in self.conflicts)
        super().__init__(
            f"The directory {path} contains files that could conflict:\n\n{listing}",
            hint="Either try using a new directory name, or remove the files listed above.",
        )


class UnknownTemplateError(SetupEnvironmentError):
    """Raised when a template id does not match any bundled template."""

    def __init__(self, template_id: str, available: Sequence[str]):
        self.template_id = template_id
        self.available = tuple(available)
        super().__init__(
            f"Template {template_id} not found.",
            hint=f"Available templates: {', '.join(self.available) if self.available else 'none'}",
        )


# =============================================================================
# Materialization and execution
# =============================================================================


class MaterializationError(SpecraError):
    """
    Raised when the template tree cannot be written to the destination.

    The destination may be left partially populated; copying is not
    transactional and nothing is cleaned up.
    """

    pass


class InstallError(SpecraError):
    """
    Raised when the package manager's install command fails.

    The destination stays fully materialized. The hint carries the
    commands needed to retry the installation by hand.
    """

    def __init__(self, command: str, returncode: int, project_path: str):
        self.command = command
        self.returncode = returncode
        self.project_path = project_path
        super().__init__(
            f"Failed to install dependencies ('{command}' exited with status {returncode}).",
            hint=(
                "The project files are in place. To retry, run:\n\n"
                f"  cd {project_path}\n"
                f"  {command}"
            ),
        )

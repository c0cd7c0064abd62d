"""
Dependency installation.

Runs the package manager's install command inside the new project with the
terminal's streams inherited, so the user sees the installer's own output.
A failure never rolls back the project files.
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

from ..errors import InstallError
from .executor import CommandExecutor
from .package_manager import PackageManagerCommand

logger = logging.getLogger(__name__)


def install_dependencies(
    command: PackageManagerCommand,
    project_dir: Path,
    executor: CommandExecutor,
    display_path: str | None = None,
) -> None:
    """
    Install the project's dependencies, blocking until the installer exits.

    Args:
        command: Resolved package manager commands
        project_dir: Materialized project directory
        executor: Runs the install command
        display_path: Path shown in the retry instructions (defaults to
            project_dir)

    Raises:
        InstallError: If the installer exits non-zero or cannot be started
    """
    logger.debug("Installing dependencies with %r", command.install)
    returncode = executor.run(shlex.split(command.install), project_dir)
    if returncode != 0:
        raise InstallError(command.install, returncode, display_path or str(project_dir))

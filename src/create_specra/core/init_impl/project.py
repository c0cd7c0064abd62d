"""
Main project creation logic.

Drives one run of the scaffolding pipeline for a resolved request. Nothing
is written to disk until the name is valid, the template is known and the
destination has passed its safety checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .destination import ResolvedDestination, inspect_destination, prepare_destination
from .installer import install_dependencies
from .manifest import patch_project
from .package_manager import (
    PackageManagerCommand,
    get_package_manager_command,
    resolve_package_manager,
)
from .templates import TemplateDescriptor, materialize_template, resolve_template
from .validation import validate_project_name
from .vcs import try_git_init

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..environment import InvocationContext
    from .executor import CommandExecutor
    from .request import ProjectRequest

logger = logging.getLogger(__name__)


@dataclass
class CreateResult:
    """What a successful run produced."""

    destination: ResolvedDestination
    template: TemplateDescriptor
    command: PackageManagerCommand
    installed: bool = False
    git_initialized: bool = False


def create_project(
    request: ProjectRequest,
    context: InvocationContext,
    executor: CommandExecutor,
    progress_callback: Callable[[str], None] | None = None,
) -> CreateResult:
    """
    Create a new Specra documentation site.

    Args:
        request: Resolved request (path, template, package manager, flags)
        context: Environment, working directory and templates root
        executor: Runs the package manager and git
        progress_callback: Optional callback for progress messages

    Returns:
        CreateResult describing the created project

    Raises:
        InvalidNameError: If the project name breaks npm naming rules
        UnknownTemplateError: If the template is not bundled
        UnwritableDestinationError: If the destination cannot be written
        DestinationNotEmptyError: If the destination has conflicting files
        MaterializationError: If copying or patching fails midway
        InstallError: If the dependency install fails
    """

    def log(msg: str) -> None:
        """Log progress message if callback provided."""
        if progress_callback:
            progress_callback(msg)

    destination = inspect_destination(request.raw_path, context.cwd)

    validation = validate_project_name(destination.base_name)
    for warning in validation.warnings:
        log(f"Warning: {warning}")

    template = resolve_template(request.template_id, context.templates_dir)

    prepare_destination(destination)

    log(f"Creating a new Specra documentation site in {destination.absolute_path}")
    log("")
    log(f"Using template: {template.id}")
    log("")

    copied = materialize_template(template, destination.absolute_path)
    logger.info("Copied %d template files to %s", len(copied), destination.absolute_path)
    patch_project(destination.absolute_path, destination.base_name)

    kind = resolve_package_manager(request.package_manager, context.environ)
    command = get_package_manager_command(kind)
    result = CreateResult(destination=destination, template=template, command=command)

    if not request.skip_install:
        log("Installing dependencies...")
        log("")
        install_dependencies(command, destination.absolute_path, executor, request.raw_path)
        result.installed = True
        log("")
    else:
        log("Skipping dependency installation (--skip-install)")
        log("")

    if not request.skip_git:
        result.git_initialized = try_git_init(destination.absolute_path, executor)
        if result.git_initialized:
            log("Initialized a git repository.")
            log("")
    else:
        logger.debug("Skipping git initialization (--skip-git)")

    return result

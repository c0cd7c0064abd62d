"""
Project scaffolding for create-specra.

This package contains the stages of the scaffolding pipeline:
- request.py - Input resolution (command line + prompts)
- validation.py - Package name validation
- destination.py - Destination safety checks
- templates.py - Template discovery and copying
- manifest.py - package.json and ignore-file patching
- package_manager.py - Package manager resolution
- executor.py - Command execution capability
- installer.py - Dependency installation
- vcs.py - Best-effort git initialization
- report.py - Next-step reporting
- project.py - Main create_project logic
"""

from __future__ import annotations

from .destination import (
    ALLOWED_ENTRIES,
    ResolvedDestination,
    inspect_destination,
    prepare_destination,
)
from .executor import COMMAND_NOT_FOUND, CommandExecutor, SubprocessExecutor
from .installer import install_dependencies
from .manifest import PackageManifest, patch_manifest, patch_project, rename_ignore_file
from .package_manager import (
    PackageManager,
    PackageManagerCommand,
    get_package_manager_command,
    resolve_package_manager,
)
from .project import CreateResult, create_project
from .report import build_success_report
from .request import (
    Answered,
    Cancelled,
    Choice,
    ProjectRequest,
    Prompter,
    RawProjectInput,
    resolve_request,
    select_package_manager,
)
from .templates import (
    DEFAULT_TEMPLATE,
    TemplateDescriptor,
    list_templates,
    materialize_template,
    resolve_template,
)
from .validation import NameValidation, validate_package_name, validate_project_name
from .vcs import try_git_init

__all__ = [
    # Input
    "Answered",
    "Cancelled",
    "Choice",
    "Prompter",
    "RawProjectInput",
    "ProjectRequest",
    "resolve_request",
    "select_package_manager",
    # Validation
    "NameValidation",
    "validate_package_name",
    "validate_project_name",
    # Destination
    "ALLOWED_ENTRIES",
    "ResolvedDestination",
    "inspect_destination",
    "prepare_destination",
    # Templates
    "DEFAULT_TEMPLATE",
    "TemplateDescriptor",
    "list_templates",
    "resolve_template",
    "materialize_template",
    # Manifest
    "PackageManifest",
    "patch_manifest",
    "rename_ignore_file",
    "patch_project",
    # Package manager
    "PackageManager",
    "PackageManagerCommand",
    "get_package_manager_command",
    "resolve_package_manager",
    # Execution
    "COMMAND_NOT_FOUND",
    "CommandExecutor",
    "SubprocessExecutor",
    "install_dependencies",
    "try_git_init",
    # Project
    "CreateResult",
    "create_project",
    "build_success_report",
]

"""
Destination safety checks.

inspect_destination() looks at the target path without touching it;
prepare_destination() is the single gate every later stage relies on. It
either refuses the destination, leaving the filesystem exactly as it was,
or guarantees that the directory exists and is safe to write into.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..errors import DestinationNotEmptyError, UnwritableDestinationError

logger = logging.getLogger(__name__)

# Entries that may already sit in a destination without blocking creation:
# VCS metadata, OS metadata, IDE/editor config, licenses and installer logs.
ALLOWED_ENTRIES = {
    ".DS_Store",
    ".editorconfig",
    ".git",
    ".gitattributes",
    ".gitignore",
    ".gitlab-ci.yml",
    ".hg",
    ".hgcheck",
    ".hgignore",
    ".idea",
    ".npmignore",
    ".travis.yml",
    ".vscode",
    ".yarn",
    "LICENSE",
    "LICENSE.md",
    "LICENSE.txt",
    "Thumbs.db",
    "npm-debug.log",
    "yarn-debug.log",
    "yarn-error.log",
    "yarnrc.yml",
}

# IntelliJ module files carry the project name, e.g. "my-docs.iml"
ALLOWED_SUFFIXES = (".iml",)


@dataclass(frozen=True)
class ResolvedDestination:
    """
    Where the project will be materialized and what was found there.

    Attributes:
        raw_path: Path exactly as the user gave it (used in next-step hints)
        absolute_path: Fully resolved destination
        base_name: Final path segment; becomes the manifest's name field
        existed_before: Whether the path existed when inspected
        writable: Whether the process may write to it (True when missing)
        empty_enough: Whether it is empty or holds only allowed entries
        conflicts: Entries that block creation, for error reporting
    """

    raw_path: str
    absolute_path: Path
    base_name: str
    existed_before: bool
    writable: bool
    empty_enough: bool
    conflicts: tuple[str, ...] = ()

    @property
    def may_materialize(self) -> bool:
        return self.writable and (not self.existed_before or self.empty_enough)


def is_allowed_entry(name: str) -> bool:
    """Check whether a directory entry is a benign pre-existing artifact."""
    return name in ALLOWED_ENTRIES or name.endswith(ALLOWED_SUFFIXES)


def find_conflicts(directory: Path) -> list[str]:
    """
    List entries in a directory that could conflict with a new project.

    Directories are suffixed with "/" so the report reads like ``ls -F``.

    Args:
        directory: Existing directory to scan

    Returns:
        Sorted names of the offending entries (empty if none)
    """
    conflicts = []
    for item in directory.iterdir():
        if is_allowed_entry(item.name):
            continue
        conflicts.append(f"{item.name}/" if item.is_dir() else item.name)
    return sorted(conflicts)


def resolve_project_path(raw_path: str, cwd: Path) -> Path:
    """
    Resolve a user-supplied project path against the invocation directory.

    Resolution is lexical: symlinks are not followed, so the final segment
    is always the one the user typed.
    """
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = cwd / path
    return Path(os.path.normpath(os.path.abspath(path)))


def inspect_destination(raw_path: str, cwd: Path) -> ResolvedDestination:
    """
    Inspect a destination path without modifying anything.

    Args:
        raw_path: Project path as given on the command line or prompt
        cwd: Directory relative paths are resolved against

    Returns:
        ResolvedDestination describing the path
    """
    absolute_path = resolve_project_path(raw_path, cwd)
    existed_before = absolute_path.exists()

    writable = True
    empty_enough = True
    conflicts: list[str] = []

    if existed_before:
        writable = os.access(absolute_path, os.W_OK)
        if not absolute_path.is_dir():
            empty_enough = False
            conflicts = [f"{absolute_path.name} (not a directory)"]
        elif writable:
            conflicts = find_conflicts(absolute_path)
            empty_enough = not conflicts

    destination = ResolvedDestination(
        raw_path=raw_path,
        absolute_path=absolute_path,
        base_name=absolute_path.name,
        existed_before=existed_before,
        writable=writable,
        empty_enough=empty_enough,
        conflicts=tuple(conflicts),
    )
    logger.debug("Inspected destination: %s", destination)
    return destination


def prepare_destination(destination: ResolvedDestination) -> None:
    """
    Gate the destination, creating it when missing.

    Checks run in order and stop at the first failure: writability, then
    emptiness. A missing destination is created with its parents; if that
    fails, any directories created on the way are removed again.

    Args:
        destination: Result of inspect_destination()

    Raises:
        UnwritableDestinationError: If the existing path cannot be written
        DestinationNotEmptyError: If the existing path holds conflicting entries
        UnwritableDestinationError: If the missing path cannot be created
    """
    if destination.existed_before:
        if not destination.writable:
            raise UnwritableDestinationError(destination.raw_path)
        if not destination.empty_enough:
            raise DestinationNotEmptyError(destination.raw_path, destination.conflicts)
        logger.debug("Reusing existing directory %s", destination.absolute_path)
        return

    first_missing = destination.absolute_path
    while not first_missing.parent.exists() and first_missing.parent != first_missing:
        first_missing = first_missing.parent

    try:
        destination.absolute_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        if first_missing.exists():
            shutil.rmtree(first_missing, ignore_errors=True)
            logger.debug("Removed partially created %s", first_missing)
        raise UnwritableDestinationError(destination.raw_path) from e
    logger.debug("Created directory %s", destination.absolute_path)

"""
Best-effort git initialization.

Nothing here raises: every failure is logged at debug level and reported
as a False return value, and the pipeline's outcome never depends on it.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .executor import CommandExecutor

logger = logging.getLogger(__name__)

INITIAL_BRANCH = "main"
INITIAL_COMMIT_MESSAGE = "Initial commit from Create Specra"


def _is_in_repository(project_dir: Path, executor: CommandExecutor) -> bool:
    return executor.run(["git", "rev-parse", "--is-inside-work-tree"], project_dir, quiet=True) == 0


def _is_in_mercurial(project_dir: Path, executor: CommandExecutor) -> bool:
    return executor.run(["hg", "--cwd", ".", "root"], project_dir, quiet=True) == 0


def try_git_init(project_dir: Path, executor: CommandExecutor) -> bool:
    """
    Initialize a git repository with an initial commit.

    Skipped when git is unavailable, the project already has a ``.git``
    entry, or it lives inside a git work tree or Mercurial repository. If any step after ``git init``
    fails, the new ``.git`` directory is removed again.

    Args:
        project_dir: Materialized project directory
        executor: Runs the git commands (quietly)

    Returns:
        True if a repository was created and committed
    """
    if executor.run(["git", "--version"], project_dir, quiet=True) != 0:
        logger.debug("git not available, skipping repository initialization")
        return False

    if (project_dir / ".git").exists():
        logger.debug("%s already has a .git entry", project_dir)
        return False

    if _is_in_repository(project_dir, executor) or _is_in_mercurial(project_dir, executor):
        logger.debug("%s is already under version control", project_dir)
        return False

    if executor.run(["git", "init"], project_dir, quiet=True) != 0:
        logger.debug("git init failed in %s", project_dir)
        return False

    steps = (
        ["git", "checkout", "-b", INITIAL_BRANCH],
        ["git", "add", "-A"],
        ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
    )
    for args in steps:
        if executor.run(args, project_dir, quiet=True) != 0:
            logger.debug("%s failed, removing partial repository", " ".join(args))
            shutil.rmtree(project_dir / ".git", ignore_errors=True)
            return False

    return True

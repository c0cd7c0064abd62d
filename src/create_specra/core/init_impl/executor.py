"""
Command execution capability.

The installer and git initializer never spawn processes themselves; they
go through a CommandExecutor so tests can substitute a fake that records
calls and returns scripted exit codes.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


class CommandExecutor(Protocol):
    """Runs a command to completion and reports its exit status."""

    def run(self, args: Sequence[str], cwd: Path, *, quiet: bool = False) -> int:
        """
        Run a command, blocking until it exits.

        Args:
            args: Program and arguments
            cwd: Working directory for the command
            quiet: If True, discard output instead of inheriting the
                terminal's streams

        Returns:
            Exit status; COMMAND_NOT_FOUND if the program does not exist
        """
        ...


class SubprocessExecutor:
    """CommandExecutor backed by subprocess, with no timeout."""

    def run(self, args: Sequence[str], cwd: Path, *, quiet: bool = False) -> int:
        program = shutil.which(args[0])
        if program is None:
            logger.debug("Command not found: %s", args[0])
            return COMMAND_NOT_FOUND

        output = subprocess.DEVNULL if quiet else None
        logger.debug("Running %s in %s", " ".join(args), cwd)
        try:
            completed = subprocess.run(
                [program, *args[1:]],
                cwd=cwd,
                check=False,
                stdout=output,
                stderr=output,
            )
        except OSError as e:
            logger.debug("Failed to start %s: %s", args[0], e)
            return COMMAND_NOT_FOUND
        return completed.returncode

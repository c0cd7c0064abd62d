"""
Package manager resolution.

Decides which package manager installs and runs the generated project.
Precedence, highest first:

1. Explicit choice (``--use-npm``, ``--use-yarn``, ``--use-pnpm``)
2. The package manager that launched us (``npm_config_user_agent``)
3. npm
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from ..environment import USER_AGENT_ENV_VAR

logger = logging.getLogger(__name__)


class PackageManager(StrEnum):
    """Supported package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM


@dataclass(frozen=True)
class PackageManagerCommand:
    """
    Command lines for one package manager.

    Attributes:
        kind: Package manager these commands belong to
        install: Command that installs the project's dependencies
        run_prefix: Prefix that runs a package.json script
    """

    kind: PackageManager
    install: str
    run_prefix: str

    def run(self, script: str) -> str:
        """Command line that runs a package.json script."""
        return f"{self.run_prefix} {script}"


_COMMANDS: dict[PackageManager, PackageManagerCommand] = {
    PackageManager.NPM: PackageManagerCommand(
        kind=PackageManager.NPM, install="npm install", run_prefix="npm run"
    ),
    PackageManager.YARN: PackageManagerCommand(
        kind=PackageManager.YARN, install="yarn install", run_prefix="yarn"
    ),
    PackageManager.PNPM: PackageManagerCommand(
        kind=PackageManager.PNPM, install="pnpm install", run_prefix="pnpm run"
    ),
}


def detect_package_manager(environ: Mapping[str, str]) -> PackageManager | None:
    """
    Identify the package manager driving the current invocation.

    Args:
        environ: Environment variables of the invocation

    Returns:
        The package manager named by the user agent, or None if absent

    Examples:
        detect_package_manager({"npm_config_user_agent": "pnpm/9.1.0 node/v20"})
        # -> PackageManager.PNPM
    """
    user_agent = environ.get(USER_AGENT_ENV_VAR, "").strip().lower()
    for kind in (PackageManager.PNPM, PackageManager.YARN, PackageManager.NPM):
        if user_agent.startswith(kind.value):
            return kind
    return None


def resolve_package_manager(
    override: PackageManager | None,
    environ: Mapping[str, str],
) -> PackageManager:
    """Pick the package manager by precedence: override, environment, default."""
    if override is not None:
        logger.debug("Package manager %s chosen explicitly", override)
        return override

    detected = detect_package_manager(environ)
    if detected is not None:
        logger.debug("Package manager %s detected from %s", detected, USER_AGENT_ENV_VAR)
        return detected

    logger.debug("Falling back to default package manager %s", DEFAULT_PACKAGE_MANAGER)
    return DEFAULT_PACKAGE_MANAGER


def get_package_manager_command(kind: PackageManager) -> PackageManagerCommand:
    """Get the command set for a package manager."""
    return _COMMANDS[kind]

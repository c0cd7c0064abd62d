"""
Invocation context for create-specra.

The pipeline never reads ``os.environ`` or the working directory directly.
Instead the CLI captures both once, together with the templates root, in an
InvocationContext that is threaded into every stage that needs them.

Environment variables:
    - npm_config_user_agent: set by npm, yarn and pnpm when they run a
      package's binary (``npm create specra``, ``pnpm create specra`` ...).
      Identifies which package manager drove the invocation.
    - CREATE_SPECRA_TEMPLATES_DIR: alternative templates root. Defaults to
      the templates bundled with the package.

Usage:
    from create_specra.core.environment import InvocationContext

    context = InvocationContext.from_process()
    context.user_agent  # "pnpm/9.1.0 npm/? node/v20.11.0 linux x64" or None
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

# Set by npm/yarn/pnpm for every child process they spawn
USER_AGENT_ENV_VAR = "npm_config_user_agent"

TEMPLATES_DIR_ENV_VAR = "CREATE_SPECRA_TEMPLATES_DIR"

# Templates shipped inside the package
BUNDLED_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


@dataclass(frozen=True)
class InvocationContext:
    """
    Immutable snapshot of the ambient state a run depends on.

    Attributes:
        environ: Environment variables visible to the run
        cwd: Directory relative paths are resolved against
        templates_dir: Root directory holding one sub-directory per template
    """

    environ: Mapping[str, str] = field(default_factory=dict)
    cwd: Path = field(default_factory=Path.cwd)
    templates_dir: Path = BUNDLED_TEMPLATES_DIR

    @classmethod
    def from_process(cls) -> InvocationContext:
        """Capture the current process environment and working directory."""
        environ = dict(os.environ)
        templates_dir = BUNDLED_TEMPLATES_DIR
        override = environ.get(TEMPLATES_DIR_ENV_VAR, "").strip()
        if override:
            templates_dir = Path(override).expanduser().resolve()
            logger.debug("Using templates from %s (%s)", templates_dir, TEMPLATES_DIR_ENV_VAR)
        return cls(environ=environ, cwd=Path.cwd(), templates_dir=templates_dir)

    @property
    def user_agent(self) -> str | None:
        """Package manager user agent string, if one drove this invocation."""
        value = self.environ.get(USER_AGENT_ENV_VAR, "").strip()
        return value or None

"""
create-specra - scaffold a new Specra documentation site.

Copies a bundled template into a new directory, names the generated
package.json after it, installs dependencies with npm, yarn or pnpm and
makes an initial git commit.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.errors import (
    InstallError,
    MaterializationError,
    SetupEnvironmentError,
    SpecraError,
    UserInputError,
)


def _get_version() -> str:
    """Get the installed version from package metadata."""
    try:
        return _metadata_version("create-specra")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "SpecraError",
    "UserInputError",
    "SetupEnvironmentError",
    "MaterializationError",
    "InstallError",
]

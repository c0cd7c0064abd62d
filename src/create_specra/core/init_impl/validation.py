"""
Project name validation.

Checks a candidate project name against npm's package naming rules. The
name ends up in the generated package.json, so anything npm would refuse
for a new package is a hard error here.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..errors import InvalidNameError

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 214

# Names npm refuses outright
BLOCKED_NAMES = {"node_modules", "favicon.ico"}

# Node.js core modules; a package shadowing one of these is unusable
NODE_BUILTINS = {
    "assert",
    "async_hooks",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "diagnostics_channel",
    "dns",
    "domain",
    "events",
    "fs",
    "http",
    "http2",
    "https",
    "inspector",
    "module",
    "net",
    "os",
    "path",
    "perf_hooks",
    "process",
    "punycode",
    "querystring",
    "readline",
    "repl",
    "stream",
    "string_decoder",
    "sys",
    "timers",
    "tls",
    "trace_events",
    "tty",
    "url",
    "util",
    "v8",
    "vm",
    "wasi",
    "worker_threads",
    "zlib",
}

# Segments npm recommends keeping out of package names
DISCOURAGED_SEGMENTS = {"js", "node"}

# Characters left untouched by URI component encoding
_URL_SAFE = re.compile(r"^[A-Za-z0-9\-_.!~*'()]+$")
_SCOPED = re.compile(r"^@([^/]+)/([^/]+)$")
_SPECIAL_CHARS = re.compile(r"[~'!()*]")


@dataclass(frozen=True)
class NameValidation:
    """
    Outcome of validating a package name.

    Errors make the name unusable; warnings are advice only.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_url_safe(value: str) -> bool:
    return bool(_URL_SAFE.match(value))


def validate_package_name(name: str) -> NameValidation:
    """
    Validate a name against npm's package naming rules.

    Args:
        name: Candidate package name (optionally scoped, ``@scope/name``)

    Returns:
        NameValidation with hard errors and warnings

    Examples:
        validate_package_name("my-docs").is_valid  # -> True
        validate_package_name("My Docs").errors
        # -> ("name can only contain URL-friendly characters",
        #     "name can no longer contain capital letters")
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        return NameValidation(errors=("name length must be greater than zero",))

    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    if name.lower() in BLOCKED_NAMES:
        errors.append(f"{name} is a blocked name")

    scoped = _SCOPED.match(name)
    if scoped:
        scope, package = scoped.groups()
        if not (_is_url_safe(scope) and _is_url_safe(package)):
            errors.append("name can only contain URL-friendly characters")
    elif not _is_url_safe(name):
        errors.append("name can only contain URL-friendly characters")

    if name.lower() != name:
        errors.append("name can no longer contain capital letters")
    if len(name) > MAX_NAME_LENGTH:
        errors.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if name in NODE_BUILTINS:
        errors.append(f"{name} is a core module name")
    if _SPECIAL_CHARS.search(name.split("/")[-1]):
        errors.append("name can no longer contain special characters (\"~'!()*\")")

    segments = set(re.split(r"[-_.]", name.split("/")[-1].lower()))
    for segment in sorted(segments & DISCOURAGED_SEGMENTS):
        warnings.append(f"name should not contain '{segment}' as it is redundant for npm packages")

    return NameValidation(errors=tuple(errors), warnings=tuple(warnings))


def validate_project_name(name: str) -> NameValidation:
    """
    Validate a project name, raising on hard errors.

    Args:
        name: Project name (the final segment of the project path)

    Returns:
        The validation result, which may still carry warnings

    Raises:
        InvalidNameError: If the name has any hard error
    """
    validation = validate_package_name(name)
    if not validation.is_valid:
        logger.debug("Rejected project name %r: %s", name, "; ".join(validation.errors))
        raise InvalidNameError(name, validation)
    return validation

"""
Template discovery and materialization.

Templates are static project trees bundled under ``create_specra/templates``.
Each template directory carries a ``template.toml`` descriptor that is read
here and never copied. Template files are copied byte-for-byte: there is no
variable substitution inside file bodies.
"""

from __future__ import annotations

import logging
import shutil
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import MaterializationError, UnknownTemplateError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DESCRIPTOR_FILE = "template.toml"

DEFAULT_TEMPLATE = "minimal"


@dataclass(frozen=True)
class TemplateDescriptor:
    """A bundled template and where its tree lives."""

    id: str
    root_path: Path
    description: str = ""
    order: int = 100


def _load_descriptor(template_dir: Path) -> TemplateDescriptor:
    """Build a descriptor from a template directory's template.toml."""
    data: dict = {}
    descriptor_path = template_dir / DESCRIPTOR_FILE
    if descriptor_path.exists():
        try:
            with open(descriptor_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning("Ignoring malformed %s: %s", descriptor_path, e)

    template = data.get("template", {})
    return TemplateDescriptor(
        id=template_dir.name,
        root_path=template_dir,
        description=str(template.get("description", "")),
        order=int(template.get("order", 100)),
    )


def list_templates(templates_dir: Path) -> list[TemplateDescriptor]:
    """
    List available templates.

    Args:
        templates_dir: Root directory with one sub-directory per template

    Returns:
        Templates ordered by their declared order, then id
    """
    if not templates_dir.is_dir():
        return []

    templates = [
        _load_descriptor(item)
        for item in templates_dir.iterdir()
        if item.is_dir() and not item.name.startswith((".", "_"))
    ]
    return sorted(templates, key=lambda t: (t.order, t.id))


def resolve_template(template_id: str, templates_dir: Path) -> TemplateDescriptor:
    """
    Map a template id to a bundled template.

    Args:
        template_id: Template name, e.g. "minimal"
        templates_dir: Root directory with one sub-directory per template

    Returns:
        TemplateDescriptor for an existing template directory

    Raises:
        UnknownTemplateError: If no template has that id
    """
    templates = {t.id: t for t in list_templates(templates_dir)}
    template = templates.get(template_id)
    if template is None:
        raise UnknownTemplateError(template_id, sorted(templates))
    logger.debug("Resolved template %r to %s", template_id, template.root_path)
    return template


def materialize_template(
    template: TemplateDescriptor,
    target_dir: Path,
    progress_callback: Callable[[Path], None] | None = None,
) -> list[Path]:
    """
    Copy a template tree into the target directory.

    Walks the template explicitly so every directory (including empty ones)
    is recreated and every file is copied with its exact bytes and relative
    path. The target directory must already exist.

    Args:
        template: Template to copy
        target_dir: Prepared destination directory
        progress_callback: Optional callback receiving each copied file's
            path relative to the target

    Returns:
        Relative paths of the copied files, in copy order

    Raises:
        MaterializationError: If any directory or file cannot be written.
            Files copied before the failure are left in place.
    """
    copied: list[Path] = []

    for src_path in sorted(template.root_path.rglob("*")):
        rel_path = src_path.relative_to(template.root_path)
        if rel_path == Path(DESCRIPTOR_FILE):
            continue

        dst_path = target_dir / rel_path
        try:
            if src_path.is_dir():
                dst_path.mkdir(parents=True, exist_ok=True)
                continue
            dst_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src_path, dst_path)
        except OSError as e:
            raise MaterializationError(
                f"Failed to copy template file {rel_path.as_posix()}: {e}",
                hint=f"The directory {target_dir} may be partially populated; remove it and retry.",
            ) from e

        copied.append(rel_path)
        if progress_callback:
            progress_callback(rel_path)

    logger.debug("Copied %d files from template %r", len(copied), template.id)
    return copied

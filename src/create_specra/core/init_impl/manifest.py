"""
Generated manifest patching.

After the template is copied, the project's package.json gets the project
name and the template's dot-less ``gitignore`` is renamed to ``.gitignore``.
Templates ship the ignore file without its dot because packaging tools
drop dotfiles from distributions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from ..errors import MaterializationError

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"

IGNORE_FILE_SHIPPED = "gitignore"
IGNORE_FILE = ".gitignore"


class PackageManifest(BaseModel):
    """
    package.json with one owned field.

    Only ``name`` is interpreted. Every other key is kept as an extra and
    written back unchanged, in the order it was read.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = None

    _key_order: list[str] = PrivateAttr(default_factory=list)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> PackageManifest:
        manifest = cls.model_validate(document)
        manifest._key_order = list(document)
        return manifest

    def to_document(self) -> dict[str, Any]:
        """Return the manifest as a plain dict in its original key order."""
        data = self.model_dump()
        if self.name is None and "name" not in self._key_order:
            del data["name"]
        ordered = {key: data[key] for key in self._key_order if key in data}
        ordered.update((key, value) for key, value in data.items() if key not in ordered)
        return ordered

    def dumps(self) -> str:
        """Serialize with two-space indentation and a trailing newline."""
        return json.dumps(self.to_document(), indent=2, ensure_ascii=False) + "\n"


def load_manifest(project_dir: Path) -> PackageManifest:
    """
    Load package.json from a materialized project.

    Raises:
        MaterializationError: If the file is missing or not a JSON object
    """
    manifest_path = project_dir / MANIFEST_FILE
    try:
        document = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise MaterializationError(
            f"Template did not produce a {MANIFEST_FILE} in {project_dir}"
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise MaterializationError(f"Could not read {manifest_path}: {e}") from e

    if not isinstance(document, dict):
        raise MaterializationError(f"{manifest_path} does not contain a JSON object")

    try:
        return PackageManifest.from_document(document)
    except ValidationError as e:
        raise MaterializationError(f"Invalid {MANIFEST_FILE} in {project_dir}: {e}") from e


def patch_manifest(project_dir: Path, name: str) -> PackageManifest:
    """
    Rewrite the manifest's name field in place.

    Args:
        project_dir: Materialized project directory
        name: New package name

    Returns:
        The patched manifest

    Raises:
        MaterializationError: If the manifest cannot be read or written
    """
    manifest = load_manifest(project_dir)
    manifest.name = name

    manifest_path = project_dir / MANIFEST_FILE
    try:
        manifest_path.write_text(manifest.dumps(), encoding="utf-8")
    except OSError as e:
        raise MaterializationError(f"Could not write {manifest_path}: {e}") from e

    logger.debug("Set %s name to %r", manifest_path, name)
    return manifest


def rename_ignore_file(project_dir: Path) -> bool:
    """
    Rename the shipped ``gitignore`` to ``.gitignore``.

    Returns:
        True if a file was renamed, False if the template had none
    """
    shipped = project_dir / IGNORE_FILE_SHIPPED
    if not shipped.exists():
        return False

    try:
        shipped.rename(project_dir / IGNORE_FILE)
    except OSError as e:
        raise MaterializationError(f"Could not rename {shipped} to {IGNORE_FILE}: {e}") from e

    logger.debug("Renamed %s to %s", shipped, IGNORE_FILE)
    return True


def patch_project(project_dir: Path, name: str) -> PackageManifest:
    """Apply all post-copy patches to a materialized project."""
    manifest = patch_manifest(project_dir, name)
    rename_ignore_file(project_dir)
    return manifest

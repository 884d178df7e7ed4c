"""
services/catalog_service.py – Discovery of Catalog modpack instances.

Each instance lives in its own folder under the Catalog root:

    <catalog_root>/<uuid>/instance.json   – manifest (required)
    <catalog_root>/<uuid>/folder.jpg      – pack icon (optional)

Enumeration never raises. A broken entry must not hide the rest of the
Catalog, so bad manifests are logged and skipped.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from models.catalog_instance import CatalogInstance
from models.mod_loader import parse_mod_loader
from services.exceptions import LoaderParseError, ManifestError

logger = logging.getLogger(__name__)

MANIFEST_NAME: str = "instance.json"
ICON_NAME: str = "folder.jpg"

# Manifest key → CatalogInstance attribute.
_FIELDS = {
    "uuid": "id",
    "name": "display_name",
    "version": "pack_version",
    "mcVersion": "game_version",
}


# ── Public API ───────────────────────────────────────────────────────────────


def enumerate_instances(catalog_root: Path) -> List[CatalogInstance]:
    """
    Return every valid instance under *catalog_root*, in directory order.

    Callers that need a stable order should sort, e.g. by display_name.
    """
    try:
        children = list(catalog_root.iterdir())
    except OSError as exc:
        logger.debug("Cannot list Catalog root '%s': %s", catalog_root, exc)
        return []

    instances: List[CatalogInstance] = []
    for child in children:
        manifest = child / MANIFEST_NAME
        try:
            instances.append(load_instance(manifest))
        except ManifestError as exc:
            logger.debug("Skipping '%s': %s", child, exc)
    return instances


def load_instance(manifest_path: Path) -> CatalogInstance:
    """
    Read and parse a single ``instance.json``.

    Raises
    ------
    ManifestError if the file is missing, unreadable, not a JSON object,
    lacks a required string field, has a uuid that is not the name of its
    own folder, or has an unrecognised modLoader.
    """
    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read {manifest_path}: {exc}") from exc

    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {exc}") from exc

    if not isinstance(doc, dict):
        raise ManifestError(f"{manifest_path} is not a JSON object.")

    values = {}
    for key, attr in list(_FIELDS.items()) + [("modLoader", "loader")]:
        value = doc.get(key)
        if not isinstance(value, str):
            raise ManifestError(f"{manifest_path}: missing or non-string '{key}'.")
        values[attr] = value

    # The id is joined onto Host folders, so it must name exactly the
    # folder holding this manifest.
    uuid = values["id"]
    if uuid in ("", ".", "..") or "/" in uuid or "\\" in uuid:
        raise ManifestError(f"{manifest_path}: uuid {uuid!r} is not a folder name.")
    if uuid != manifest_path.parent.name:
        raise ManifestError(
            f"{manifest_path}: uuid {uuid!r} does not match its folder name."
        )

    try:
        values["loader"] = parse_mod_loader(values["loader"])
    except LoaderParseError as exc:
        raise ManifestError(f"{manifest_path}: {exc}") from exc

    return CatalogInstance(**values)


def instance_dir(catalog_root: Path, instance: CatalogInstance) -> Path:
    """Return the Catalog folder holding *instance*'s game content."""
    return catalog_root / instance.id


def icon_path(catalog_root: Path, instance: CatalogInstance) -> Optional[Path]:
    """Return the pack's ``folder.jpg`` if present, else None."""
    candidate = instance_dir(catalog_root, instance) / ICON_NAME
    return candidate if candidate.is_file() else None

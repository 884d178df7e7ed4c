"""
services/link_service.py – Link a Catalog instance into the Host launcher.

A link is nothing but filesystem state:

    <instance_dir>/<id>/instance.cfg     – Host metadata
    <instance_dir>/<id>/mmc-pack.json    – Host component list
    <instance_dir>/<id>/.minecraft       – directory symlink → <catalog_root>/<id>
    <icon_dir>/<id>.jpg                  – copied pack icon (optional)

There is no link table. is_linked() re-derives the state by reading the
symlink every time, and create_link() / remove_link() re-check it before
touching anything, so a stale caller fails cleanly instead of corrupting
state.

Failure model
-------------
create_link() and remove_link() stop at the first error and do NOT roll
back. A create that fails after the folder was made leaves it behind; the next
create reports AlreadyLinkedError and the user has to clean up by hand.
"""

import logging
import os
import shutil
import sys
from pathlib import Path

from models.catalog_instance import CatalogInstance
from models.host_paths import HostPaths
from services.catalog_service import icon_path
from services.exceptions import (
    AlreadyLinkedError,
    CatalogInstanceMissingError,
    HostPathNotSetError,
    LinkIOError,
    NotLinkedError,
)
from services.host_config_service import (
    ICONS_DIR_KEY,
    INSTANCE_DIR_KEY,
    resolve_host_paths,
)
from services.host_metadata import (
    INSTANCE_CFG_NAME,
    PACK_JSON_NAME,
    render_instance_cfg,
    render_pack_json,
)

logger = logging.getLogger(__name__)

# Name the Host uses for an instance's game directory.
CONTENT_ALIAS_NAME: str = ".minecraft"


# ── Public API ───────────────────────────────────────────────────────────────


def is_linked(host_paths: HostPaths, catalog_root: Path, instance: CatalogInstance) -> bool:
    """
    Return True when the instance's ``.minecraft`` symlink targets exactly
    ``<catalog_root>/<id>``.

    Never raises. A missing folder, a plain directory, or a symlink pointing
    anywhere else all count as not linked.
    """
    if host_paths.instance_dir is None:
        return False

    alias = host_paths.instance_dir / instance.id / CONTENT_ALIAS_NAME
    try:
        target = os.readlink(alias)
    except OSError:
        return False
    return Path(target) == _link_target(catalog_root, instance)


def create_link(host_paths: HostPaths, catalog_root: Path, instance: CatalogInstance) -> Path:
    """
    Make *instance* visible to the Host.

    Metadata is written before the symlink so an interrupted run never leaves
    a symlink without the files the Host needs to show the instance.

    Returns
    -------
    The new Host instance folder.

    Raises
    ------
    HostPathNotSetError          if InstanceDir (or IconsDir, when the pack has
                                 an icon) is missing from the Host config.
    CatalogInstanceMissingError  if ``<catalog_root>/<id>`` is not a directory.
    AlreadyLinkedError           if the Host instance folder already exists.
    LinkIOError                  on any other filesystem error.
    """
    if host_paths.instance_dir is None:
        raise HostPathNotSetError(INSTANCE_DIR_KEY)

    target = _link_target(catalog_root, instance)
    if not target.is_dir():
        raise CatalogInstanceMissingError(target)

    icon = icon_path(catalog_root, instance)
    if icon is not None and host_paths.icon_dir is None:
        raise HostPathNotSetError(ICONS_DIR_KEY)

    folder = host_paths.instance_dir / instance.id
    try:
        folder.mkdir()
    except FileExistsError as exc:
        raise AlreadyLinkedError(folder) from exc
    except OSError as exc:
        raise LinkIOError(f"Cannot create '{folder}': {exc}") from exc

    try:
        (folder / INSTANCE_CFG_NAME).write_text(
            render_instance_cfg(instance, has_icon=icon is not None), encoding="utf-8"
        )
        (folder / PACK_JSON_NAME).write_text(render_pack_json(instance), encoding="utf-8")
        if icon is not None:
            shutil.copyfile(icon, host_paths.icon_dir / f"{instance.id}.jpg")
        os.symlink(target, folder / CONTENT_ALIAS_NAME, target_is_directory=True)
    except OSError as exc:
        logger.warning(
            "Linking '%s' stopped part-way; '%s' needs manual cleanup.", instance.id, folder
        )
        raise LinkIOError(f"Failed to link '{instance.display_name}': {exc}") from exc

    logger.info("Linked '%s' -> '%s'", folder / CONTENT_ALIAS_NAME, target)
    return folder


def remove_link(host_paths: HostPaths, catalog_root: Path, instance: CatalogInstance) -> None:
    """
    Undo create_link().

    The copied icon is left in the Host icon folder.

    Raises
    ------
    HostPathNotSetError if InstanceDir is missing from the Host config.
    NotLinkedError      if the instance is not currently linked; nothing is touched.
    LinkIOError         if the symlink or a metadata file cannot be removed.
    """
    if host_paths.instance_dir is None:
        raise HostPathNotSetError(INSTANCE_DIR_KEY)

    folder = host_paths.instance_dir / instance.id
    if not is_linked(host_paths, catalog_root, instance):
        raise NotLinkedError(folder / CONTENT_ALIAS_NAME)

    try:
        _remove_alias(folder / CONTENT_ALIAS_NAME)
        (folder / PACK_JSON_NAME).unlink()
        (folder / INSTANCE_CFG_NAME).unlink()
    except OSError as exc:
        raise LinkIOError(f"Failed to unlink '{instance.display_name}': {exc}") from exc

    # The link is gone at this point; leftovers only keep the folder alive.
    try:
        folder.rmdir()
    except OSError as exc:
        logger.info("Left '%s' in place: %s", folder, exc)

    logger.info("Unlinked '%s'", folder)


def toggle_link(host_root: Path, catalog_root: Path, instance: CatalogInstance) -> bool:
    """
    Link *instance* if it is unlinked, otherwise unlink it.

    Host paths are resolved afresh on every call. Returns the new link state
    as observed after the operation.
    """
    host_paths = resolve_host_paths(host_root)
    if is_linked(host_paths, catalog_root, instance):
        remove_link(host_paths, catalog_root, instance)
    else:
        create_link(host_paths, catalog_root, instance)
    return is_linked(resolve_host_paths(host_root), catalog_root, instance)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _link_target(catalog_root: Path, instance: CatalogInstance) -> Path:
    # Symlinks resolve relative to their own folder, so the target is absolute.
    return Path(os.path.abspath(catalog_root)) / instance.id


def _remove_alias(alias: Path) -> None:
    if sys.platform == "win32":
        # Directory symlinks on Windows are removed like directories.
        os.rmdir(alias)
    else:
        os.unlink(alias)

"""Shared pytest fixtures: throwaway Host and Catalog folders."""

import json
from pathlib import Path
from typing import Optional

import pytest


def write_manifest(
    catalog_root: Path,
    uuid: str,
    *,
    name: str = "Test Pack",
    mod_loader: str = "1.20.1-forge-47.2.0",
    mc_version: str = "1.20.1",
    icon: bool = False,
    extra: Optional[dict] = None,
) -> Path:
    """Create ``<catalog_root>/<uuid>/instance.json`` and return the folder."""
    folder = catalog_root / uuid
    folder.mkdir(parents=True, exist_ok=True)
    doc = {
        "uuid": uuid,
        "name": name,
        "version": "1.0.0",
        "mcVersion": mc_version,
        "modLoader": mod_loader,
    }
    doc.update(extra or {})
    (folder / "instance.json").write_text(json.dumps(doc), encoding="utf-8")
    if icon:
        (folder / "folder.jpg").write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return folder


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    root = tmp_path / "ftb" / "instances"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def host_root(tmp_path: Path) -> Path:
    """A Prism data folder with InstanceDir=instances and IconsDir=icons."""
    root = tmp_path / "prism"
    (root / "instances").mkdir(parents=True)
    (root / "icons").mkdir()
    (root / "prismlauncher.cfg").write_text(
        "[General]\nInstanceDir=instances\nIconsDir=icons\nLanguage=en_US\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def symlinks_supported(tmp_path: Path) -> None:
    probe_target = tmp_path / "probe-target"
    probe_target.mkdir()
    try:
        (tmp_path / "probe-link").symlink_to(probe_target, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("directory symlinks are not permitted on this platform")


@pytest.fixture
def make_manifest():
    return write_manifest

"""
services/host_metadata.py – Render the two files the Host needs to list an
instance: ``instance.cfg`` and ``mmc-pack.json``.
"""

import json
from typing import Any, Dict

from models.catalog_instance import CatalogInstance
from models.mod_loader import LoaderKind, ModLoader

INSTANCE_CFG_NAME: str = "instance.cfg"
PACK_JSON_NAME: str = "mmc-pack.json"

# Every override is disabled so the Host's global settings apply.
_FIXED_SETTINGS = (
    ("InstanceType", "OneSix"),
    ("JoinServerOnLaunch", "false"),
    ("OverrideCommands", "false"),
    ("OverrideConsole", "false"),
    ("OverrideGameTime", "false"),
    ("OverrideJavaArgs", "false"),
    ("OverrideJavaLocation", "false"),
    ("OverrideMemory", "false"),
    ("OverrideNativeWorkarounds", "false"),
    ("OverrideWindow", "false"),
)


def render_instance_cfg(instance: CatalogInstance, has_icon: bool) -> str:
    """
    Return the ``instance.cfg`` text for *instance*.

    With *has_icon* the icon key is the instance id, matching the
    ``<id>.jpg`` copied into the Host's icon folder.
    """
    lines = [f"{key}={value}" for key, value in _FIXED_SETTINGS]
    lines.append(f"iconKey={instance.id if has_icon else ''}")
    lines.append(f"name={instance.display_name}")
    lines.append("notes=")
    return "\n".join(lines) + "\n"


def build_pack_document(instance: CatalogInstance) -> Dict[str, Any]:
    """Return the ``mmc-pack.json`` document: Minecraft plus one loader."""
    minecraft = {
        "cachedName": "Minecraft",
        "cachedRequires": [],
        "cachedVersion": instance.game_version,
        "important": True,
        "uid": "net.minecraft",
        "version": instance.game_version,
    }
    return {
        "components": [minecraft, loader_component(instance.loader)],
        "formatVersion": 1,
    }


def loader_component(loader: ModLoader) -> Dict[str, Any]:
    if loader.kind is LoaderKind.FABRIC:
        return {
            "cachedName": "Fabric Loader",
            "uid": "net.fabricmc.fabric-loader",
            "version": loader.version,
        }
    if loader.kind is LoaderKind.FORGE:
        return {
            "cachedName": "Forge",
            "uid": "net.minecraftforge",
            "version": loader.version,
        }
    raise ValueError(f"Unhandled loader kind: {loader.kind!r}")


def render_pack_json(instance: CatalogInstance) -> str:
    return json.dumps(build_pack_document(instance), indent=2) + "\n"

"""Tests for the instance.cfg / mmc-pack.json renderers."""

import json

from models.catalog_instance import CatalogInstance
from models.mod_loader import LoaderKind, ModLoader
from services.host_metadata import build_pack_document, render_instance_cfg, render_pack_json


def make_instance(kind: LoaderKind = LoaderKind.FORGE, version: str = "47.2.0") -> CatalogInstance:
    return CatalogInstance(
        id="abc123",
        display_name="Create: Above and Beyond",
        pack_version="1.3",
        game_version="1.20.1",
        loader=ModLoader(kind, version),
    )


def test_instance_cfg_with_icon() -> None:
    text = render_instance_cfg(make_instance(), has_icon=True)
    assert text == (
        "InstanceType=OneSix\n"
        "JoinServerOnLaunch=false\n"
        "OverrideCommands=false\n"
        "OverrideConsole=false\n"
        "OverrideGameTime=false\n"
        "OverrideJavaArgs=false\n"
        "OverrideJavaLocation=false\n"
        "OverrideMemory=false\n"
        "OverrideNativeWorkarounds=false\n"
        "OverrideWindow=false\n"
        "iconKey=abc123\n"
        "name=Create: Above and Beyond\n"
        "notes=\n"
    )


def test_instance_cfg_without_icon_has_empty_key() -> None:
    lines = render_instance_cfg(make_instance(), has_icon=False).splitlines()
    assert "iconKey=" in lines
    assert lines[-2:] == ["name=Create: Above and Beyond", "notes="]


def test_pack_document_forge() -> None:
    doc = build_pack_document(make_instance())
    assert doc["formatVersion"] == 1
    minecraft, loader = doc["components"]
    assert minecraft == {
        "cachedName": "Minecraft",
        "cachedRequires": [],
        "cachedVersion": "1.20.1",
        "important": True,
        "uid": "net.minecraft",
        "version": "1.20.1",
    }
    assert loader == {"cachedName": "Forge", "uid": "net.minecraftforge", "version": "47.2.0"}


def test_pack_document_fabric() -> None:
    doc = build_pack_document(make_instance(LoaderKind.FABRIC, "0.15.7"))
    assert doc["components"][1] == {
        "cachedName": "Fabric Loader",
        "uid": "net.fabricmc.fabric-loader",
        "version": "0.15.7",
    }


def test_rendered_json_parses_back() -> None:
    assert json.loads(render_pack_json(make_instance())) == build_pack_document(make_instance())

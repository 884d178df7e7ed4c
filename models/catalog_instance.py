"""
models/catalog_instance.py – Immutable data model for a single Catalog modpack.
"""

from dataclasses import dataclass

from models.mod_loader import ModLoader


@dataclass(frozen=True)
class CatalogInstance:
    """
    Represents one instance folder in the Catalog.

    Attributes
    ----------
    id           : Stable identifier (the manifest's uuid); also the folder name.
    display_name : Human-readable pack name. Not guaranteed unique.
    pack_version : Modpack release version.
    game_version : Minecraft version the pack targets.
    loader       : Parsed mod loader.
    """

    id: str
    display_name: str
    pack_version: str
    game_version: str
    loader: ModLoader

    def __str__(self) -> str:
        short_id = self.id.split("-", 1)[0]
        return f"{self.display_name} [{short_id}...]"

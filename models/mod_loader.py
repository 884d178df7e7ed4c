"""
models/mod_loader.py – The mod loader bundled with a Catalog instance.

Only Fabric and Forge are recognised. Anything else is a parse failure rather
than a third "unknown" kind, so every consumer branches over exactly two cases.
"""

from dataclasses import dataclass
from enum import Enum

from services.exceptions import MissingLoaderVersionError, UnknownLoaderError


class LoaderKind(Enum):
    FABRIC = "fabric"
    FORGE = "forge"


@dataclass(frozen=True)
class ModLoader:
    """
    A loader kind together with its version string.

    Attributes
    ----------
    kind    : LoaderKind.FABRIC or LoaderKind.FORGE.
    version : Loader version, e.g. "0.15.7" or "47.2.0".
    """

    kind: LoaderKind
    version: str

    def __str__(self) -> str:
        return f"{self.kind.name.title()} {self.version}"


def parse_mod_loader(raw: str) -> ModLoader:
    """
    Parse a Catalog ``modLoader`` string.

    Recognised shapes
    -----------------
      fabric-loader-{mc-version}-{fabric-version}
      {mc-version}-forge-{forge-version}

    Raises
    ------
    UnknownLoaderError        if the string matches neither shape.
    MissingLoaderVersionError if the version segment is empty.
    """
    if raw.startswith("fabric-loader"):
        kind = LoaderKind.FABRIC
    elif "forge" in raw:
        kind = LoaderKind.FORGE
    else:
        raise UnknownLoaderError(raw)

    version = raw.split("-")[-1]
    if not version:
        raise MissingLoaderVersionError(
            f"Couldn't find {kind.value} version in {raw!r}."
        )
    return ModLoader(kind=kind, version=version)

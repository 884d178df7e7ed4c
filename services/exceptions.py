"""
services/exceptions.py – Structured custom exception hierarchy for PackLink.

All service-level errors derive from PackLinkError so callers can catch broadly
or specifically depending on context.
"""

from pathlib import Path


class PackLinkError(Exception):
    """Base class for all PackLink exceptions."""


# ── Catalog side ──────────────────────────────────────────────────────────────


class LoaderParseError(PackLinkError):
    """Raised when a modLoader string cannot be turned into a ModLoader."""


class UnknownLoaderError(LoaderParseError):
    """Raised when the string names neither Fabric nor Forge."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"No mod loader type found in {raw!r}.")


class MissingLoaderVersionError(LoaderParseError):
    """Raised when the loader kind is recognised but no version follows it."""


class ManifestError(PackLinkError):
    """Raised when a single instance.json is missing, unreadable or malformed."""


# ── Host configuration ────────────────────────────────────────────────────────


class ResolveError(PackLinkError):
    """Raised when the Host launcher's folders cannot be resolved."""


class InvalidHostRootError(ResolveError):
    """Raised when the Host root does not exist or is not a directory."""


class HostConfigNotFoundError(ResolveError):
    """Raised when neither prismlauncher.cfg nor multimc.cfg can be read."""


class HostDirectoryMissingError(ResolveError):
    """Raised when InstanceDir / IconsDir points at a non-existent directory."""


# ── Linking ───────────────────────────────────────────────────────────────────


class LinkError(PackLinkError):
    """Raised when a link cannot be created or removed."""


class AlreadyLinkedError(LinkError):
    """
    Raised when the Host instance folder already exists.

    The folder may be a valid link or a stale leftover from an interrupted
    create; either way it is never overwritten.

    Attributes
    ----------
    path : The pre-existing Host instance folder.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Host instance folder already exists: {path}")


class NotLinkedError(LinkError):
    """Raised when removal is requested for an instance that is not linked."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"'{path}' is not a link to the Catalog instance.")


class LinkIOError(LinkError):
    """Raised on any filesystem failure while creating or removing a link."""


class HostPathNotSetError(LinkError):
    """Raised when a Host folder the operation needs was absent from its config."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"The Host configuration does not define {key}.")


class CatalogInstanceMissingError(LinkError):
    """Raised when the Catalog instance folder to link to does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Catalog instance folder not found: {path}")


# ── Application settings ──────────────────────────────────────────────────────


class SettingsError(PackLinkError):
    """Raised when the settings file cannot be written."""

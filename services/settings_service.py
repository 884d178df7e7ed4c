"""
services/settings_service.py – Persisted user settings (Host and Catalog roots).

Settings are stored as a small JSON document:

    {"host_root": "/home/me/.local/share/PrismLauncher",
     "catalog_root": "/home/me/.ftba/instances"}

Loading never fails: a missing or corrupt file falls back to the platform
default locations, and stored folders that have since disappeared are dropped.
"""

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from appdirs import user_data_dir

from services.exceptions import SettingsError

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    host_root: Optional[Path] = None
    catalog_root: Optional[Path] = None


# ── Platform defaults ────────────────────────────────────────────────────────


def default_host_root() -> Optional[Path]:
    """Return the Host launcher's usual data folder if it exists."""
    # Prism keeps its data in the roaming profile on Windows.
    return _existing(Path(user_data_dir("PrismLauncher", False, roaming=True)))


def default_catalog_root() -> Optional[Path]:
    """Return the Catalog app's usual instances folder if it exists."""
    if sys.platform.startswith("linux"):
        base = Path.home() / ".ftba"
    else:
        base = Path(user_data_dir(".ftba", False))
    return _existing(base / "instances")


def _existing(path: Optional[Path]) -> Optional[Path]:
    return path if path is not None and path.is_dir() else None


# ── Public API ───────────────────────────────────────────────────────────────


def load_settings(path: Path) -> AppSettings:
    """
    Read settings from *path*, filling gaps with platform defaults.

    Never raises.
    """
    stored = {}
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(doc, dict):
            stored = doc
    except FileNotFoundError:
        pass
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file '%s': %s", path, exc)

    return AppSettings(
        host_root=_stored_path(stored.get("host_root")) or default_host_root(),
        catalog_root=_stored_path(stored.get("catalog_root")) or default_catalog_root(),
    )


def save_settings(path: Path, settings: AppSettings) -> None:
    """
    Write *settings* to *path*, creating parent folders as needed.

    Raises
    ------
    SettingsError on any filesystem error.
    """
    doc = {
        "host_root": str(settings.host_root) if settings.host_root else None,
        "catalog_root": str(settings.catalog_root) if settings.catalog_root else None,
    }
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot save settings to '{path}': {exc}") from exc
    logger.info("Settings saved to '%s'", path)


def _stored_path(value: object) -> Optional[Path]:
    if not isinstance(value, str) or not value:
        return None
    return _existing(Path(value))

"""
services/host_config_service.py – Locate the Host launcher's instance and icon
folders.

The Host keeps its settings in ``prismlauncher.cfg`` (older MultiMC builds use
``multimc.cfg``) as plain ``key=value`` lines. Only two keys matter here:

  InstanceDir : folder holding one sub-folder per instance
  IconsDir    : folder holding instance icons

Both are relative to the Host root unless they are absolute.

Nothing is cached: the user can point the Host root somewhere else at any
time, so every create / remove / status check calls resolve_host_paths()
again.
"""

from pathlib import Path
from typing import Dict, Optional

from models.host_paths import HostPaths
from services.exceptions import (
    HostConfigNotFoundError,
    HostDirectoryMissingError,
    InvalidHostRootError,
)

CONFIG_NAMES = ("prismlauncher.cfg", "multimc.cfg")

INSTANCE_DIR_KEY: str = "InstanceDir"
ICONS_DIR_KEY: str = "IconsDir"


# ── Public API ───────────────────────────────────────────────────────────────


def resolve_host_paths(host_root: Path) -> HostPaths:
    """
    Read the Host configuration under *host_root* and return its folders.

    Raises
    ------
    InvalidHostRootError      if *host_root* is not an existing directory.
    HostConfigNotFoundError   if no configuration file can be read.
    HostDirectoryMissingError if a configured folder does not exist.
    """
    if not host_root.is_dir():
        raise InvalidHostRootError(f"Invalid Host root: '{host_root}'")

    config_file = find_config_file(host_root)
    if config_file is None:
        raise HostConfigNotFoundError(
            f"No {' or '.join(CONFIG_NAMES)} found in '{host_root}'."
        )

    try:
        text = config_file.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise HostConfigNotFoundError(
            f"Cannot read Host configuration '{config_file}': {exc}"
        ) from exc

    values = parse_config(text)
    return HostPaths(
        root=host_root,
        instance_dir=_configured_dir(host_root, values, INSTANCE_DIR_KEY),
        icon_dir=_configured_dir(host_root, values, ICONS_DIR_KEY),
    )


def find_config_file(host_root: Path) -> Optional[Path]:
    """Return the first existing config file, preferring prismlauncher.cfg."""
    for name in CONFIG_NAMES:
        candidate = host_root / name
        if candidate.is_file():
            return candidate
    return None


def parse_config(text: str) -> Dict[str, str]:
    """
    Parse ``key=value`` lines.

    Lines that do not contain exactly one ``=`` are ignored, which also skips
    INI section headers and blank lines. Later duplicates win.
    """
    values: Dict[str, str] = {}
    for line in text.splitlines():
        if line.count("=") != 1:
            continue
        key, value = line.split("=")
        values[key.strip()] = value.strip()
    return values


# ── Helpers ──────────────────────────────────────────────────────────────────


def _configured_dir(host_root: Path, values: Dict[str, str], key: str) -> Optional[Path]:
    value = values.get(key)
    if not value:
        return None
    path = host_root / value
    if not path.is_dir():
        raise HostDirectoryMissingError(
            f"{key} points at '{path}', which is not an existing directory."
        )
    return path

"""
models/host_paths.py – Resolved Host launcher folders.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class HostPaths:
    """
    Folders read from the Host configuration at one point in time.

    Attributes
    ----------
    root         : Host data root (the folder holding prismlauncher.cfg).
    instance_dir : Where per-instance folders live; None if InstanceDir is unset.
    icon_dir     : Where instance icons live; None if IconsDir is unset.
    """

    root: Path
    instance_dir: Optional[Path] = None
    icon_dir: Optional[Path] = None

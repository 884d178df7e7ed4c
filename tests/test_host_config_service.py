"""Tests for Host configuration resolution."""

from pathlib import Path

import pytest

from services.exceptions import (
    HostConfigNotFoundError,
    HostDirectoryMissingError,
    InvalidHostRootError,
    ResolveError,
)
from services.host_config_service import parse_config, resolve_host_paths


def test_resolves_instance_and_icon_dirs(host_root: Path) -> None:
    paths = resolve_host_paths(host_root)
    assert paths.root == host_root
    assert paths.instance_dir == host_root / "instances"
    assert paths.icon_dir == host_root / "icons"


def test_falls_back_to_multimc_cfg(tmp_path: Path) -> None:
    (tmp_path / "insts").mkdir()
    (tmp_path / "multimc.cfg").write_text("InstanceDir=insts\n", encoding="utf-8")

    paths = resolve_host_paths(tmp_path)

    assert paths.instance_dir == tmp_path / "insts"
    assert paths.icon_dir is None


def test_prism_cfg_wins_over_multimc_cfg(host_root: Path) -> None:
    (host_root / "other").mkdir()
    (host_root / "multimc.cfg").write_text("InstanceDir=other\n", encoding="utf-8")
    assert resolve_host_paths(host_root).instance_dir == host_root / "instances"


def test_absolute_instance_dir_is_kept(tmp_path: Path) -> None:
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    root = tmp_path / "root"
    root.mkdir()
    (root / "prismlauncher.cfg").write_text(f"InstanceDir={elsewhere}\n", encoding="utf-8")

    assert resolve_host_paths(root).instance_dir == elsewhere


def test_missing_keys_leave_paths_unset(tmp_path: Path) -> None:
    (tmp_path / "prismlauncher.cfg").write_text("Language=en_US\n", encoding="utf-8")
    paths = resolve_host_paths(tmp_path)
    assert paths.instance_dir is None
    assert paths.icon_dir is None


def test_invalid_root(tmp_path: Path) -> None:
    with pytest.raises(InvalidHostRootError):
        resolve_host_paths(tmp_path / "nope")

    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("", encoding="utf-8")
    with pytest.raises(InvalidHostRootError):
        resolve_host_paths(not_a_dir)


def test_config_not_found(tmp_path: Path) -> None:
    with pytest.raises(HostConfigNotFoundError):
        resolve_host_paths(tmp_path)


def test_configured_dir_must_exist(tmp_path: Path) -> None:
    (tmp_path / "prismlauncher.cfg").write_text("InstanceDir=missing\n", encoding="utf-8")
    with pytest.raises(HostDirectoryMissingError) as excinfo:
        resolve_host_paths(tmp_path)
    assert isinstance(excinfo.value, ResolveError)


def test_resolution_is_not_cached(host_root: Path) -> None:
    assert resolve_host_paths(host_root).instance_dir == host_root / "instances"

    (host_root / "moved").mkdir()
    (host_root / "prismlauncher.cfg").write_text("InstanceDir=moved\n", encoding="utf-8")

    assert resolve_host_paths(host_root).instance_dir == host_root / "moved"


def test_parse_config_ignores_lines_without_exactly_one_equals() -> None:
    text = (
        "[General]\n"
        "InstanceDir=instances\r\n"
        "JvmArgs=-Dfoo=bar\n"
        "no equals here\n"
        "\n"
        "IconsDir = icons \n"
    )
    assert parse_config(text) == {"InstanceDir": "instances", "IconsDir": "icons"}

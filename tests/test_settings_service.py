"""Tests for persisted application settings."""

import json
import sys
from pathlib import Path

import pytest

from services import settings_service
from services.exceptions import SettingsError
from services.settings_service import AppSettings, load_settings, save_settings


@pytest.fixture(autouse=True)
def no_platform_defaults(monkeypatch) -> None:
    monkeypatch.setattr(settings_service, "default_host_root", lambda: None)
    monkeypatch.setattr(settings_service, "default_catalog_root", lambda: None)


def test_save_then_load(tmp_path: Path) -> None:
    host, catalog = tmp_path / "host", tmp_path / "catalog"
    host.mkdir()
    catalog.mkdir()
    path = tmp_path / "cfg" / "nested" / "settings.json"

    save_settings(path, AppSettings(host_root=host, catalog_root=catalog))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "host_root": str(host),
        "catalog_root": str(catalog),
    }
    assert load_settings(path) == AppSettings(host_root=host, catalog_root=catalog)


def test_missing_file_gives_empty_settings(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "absent.json") == AppSettings()


def test_corrupt_file_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{{{", encoding="utf-8")
    assert load_settings(path) == AppSettings()


def test_vanished_folders_are_dropped(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"host_root": str(tmp_path / "gone"), "catalog_root": 7}), encoding="utf-8"
    )
    assert load_settings(path) == AppSettings()


def test_defaults_fill_gaps(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(settings_service, "default_host_root", lambda: tmp_path)
    assert load_settings(tmp_path / "absent.json").host_root == tmp_path


def test_unset_paths_saved_as_null(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    save_settings(path, AppSettings())
    assert json.loads(path.read_text(encoding="utf-8")) == {"host_root": None, "catalog_root": None}


def test_save_failure_raises_settings_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(SettingsError):
        save_settings(blocker / "settings.json", AppSettings())


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="Linux layout")
def test_default_catalog_root_on_linux(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.undo()
    monkeypatch.setattr(settings_service.Path, "home", classmethod(lambda cls: tmp_path))

    assert settings_service.default_catalog_root() is None
    (tmp_path / ".ftba" / "instances").mkdir(parents=True)
    assert settings_service.default_catalog_root() == tmp_path / ".ftba" / "instances"


def test_default_host_root_uses_user_data_dir(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.undo()
    calls = []

    def fake_user_data_dir(appname, appauthor=None, version=None, roaming=False):
        calls.append((appname, roaming))
        return str(tmp_path / appname)

    monkeypatch.setattr(settings_service, "user_data_dir", fake_user_data_dir)

    assert settings_service.default_host_root() is None
    (tmp_path / "PrismLauncher").mkdir()
    assert settings_service.default_host_root() == tmp_path / "PrismLauncher"
    assert calls[-1] == ("PrismLauncher", True)

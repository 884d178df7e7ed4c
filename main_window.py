"""
main_window.py – PackLink main window.

Layout
------
  ┌──────────────────────────────────────────────────────┐
  │  Host folder     [path………………] [Browse] [Open]      │  ← TOP
  │  Catalog folder  [path………………] [Browse] [Open]      │
  ├───────────────────────────┬──────────────────────────┤
  │                           │  Icon preview            │
  │  Instance list            │  Pack details            │
  │  (QListWidget)            │  Link status             │
  │                           │  [Link] / [Unlink]       │
  ├───────────────────────────┴──────────────────────────┤
  │  Status log (QPlainTextEdit, read-only)              │  ← BOTTOM
  └──────────────────────────────────────────────────────┘

Every action re-reads the filesystem; the window keeps only the current
instance list and the two root paths typed by the user.
"""

from __future__ import annotations

import datetime
import html
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QStandardPaths, Qt, QUrl, Slot
from PySide6.QtGui import QDesktopServices, QFont, QPixmap
from PySide6.QtWidgets import (
    QFileDialog,
    QGridLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from models.catalog_instance import CatalogInstance
from services import catalog_service, link_service, settings_service
from services.exceptions import (
    AlreadyLinkedError,
    CatalogInstanceMissingError,
    HostPathNotSetError,
    LinkError,
    NotLinkedError,
    PackLinkError,
    ResolveError,
    SettingsError,
)
from services.host_config_service import resolve_host_paths
from services.settings_service import AppSettings

# ── Colour palette ─────────────────────────────────────────────────────────────
_BG         = "#0f1117"
_BG2        = "#1a1d27"
_BG3        = "#22263a"
_ACCENT     = "#4f8ef7"
_ACCENT2    = "#7c5af0"
_TEXT       = "#e2e8f0"
_TEXT_DIM   = "#718096"
_SUCCESS    = "#48bb78"
_ERROR      = "#fc8181"
_BORDER     = "#2d3748"

_STYLESHEET = f"""
QMainWindow, QWidget {{
    background-color: {_BG};
    color: {_TEXT};
    font-family: 'Segoe UI', 'Consolas', monospace;
    font-size: 13px;
}}

/* ── Path fields ────────────────────────────────────────────────────────── */
QLineEdit {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 4px;
    padding: 6px 10px;
    color: {_TEXT};
    selection-background-color: {_ACCENT};
}}
QLineEdit:focus {{
    border-color: {_ACCENT};
}}

/* ── Instance list ──────────────────────────────────────────────────────── */
QListWidget#instanceList {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    outline: none;
    padding: 4px;
}}
QListWidget#instanceList::item {{
    padding: 8px 12px;
    border-radius: 4px;
}}
QListWidget#instanceList::item:selected {{
    background-color: {_ACCENT};
    color: white;
}}
QListWidget#instanceList::item:hover {{
    background-color: {_BG3};
}}

/* ── Group boxes ────────────────────────────────────────────────────────── */
QGroupBox {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 8px;
    margin-top: 18px;
    padding: 12px 10px 10px 10px;
    font-weight: bold;
    color: {_TEXT_DIM};
    font-size: 11px;
    text-transform: uppercase;
    letter-spacing: 1px;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 6px;
    left: 10px;
}}

/* ── Buttons ────────────────────────────────────────────────────────────── */
QPushButton {{
    background-color: {_BG3};
    border: 1px solid {_BORDER};
    border-radius: 5px;
    padding: 7px 14px;
    color: {_TEXT};
}}
QPushButton:hover {{
    background-color: {_ACCENT};
    border-color: {_ACCENT};
    color: white;
}}
QPushButton:pressed {{
    background-color: {_ACCENT2};
}}
QPushButton#linkBtn {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
        stop:0 {_ACCENT}, stop:1 {_ACCENT2});
    color: white;
    font-size: 14px;
    font-weight: bold;
    border: none;
    border-radius: 8px;
    padding: 12px 20px;
}}
QPushButton#linkBtn:disabled {{
    background: {_BG3};
    color: {_TEXT_DIM};
}}

/* ── Log area ───────────────────────────────────────────────────────────── */
QPlainTextEdit#logArea {{
    background-color: {_BG};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    padding: 6px;
    font-family: 'Consolas', 'Courier New', monospace;
    font-size: 12px;
    color: {_TEXT_DIM};
}}

/* ── Status bar ─────────────────────────────────────────────────────────── */
QStatusBar {{
    background: {_BG2};
    color: {_TEXT_DIM};
    border-top: 1px solid {_BORDER};
    font-size: 11px;
}}

QSplitter::handle {{
    background-color: {_BORDER};
    width: 2px;
}}
"""

_ICON_SIZE = 128


def settings_file() -> Path:
    """Return the per-user settings.json location."""
    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    return Path(base) / "settings.json"


class MainWindow(QMainWindow):
    """Primary application window."""

    def __init__(self, settings_path: Optional[Path] = None) -> None:
        super().__init__()
        self.setWindowTitle("PackLink  ·  Catalog → Host instance linker")
        self.setMinimumSize(900, 600)
        self.resize(1080, 700)
        self.setStyleSheet(_STYLESHEET)

        # State
        self._settings_path = settings_path or settings_file()
        self._instances: List[CatalogInstance] = []

        self._build_ui()
        self._connect_signals()
        self._load_settings()
        self._reload_instances()

    # ── UI construction ───────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(24, 24, 24, 16)
        root_layout.setSpacing(16)

        # ── Zone A: Folder selection ───────────────────────────────────────
        root_layout.addWidget(self._build_folders())

        # ── Zone B: Instance list + sidebar ────────────────────────────────
        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)
        splitter.setHandleWidth(4)

        self._instance_list = QListWidget()
        self._instance_list.setObjectName("instanceList")
        self._instance_list.setMinimumWidth(480)
        splitter.addWidget(self._instance_list)

        splitter.addWidget(self._build_sidebar())
        splitter.setStretchFactor(0, 7)
        splitter.setStretchFactor(1, 3)
        root_layout.addWidget(splitter, stretch=1)

        # ── Zone C: Log ────────────────────────────────────────────────────
        self._log_area = QPlainTextEdit()
        self._log_area.setObjectName("logArea")
        self._log_area.setReadOnly(True)
        self._log_area.setMaximumBlockCount(500)
        self._log_area.setFixedHeight(140)
        root_layout.addWidget(self._log_area)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _build_folders(self) -> QWidget:
        group = QGroupBox("Launcher Folders")
        grid = QGridLayout(group)
        grid.setHorizontalSpacing(8)

        self._host_path = QLineEdit()
        self._host_path.setPlaceholderText("Prism / MultiMC data folder…")
        self._host_browse = QPushButton("Browse")
        self._host_open = QPushButton("Open")

        self._catalog_path = QLineEdit()
        self._catalog_path.setPlaceholderText("FTB instances folder…")
        self._catalog_browse = QPushButton("Browse")
        self._catalog_open = QPushButton("Open")

        self._save_btn = QPushButton("Save")

        grid.addWidget(QLabel("Host"), 0, 0)
        grid.addWidget(self._host_path, 0, 1)
        grid.addWidget(self._host_browse, 0, 2)
        grid.addWidget(self._host_open, 0, 3)
        grid.addWidget(QLabel("Catalog"), 1, 0)
        grid.addWidget(self._catalog_path, 1, 1)
        grid.addWidget(self._catalog_browse, 1, 2)
        grid.addWidget(self._catalog_open, 1, 3)
        grid.addWidget(self._save_btn, 0, 4, 2, 1)
        return group

    def _build_sidebar(self) -> QWidget:
        w = QWidget()
        w.setFixedWidth(300)
        layout = QVBoxLayout(w)
        layout.setContentsMargins(6, 0, 0, 0)
        layout.setSpacing(10)

        pack_group = QGroupBox("Selected Pack")
        pack_layout = QVBoxLayout(pack_group)
        self._icon_label = QLabel()
        self._icon_label.setFixedSize(_ICON_SIZE, _ICON_SIZE)
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._details_label = QLabel("[none]")
        self._details_label.setWordWrap(True)
        self._linked_label = QLabel()
        self._linked_label.setFont(QFont("Segoe UI", 12, QFont.Bold))
        pack_layout.addWidget(self._icon_label, alignment=Qt.AlignmentFlag.AlignHCenter)
        pack_layout.addWidget(self._details_label)
        pack_layout.addWidget(self._linked_label)
        layout.addWidget(pack_group)

        self._link_btn = QPushButton("Link")
        self._link_btn.setObjectName("linkBtn")
        self._link_btn.setMinimumHeight(48)
        self._link_btn.setEnabled(False)
        layout.addWidget(self._link_btn)

        layout.addStretch()
        return w

    # ── Signal wiring ─────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._host_path.editingFinished.connect(self._on_host_path_edited)
        self._catalog_path.editingFinished.connect(self._reload_instances)
        self._host_browse.clicked.connect(lambda: self._browse(self._host_path))
        self._catalog_browse.clicked.connect(lambda: self._browse(self._catalog_path))
        self._host_open.clicked.connect(lambda: self._open_folder(self._host_path))
        self._catalog_open.clicked.connect(lambda: self._open_folder(self._catalog_path))
        self._save_btn.clicked.connect(self._on_save)
        self._instance_list.currentItemChanged.connect(self._on_instance_selected)
        self._link_btn.clicked.connect(self._on_toggle_link)

    # ── Slots ─────────────────────────────────────────────────────────────────

    @Slot()
    def _reload_instances(self) -> None:
        catalog_root = self._catalog_root()
        self._instances = (
            sorted(catalog_service.enumerate_instances(catalog_root), key=lambda i: i.display_name)
            if catalog_root
            else []
        )
        self._instance_list.clear()
        for instance in self._instances:
            item = QListWidgetItem(str(instance))
            item.setData(Qt.ItemDataRole.UserRole, instance)
            self._instance_list.addItem(item)

        if self._instances:
            self._instance_list.setCurrentRow(0)
        else:
            self._show_instance(None)
        self._set_status(f"{len(self._instances)} packs found.")

    @Slot()
    def _on_host_path_edited(self) -> None:
        self._show_instance(self._selected_instance())

    @Slot()
    def _on_instance_selected(self) -> None:
        self._show_instance(self._selected_instance())

    @Slot()
    def _on_save(self) -> None:
        settings = AppSettings(host_root=self._host_root(), catalog_root=self._catalog_root())
        try:
            settings_service.save_settings(self._settings_path, settings)
        except SettingsError as exc:
            self._report_error(str(exc))
            return
        self._log(f"Settings saved to {self._settings_path}", success=True)

    @Slot()
    def _on_toggle_link(self) -> None:
        instance = self._selected_instance()
        if instance is None:
            self._report_error("Nothing is selected.")
            return

        host_root, catalog_root = self._host_root(), self._catalog_root()
        if host_root is None or catalog_root is None:
            self._report_error("Choose both the Host and the Catalog folder first.")
            return

        try:
            linked = link_service.toggle_link(host_root, catalog_root, instance)
        except AlreadyLinkedError as exc:
            self._report_error(
                f"'{exc.path}' exists but is not a valid link.\n"
                "Manual cleanup required."
            )
        except NotLinkedError as exc:
            self._report_error(f"Not linked:\n{exc}")
        except HostPathNotSetError as exc:
            self._report_error(f"Host configuration incomplete:\n{exc}")
        except CatalogInstanceMissingError as exc:
            self._report_error(f"Catalog folder missing:\n{exc}")
        except ResolveError as exc:
            self._report_error(f"Cannot read Host configuration:\n{exc}")
        except LinkError as exc:
            self._report_error(f"Filesystem error:\n{exc}")
        except PackLinkError as exc:
            self._report_error(f"Error:\n{exc}")
        else:
            verb = "Linked" if linked else "Unlinked"
            self._log(f"{verb}: {instance.display_name}", success=True)
            self._set_status(f"{verb} {instance.display_name}.")
        self._show_instance(instance)

    # ── UI helpers ────────────────────────────────────────────────────────────

    def _load_settings(self) -> None:
        settings = settings_service.load_settings(self._settings_path)
        if settings.host_root:
            self._host_path.setText(str(settings.host_root))
        if settings.catalog_root:
            self._catalog_path.setText(str(settings.catalog_root))

    def _show_instance(self, instance: Optional[CatalogInstance]) -> None:
        self._icon_label.clear()
        if instance is None:
            self._details_label.setText("[none]")
            self._linked_label.clear()
            self._link_btn.setEnabled(False)
            return

        catalog_root = self._catalog_root()
        icon = catalog_service.icon_path(catalog_root, instance) if catalog_root else None
        if icon is not None:
            pixmap = QPixmap(str(icon))
            if not pixmap.isNull():
                self._icon_label.setPixmap(
                    pixmap.scaled(
                        _ICON_SIZE,
                        _ICON_SIZE,
                        Qt.AspectRatioMode.KeepAspectRatio,
                        Qt.TransformationMode.SmoothTransformation,
                    )
                )

        self._details_label.setText(
            f"{instance.display_name}\n"
            f"Pack version: {instance.pack_version}\n"
            f"Minecraft {instance.game_version}  ·  {instance.loader}"
        )

        linked = self._is_linked(instance)
        colour = _SUCCESS if linked else _TEXT_DIM
        self._linked_label.setText("Linked" if linked else "Not linked")
        self._linked_label.setStyleSheet(f"color: {colour};")
        self._link_btn.setText("Unlink" if linked else "Link")
        self._link_btn.setEnabled(True)

    def _is_linked(self, instance: CatalogInstance) -> bool:
        host_root, catalog_root = self._host_root(), self._catalog_root()
        if host_root is None or catalog_root is None:
            return False
        try:
            host_paths = resolve_host_paths(host_root)
        except ResolveError as exc:
            self._set_status(str(exc))
            return False
        return link_service.is_linked(host_paths, catalog_root, instance)

    def _selected_instance(self) -> Optional[CatalogInstance]:
        item = self._instance_list.currentItem()
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def _host_root(self) -> Optional[Path]:
        return _field_path(self._host_path)

    def _catalog_root(self) -> Optional[Path]:
        return _field_path(self._catalog_path)

    def _browse(self, field: QLineEdit) -> None:
        folder = QFileDialog.getExistingDirectory(self, "Select Folder", field.text() or "")
        if folder:
            field.setText(folder)
            field.editingFinished.emit()

    def _open_folder(self, field: QLineEdit) -> None:
        path = _field_path(field)
        if path is not None:
            QDesktopServices.openUrl(QUrl.fromLocalFile(str(path)))

    def _report_error(self, msg: str) -> None:
        self._log(msg, error=True)
        self._set_status("Error – see log.")
        QMessageBox.critical(self, "Error", msg)

    def _set_status(self, msg: str) -> None:
        self._status_bar.showMessage(msg)

    def _log(self, msg: str, *, error: bool = False, success: bool = False) -> None:
        ts = datetime.datetime.now().strftime("%H:%M:%S")
        msg = format_log_message(msg)
        if error:
            line = f'<span style="color:{_ERROR}">[{ts}] ✗  {msg}</span>'
        elif success:
            line = f'<span style="color:{_SUCCESS}">[{ts}] ✓  {msg}</span>'
        else:
            line = f'<span style="color:{_TEXT_DIM}">[{ts}]  {msg}</span>'
        self._log_area.appendHtml(line)
        sb = self._log_area.verticalScrollBar()
        sb.setValue(sb.maximum())


def _field_path(field: QLineEdit) -> Optional[Path]:
    text = field.text().strip()
    return Path(text).expanduser() if text else None


def format_log_message(msg: str) -> str:
    """Escape *msg* for the HTML log area, keeping its line breaks."""
    return html.escape(msg).replace("\n", "<br>")

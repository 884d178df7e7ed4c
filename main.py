"""
main.py – PackLink application entry point.
Configures logging, bootstraps the PySide6 QApplication and launches the main
window.
"""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from main_window import MainWindow


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("PACKLINK_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("PackLink")
    app.setApplicationDisplayName("PackLink – Modpack Linker")
    app.setOrganizationName("PackLink")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

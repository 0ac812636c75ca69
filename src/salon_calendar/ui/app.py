from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette
from ..services import ServiceContext
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    context = ServiceContext()
    app.setApplicationName(context.settings.ui.app_name)
    app.setOrganizationName(context.settings.ui.organization)
    apply_palette(app, AppPalette())

    window = MainWindow(context=context)
    window.show()
    try:
        exit_code = app.exec()
    finally:
        context.close()
    sys.exit(exit_code)

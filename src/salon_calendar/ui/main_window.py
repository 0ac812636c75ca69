from __future__ import annotations

import logging
from datetime import date

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QInputDialog, QLineEdit, QMainWindow, QMessageBox

from ..services import (
    EventForm,
    InvalidTransitionError,
    Notification,
    NotificationLevel,
    ServiceContext,
    SessionState,
)
from ..utils.qt import TaskRunner
from .components.calendar_panel import CalendarPanel
from .components.event_dialog import EventDialog

logger = logging.getLogger(__name__)


class _Bridge(QObject):
    """Re-emits controller callbacks, which may fire on worker threads, on the UI thread."""

    state_changed = pyqtSignal(object)
    notified = pyqtSignal(object)
    login_required = pyqtSignal()
    viewport_changed = pyqtSignal()


class MainWindow(QMainWindow):
    def __init__(self, *, context: ServiceContext) -> None:
        super().__init__()
        self.context = context
        self.controller = context.create_controller()
        self.runner = TaskRunner()

        self.setWindowTitle(f"{context.settings.ui.app_name} - Etkinlik Takvimi")
        self.resize(1200, 800)

        self.calendar_panel = CalendarPanel()
        self.setCentralWidget(self.calendar_panel)

        self.bridge = _Bridge()
        self.bridge.state_changed.connect(self._on_state_changed)
        self.bridge.notified.connect(self._show_notification)
        self.bridge.login_required.connect(self._prompt_login)
        self.bridge.viewport_changed.connect(self._render_items)
        self.controller.subscribe(self.bridge.state_changed.emit)
        context.notifier.subscribe(self.bridge.notified.emit)
        context.auth.on_login_required(self.bridge.login_required.emit)
        context.viewport.subscribe(lambda _viewport: self.bridge.viewport_changed.emit())

        self.calendar_panel.day_clicked.connect(self.compose)
        self.calendar_panel.event_clicked.connect(self.edit)
        self.calendar_panel.refresh_requested.connect(self.refresh)

        self._initialize_ui()

    # ------------------------------------------------------------------ boot

    def _initialize_ui(self) -> None:
        self.calendar_panel.set_loading(True)
        self.runner.submit(self.controller.mount, on_success=self._loaded, on_error=self._handle_error)

    def refresh(self) -> None:
        self.statusBar().showMessage("Etkinlikler yenileniyor...")
        self.runner.submit(self.controller.refresh, on_success=self._loaded, on_error=self._handle_error)

    def _loaded(self, _events) -> None:
        self.statusBar().clearMessage()
        self._render_items()

    def _render_items(self) -> None:
        self.calendar_panel.set_loading(self.controller.is_loading)
        if self.controller.load_error and not self.controller.events:
            self.calendar_panel.set_error(self.controller.load_error)
        self.calendar_panel.set_items(self.controller.calendar_items())

    # ------------------------------------------------------------------ sessions

    def compose(self, day: date) -> None:
        try:
            self.controller.open_day(day)
        except InvalidTransitionError as exc:
            logger.info("Ignoring day click: %s", exc)
            return
        self._run_dialog()

    def edit(self, event_id: str) -> None:
        try:
            self.controller.open_event(event_id)
        except (InvalidTransitionError, KeyError) as exc:
            logger.info("Ignoring event click: %s", exc)
            return
        self._run_dialog()

    def _run_dialog(self) -> None:
        form: EventForm | None = self.controller.form
        if form is None:
            return
        dialog = EventDialog(controller=self.controller, runner=self.runner, on_error=self._handle_error, parent=self)
        result = dialog.exec()
        if result != EventDialog.DialogCode.Accepted and self.controller.state in (
            SessionState.COMPOSING,
            SessionState.EDITING,
        ):
            self.controller.close()
        self._render_items()

    def _on_state_changed(self, state: SessionState) -> None:
        if state is SessionState.VIEWING:
            self._render_items()

    # ------------------------------------------------------------------ feedback

    def _show_notification(self, notification: Notification) -> None:
        self.statusBar().showMessage(notification.message, 5000)
        if notification.level is NotificationLevel.ERROR:
            QMessageBox.warning(self, "Hata", notification.message)

    def _prompt_login(self) -> None:
        token, accepted = QInputDialog.getText(
            self,
            "Giriş",
            "Oturumunuz sona erdi. Erişim anahtarını girin:",
            QLineEdit.EchoMode.Password,
        )
        if accepted and token.strip():
            self.context.auth.sign_in(token)
            self.controller.requires_login = False
            self.refresh()

    def _handle_error(self, exc: Exception) -> None:
        self.statusBar().showMessage(f"Hata: {exc}", 5000)
        QMessageBox.critical(self, "Hata", str(exc))

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self.context.viewport.resize(event.size().width())

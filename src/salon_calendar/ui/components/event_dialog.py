from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QDate
from PyQt6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ...domain import EventType
from ...domain.models import format_time
from ...services import EventForm, InvalidTransitionError, ReconciliationController
from ...utils.qt import TaskRunner

logger = logging.getLogger(__name__)

EVENT_TYPE_LABELS = {
    EventType.WEDDING: "Düğün",
    EventType.ENGAGEMENT: "Nişan",
    EventType.HENNA_NIGHT: "Kına",
}

_TEXT_FIELDS = (
    ("brideName", "Gelin Adı"),
    ("brideSurname", "Gelin Soyadı"),
    ("groomName", "Damat Adı"),
    ("groomSurname", "Damat Soyadı"),
    ("hostedNameSurname", "Sözleşme Sahibi"),
    ("phone", "Telefon"),
    ("eventTimeStart", "Başlangıç Saati"),
    ("eventTimeFinish", "Bitiş Saati"),
)


class EventDialog(QDialog):
    """Form bound to the controller's open session.

    Every edit goes through ``controller.edit`` so the derived title is
    recomputed on each change; submit and delete run on the task runner.
    """

    def __init__(
        self,
        *,
        controller: ReconciliationController,
        runner: TaskRunner,
        on_error: Callable[[Exception], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.runner = runner
        self.on_error = on_error
        form = self._form()
        self.setWindowTitle("Etkinliği Düzenle" if form.is_edit else "Yeni Etkinlik Ekle")
        self.setMinimumWidth(460)

        layout = QVBoxLayout(self)
        self.title_preview = QLabel("")
        self.title_preview.setObjectName("titlePreview")
        layout.addWidget(self.title_preview)

        rows = QFormLayout()
        self._inputs: Dict[str, QWidget] = {}
        self._error_labels: Dict[str, QLabel] = {}

        for field_name, label in _TEXT_FIELDS:
            line = QLineEdit()
            if field_name == "phone":
                line.setInputMask("(999) 999 99 99;_")
            elif field_name in {"eventTimeStart", "eventTimeFinish"}:
                line.setPlaceholderText("SS:DD")
            line.textEdited.connect(lambda text, name=field_name: self._edit(name, text))
            self._add_row(rows, field_name, label, line)

        self.date_input = QDateEdit()
        self.date_input.setCalendarPopup(True)
        self.date_input.setDisplayFormat("dd.MM.yyyy")
        self.date_input.dateChanged.connect(lambda value: self._edit("eventDate", value.toPyDate()))
        self._add_row(rows, "eventDate", "Tarih", self.date_input)

        self.type_box = QComboBox()
        self.type_box.addItem("Seçiniz", None)
        for event_type, label in EVENT_TYPE_LABELS.items():
            self.type_box.addItem(label, int(event_type))
        self.type_box.currentIndexChanged.connect(lambda _index: self._edit("eventType", self.type_box.currentData()))
        self._add_row(rows, "eventType", "Etkinlik Tipi", self.type_box)

        self.guests_input = QSpinBox()
        self.guests_input.setRange(0, 100_000)
        self.guests_input.valueChanged.connect(lambda value: self._edit("numberOfGuests", value))
        self._add_row(rows, "numberOfGuests", "Misafir Sayısı", self.guests_input)

        self.description_input = QTextEdit()
        self.description_input.textChanged.connect(
            lambda: self._edit("description", self.description_input.toPlainText())
        )
        self._add_row(rows, "description", "Açıklama", self.description_input)
        layout.addLayout(rows)

        buttons = QHBoxLayout()
        self.delete_button = QPushButton("Sil")
        self.delete_button.setObjectName("dangerButton")
        self.delete_button.setVisible(form.is_edit)
        self.delete_button.clicked.connect(self._confirm_delete)
        buttons.addWidget(self.delete_button)
        buttons.addStretch(1)
        self.cancel_button = QPushButton("İptal")
        self.cancel_button.clicked.connect(self.reject)
        buttons.addWidget(self.cancel_button)
        self.save_button = QPushButton("Güncelle" if form.is_edit else "Ekle")
        self.save_button.clicked.connect(self._submit)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)

        self._load_values(form)
        self.render_form()

    # ------------------------------------------------------------------ binding

    def _form(self) -> EventForm:
        form = self.controller.form
        if form is None:
            raise RuntimeError("EventDialog opened without an active edit session")
        return form

    def _add_row(self, rows: QFormLayout, field_name: str, label: str, widget: QWidget) -> None:
        error_label = QLabel("")
        error_label.setObjectName("fieldError")
        error_label.setVisible(False)
        container = QWidget()
        column = QVBoxLayout(container)
        column.setContentsMargins(0, 0, 0, 0)
        column.addWidget(widget)
        column.addWidget(error_label)
        rows.addRow(label, container)
        self._inputs[field_name] = widget
        self._error_labels[field_name] = error_label

    def _load_values(self, form: EventForm) -> None:
        for field_name, _label in _TEXT_FIELDS:
            value = form.value(field_name)
            text = format_time(value) if field_name in {"eventTimeStart", "eventTimeFinish"} else (value or "")
            line = self._inputs[field_name]
            line.blockSignals(True)
            line.setText(text)
            line.blockSignals(False)
        event_date = form.value("eventDate")
        if event_date:
            self.date_input.blockSignals(True)
            self.date_input.setDate(QDate(event_date.year, event_date.month, event_date.day))
            self.date_input.blockSignals(False)
        index = self.type_box.findData(form.value("eventType"))
        self.type_box.blockSignals(True)
        self.type_box.setCurrentIndex(max(index, 0))
        self.type_box.blockSignals(False)
        self.guests_input.blockSignals(True)
        self.guests_input.setValue(form.value("numberOfGuests") or 0)
        self.guests_input.blockSignals(False)
        self.description_input.blockSignals(True)
        self.description_input.setPlainText(form.value("description") or "")
        self.description_input.blockSignals(False)

    def _edit(self, field_name: str, value: Any) -> None:
        if self.controller.is_submitting or self.controller.form is None:
            return
        if field_name == "phone" and isinstance(value, str) and not any(char.isdigit() for char in value):
            value = ""
        try:
            form = self.controller.edit(field_name, value)
        except InvalidTransitionError:
            logger.debug("Ignored %s edit outside an open session", field_name)
            return
        self.title_preview.setText(form.title.replace("\n", "  ·  "))

    def render_form(self) -> None:
        form = self.controller.form
        if form is None:
            return
        self.title_preview.setText(form.title.replace("\n", "  ·  "))
        errors = form.errors_by_field()
        for field_name, label in self._error_labels.items():
            message = errors.get(field_name)
            label.setText(message or "")
            label.setVisible(bool(message))
            widget = self._inputs[field_name]
            widget.setProperty("invalid", "true" if message else "false")
            widget.style().unpolish(widget)
            widget.style().polish(widget)

    def set_busy(self, busy: bool) -> None:
        for widget in (*self._inputs.values(), self.save_button, self.delete_button, self.cancel_button):
            widget.setEnabled(not busy)

    # ------------------------------------------------------------------ actions

    def _submit(self) -> None:
        if self.controller.is_submitting:
            return
        self.set_busy(True)
        self.runner.submit(self.controller.submit, on_success=self._finished, on_error=self._failed)

    def _confirm_delete(self) -> None:
        title = self._form().title.replace("\n", " ")
        answer = QMessageBox.question(
            self,
            "Etkinliği Sil",
            f'"{title}" etkinliğini silmek istediğinize emin misiniz?',
        )
        if answer != QMessageBox.StandardButton.Yes:
            return
        self.set_busy(True)
        self.runner.submit(self.controller.delete, on_success=self._finished, on_error=self._failed)

    def _finished(self, succeeded: bool) -> None:
        self.set_busy(False)
        if succeeded or self.controller.form is None:
            self.accept()
            return
        self.render_form()

    def _failed(self, exc: Exception) -> None:
        self.set_busy(False)
        self.on_error(exc)

    def reject(self) -> None:  # noqa: D401
        if self.controller.is_submitting:
            return
        super().reject()

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List

from PyQt6.QtCore import QDate, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QTextCharFormat
from PyQt6.QtWidgets import QCalendarWidget, QLabel, QListWidget, QListWidgetItem, QPushButton, QVBoxLayout, QWidget

from ...api import CalendarItem


def _qdate(day: date) -> QDate:
    return QDate(day.year, day.month, day.day)


class CalendarPanel(QWidget):
    """Month view plus the list of items on the selected day; renders items, never edits them."""

    day_clicked = pyqtSignal(object)
    event_clicked = pyqtSignal(str)
    refresh_requested = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        self.calendar_widget = QCalendarWidget()
        self.calendar_widget.setFirstDayOfWeek(Qt.DayOfWeek.Monday)
        self.calendar_widget.setGridVisible(True)
        self.calendar_widget.selectionChanged.connect(self._show_selected_day)
        self.calendar_widget.activated.connect(self._emit_day_clicked)
        layout.addWidget(self.calendar_widget, stretch=2)

        self.day_label = QLabel("")
        layout.addWidget(self.day_label)

        self.event_list = QListWidget()
        self.event_list.itemActivated.connect(self._emit_event_clicked)
        layout.addWidget(self.event_list, stretch=1)

        self.add_button = QPushButton("+ Yeni Etkinlik")
        self.add_button.clicked.connect(lambda: self.day_clicked.emit(self.selected_day()))
        layout.addWidget(self.add_button)

        refresh_button = QPushButton("Yenile")
        refresh_button.clicked.connect(self.refresh_requested)
        layout.addWidget(refresh_button)

        self._items_by_day: Dict[date, List[CalendarItem]] = {}
        self._show_selected_day()

    def selected_day(self) -> date:
        return self.calendar_widget.selectedDate().toPyDate()

    def set_loading(self, loading: bool) -> None:
        self.status_label.setText("Yükleniyor..." if loading else "")

    def set_error(self, message: str) -> None:
        self.status_label.setText(f"Hata: {message}")

    def set_items(self, items: Iterable[CalendarItem]) -> None:
        for day in self._items_by_day:
            self.calendar_widget.setDateTextFormat(_qdate(day), QTextCharFormat())
        grouped: Dict[date, List[CalendarItem]] = defaultdict(list)
        for item in items:
            grouped[date.fromisoformat(item.date)].append(item)
        self._items_by_day = dict(grouped)
        for day, day_items in self._items_by_day.items():
            fmt = QTextCharFormat()
            fmt.setBackground(QBrush(QColor(day_items[0].background_color)))
            fmt.setForeground(QBrush(QColor(day_items[0].text_color)))
            fmt.setToolTip("\n\n".join(item.title for item in day_items))
            self.calendar_widget.setDateTextFormat(_qdate(day), fmt)
        self._show_selected_day()

    def _show_selected_day(self) -> None:
        day = self.selected_day()
        self.day_label.setText(day.strftime("%d.%m.%Y"))
        self.event_list.clear()
        for item in self._items_by_day.get(day, []):
            entry = QListWidgetItem(item.title.replace("\n", "  ·  "))
            entry.setBackground(QColor(item.background_color))
            entry.setForeground(QColor(item.text_color))
            entry.setData(Qt.ItemDataRole.UserRole, item.id)
            self.event_list.addItem(entry)

    def _emit_day_clicked(self, qdate: QDate) -> None:
        self.day_clicked.emit(qdate.toPyDate())

    def _emit_event_clicked(self, entry: QListWidgetItem) -> None:
        self.event_clicked.emit(entry.data(Qt.ItemDataRole.UserRole))

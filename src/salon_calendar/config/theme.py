from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#f8fafc"
    background_secondary: str = "#ffffff"
    surface: str = "#f1f5f9"
    accent_primary: str = "#4f46e5"
    accent_secondary: str = "#db2777"
    accent_error: str = "#dc2626"
    text_primary: str = "#0f172a"
    text_secondary: str = "#64748b"
    border_subtle: str = "#e2e8f0"
    border_strong: str = "#cbd5e1"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the admin window and the event dialog."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Segoe UI', 'Helvetica Neue', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
            border: none;
            padding: 8px 14px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QPushButton#dangerButton {{
            background-color: {self.accent_error};
        }}
        QLineEdit, QTextEdit, QComboBox, QDateEdit, QTimeEdit, QSpinBox {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 6px;
            padding: 6px 8px;
        }}
        QLineEdit[invalid="true"], QComboBox[invalid="true"] {{
            border-color: {self.accent_error};
        }}
        QLabel#fieldError {{
            color: {self.accent_error};
            font-size: 12px;
        }}
        QLabel#titlePreview {{
            color: {self.text_secondary};
            font-weight: 600;
        }}
        QListView {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_strong};
        }}
        QWidget#calendarPanel {{
            background-color: {self.surface};
        }}
        """

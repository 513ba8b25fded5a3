"""
Світла тема для демо лінійної регресії.

Основні принципи:
    - світлі поверхні, мінімум рамок;
    - фіолетово-синій акцент для дій, червоний — для моделі,
      зелений — для оптимуму;
    - однакові кольори у віджетах Qt і на графіках matplotlib.
"""

from __future__ import annotations
from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPalette
from PyQt6.QtWidgets import (
    QApplication,
    QWidget,
    QTableWidget,
    QHeaderView,
    QPushButton,
    QLabel,
)

MARGIN = 12
SPACING = 10
RADIUS = 6

FONT_FAMILY = "Segoe UI"
FONT_SIZE = 10

@dataclass(frozen=True)
class AppPalette:
    background: str = "#f4f5fb"
    surface: str = "#ffffff"
    surface_alt: str = "#eef0fa"

    text_main: str = "#1f2333"
    text_muted: str = "#6b7186"
    text_inverse: str = "#ffffff"

    accent: str = "#667eea"      # точки даних, кнопки
    accent_alt: str = "#7f93f0"

    model: str = "#ff6b6b"       # лінія y = b, поточна точка
    residual: str = "#ff6b6b80"  # стовпчики залишків
    optimum: str = "#51cf66"     # b*
    practice: str = "#ff922b"    # точки практики
    practice_model: str = "#845ef7"

    border: str = "#d5d9ea"
    border_soft: str = "#e6e8f3"

PALETTE = AppPalette()


# ---------------------------------------------------------------------------
# GLOBAL APP STYLESHEET
# ---------------------------------------------------------------------------

def build_app_stylesheet() -> str:
    p = PALETTE

    return f"""
    QWidget {{
        background-color: {p.background};
        color: {p.text_main};
        font-family: "{FONT_FAMILY}";
        font-size: {FONT_SIZE}pt;
    }}

    QGroupBox {{
        background-color: {p.surface};
        border: 1px solid {p.border_soft};
        border-radius: {RADIUS}px;
        margin-top: 14px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 4px;
        color: {p.accent};
        font-weight: 600;
    }}

    QStatusBar {{
        background-color: {p.surface};
        color: {p.text_muted};
        border-top: 1px solid {p.border};
    }}

    QPushButton {{
        background-color: {p.accent};
        color: {p.text_inverse};
        border-radius: {RADIUS}px;
        padding: 7px 14px;
        border: 1px solid {p.accent};
        font-weight: 600;
    }}
    QPushButton:hover {{
        background-color: {p.accent_alt};
        border-color: {p.accent_alt};
    }}
    QPushButton:disabled {{
        background-color: {p.border};
        border-color: {p.border};
        color: {p.text_muted};
    }}

    QSpinBox, QDoubleSpinBox, QComboBox {{
        background-color: {p.surface};
        border: 1px solid {p.border};
        border-radius: {RADIUS}px;
        padding: 6px 8px;
        color: {p.text_main};
    }}

    QLabel#valueReadout {{
        color: {p.accent};
        font-weight: 700;
        font-size: 12pt;
    }}
    QLabel#formulaBox {{
        background-color: {p.surface_alt};
        border-radius: {RADIUS}px;
        padding: 8px;
        font-family: "Consolas", monospace;
    }}

    QTableWidget {{
        background-color: {p.surface};
        border: 1px solid {p.border};
        border-radius: {RADIUS}px;
        gridline-color: {p.border};
        alternate-background-color: {p.surface_alt};
        selection-background-color: {p.accent};
        selection-color: {p.text_inverse};
    }}
    QHeaderView::section {{
        background-color: {p.surface_alt};
        color: {p.text_main};
        padding: 6px;
        border: none;
        border-right: 1px solid {p.border};
        font-weight: 600;
    }}

    QTabWidget::pane {{
        border: 1px solid {p.border};
        border-radius: {RADIUS}px;
        padding: 4px;
        background: {p.surface};
    }}
    QTabBar::tab {{
        padding: 6px 10px;
        border: 1px solid {p.border};
        border-bottom: none;
        background: {p.surface_alt};
        border-top-left-radius: {RADIUS}px;
        border-top-right-radius: {RADIUS}px;
        color: {p.text_muted};
    }}
    QTabBar::tab:selected {{
        background: {p.surface};
        color: {p.text_main};
        border-color: {p.accent};
    }}
    """


def apply_app_style(app: QApplication) -> None:
    p = app.palette()

    p.setColor(QPalette.ColorRole.Window, QColor(PALETTE.background))
    p.setColor(QPalette.ColorRole.Base, QColor(PALETTE.surface))
    p.setColor(QPalette.ColorRole.Text, QColor(PALETTE.text_main))
    p.setColor(QPalette.ColorRole.Button, QColor(PALETTE.accent))

    app.setPalette(p)
    app.setFont(QFont(FONT_FAMILY, FONT_SIZE))
    app.setStyleSheet(build_app_stylesheet())


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------

def apply_table_style(table: QTableWidget):
    table.verticalHeader().setVisible(False)
    table.setAlternatingRowColors(True)
    table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
    table.horizontalHeader().setHighlightSections(False)
    table.horizontalHeader().setDefaultAlignment(
        Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
    )

def apply_button_secondary(btn: QPushButton):
    p = PALETTE
    btn.setStyleSheet(f"""
        QPushButton {{
            background-color: {p.surface_alt};
            color: {p.text_main};
            border-radius: {RADIUS}px;
            padding: 7px 14px;
            border: 1px solid {p.border};
        }}
        QPushButton:hover {{
            border-color: {p.accent};
        }}
    """)

def apply_label_muted(lbl: QLabel):
    lbl.setStyleSheet(f"color: {PALETTE.text_muted};")

def apply_card_style(widget: QWidget):
    widget.setStyleSheet(f"""
        QWidget#{widget.objectName()} {{
            background-color: {PALETTE.surface};
            border-radius: {RADIUS}px;
            border: 1px solid {PALETTE.border};
        }}
    """)

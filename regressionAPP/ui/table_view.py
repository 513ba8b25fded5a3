"""
table_view.py

Таблиця ітерацій градієнтного спуску.

Функціонал:
    - відображає послідовність HistoryEntry;
    - колонки:
        k, b, MSE(b), dMSE/db;
    - хелпери:
        clear_table()
        add_entry(entry)
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from regressionAPP.core.history import HistoryEntry
from .styles import MARGIN, SPACING, apply_table_style, PALETTE


def make_item(text: Any, align: Qt.AlignmentFlag) -> QTableWidgetItem:
    it = QTableWidgetItem(str(text))
    it.setFlags(it.flags() & ~Qt.ItemFlag.ItemIsEditable)
    it.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
    return it


class HistoryTableWidget(QWidget):
    """
    Обгортка над QTableWidget для історії спуску.

    Колонки:
        0: k        – номер ітерації
        1: b        – значення b ДО кроку
        2: MSE(b)
        3: dMSE/db  – градієнт у точці b
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        header_row = QHBoxLayout()
        header_row.setContentsMargins(0, 0, 0, 0)
        header_row.setSpacing(SPACING)

        title = QLabel("Історія ітерацій", self)
        title.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)

        subtitle = QLabel("k, b, MSE(b) та градієнт до кроку", self)
        subtitle.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        subtitle.setStyleSheet(f"color: {PALETTE.text_muted}; font-size: 9pt;")

        header_row.addWidget(title)
        header_row.addStretch(1)
        header_row.addWidget(subtitle)
        root.addLayout(header_row)

        self.table = QTableWidget(self)
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["k", "b", "MSE(b)", "dMSE/db"])
        apply_table_style(self.table)

        h_header = self.table.horizontalHeader()
        h_header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)

        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setDefaultSectionSize(22)

        root.addWidget(self.table)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def clear_table(self) -> None:
        self.table.setRowCount(0)

    def add_entry(self, entry: HistoryEntry) -> None:
        row = self.table.rowCount()
        self.table.insertRow(row)

        right = Qt.AlignmentFlag.AlignRight
        self.table.setItem(row, 0, make_item(entry.iteration, Qt.AlignmentFlag.AlignHCenter))
        self.table.setItem(row, 1, make_item(f"{entry.b:.4f}", right))
        self.table.setItem(row, 2, make_item(f"{entry.mse:.4f}", right))
        self.table.setItem(row, 3, make_item(f"{entry.gradient:.4f}", right))

        # прокрутити до останнього рядка
        self.table.scrollToItem(self.table.item(row, 0))

    def row_count(self) -> int:
        return self.table.rowCount()

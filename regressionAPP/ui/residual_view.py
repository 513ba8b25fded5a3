"""
residual_view.py

Таблиця залишків для поточного b та "жива" формула MSE.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QLabel,
    QTableWidget,
    QAbstractItemView,
)

from regressionAPP.core.dataset import Dataset
from regressionAPP.core.metrics import mse
from regressionAPP.core.residuals import mse_formula_lines, residual_rows
from .styles import MARGIN, SPACING, apply_table_style, PALETTE
from .table_view import make_item


class ResidualViewWidget(QWidget):
    """
    Колонки:
        x, y, ŷ = b, y − b, (y − b)²
    Останній рядок — MSE.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        root.addWidget(QLabel("Залишки для поточного b", self))

        self.table = QTableWidget(self)
        self.table.setColumnCount(5)
        self.table.setHorizontalHeaderLabels(["x", "y", "ŷ = b", "y − b", "(y − b)²"])
        apply_table_style(self.table)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setDefaultSectionSize(22)
        root.addWidget(self.table)

        self.formula = QLabel("", self)
        self.formula.setObjectName("formulaBox")
        self.formula.setTextFormat(Qt.TextFormat.PlainText)
        self.formula.setWordWrap(True)
        root.addWidget(self.formula)

    def update_view(self, dataset: Dataset, b: float) -> None:
        rows = residual_rows(dataset, b)
        self.table.clearSpans()
        self.table.setRowCount(len(rows) + 1)

        right = Qt.AlignmentFlag.AlignRight
        for idx, row in enumerate(rows):
            residual_item = make_item(f"{row.residual:.4f}", right)
            color = PALETTE.optimum if row.residual > 0 else PALETTE.model
            residual_item.setForeground(QBrush(QColor(color)))

            self.table.setItem(idx, 0, make_item(f"{row.x:.2f}", right))
            self.table.setItem(idx, 1, make_item(f"{row.y:.2f}", right))
            self.table.setItem(idx, 2, make_item(f"{row.prediction:.2f}", right))
            self.table.setItem(idx, 3, residual_item)
            self.table.setItem(idx, 4, make_item(f"{row.squared_error:.4f}", right))

        summary = len(rows)
        self.table.setSpan(summary, 0, 1, 4)
        label = make_item("Середньоквадратична помилка (MSE):", right)
        bold = QFont()
        bold.setBold(True)
        label.setFont(bold)
        value = make_item(f"{mse(dataset, b):.4f}", right)
        value.setFont(bold)
        self.table.setItem(summary, 0, label)
        self.table.setItem(summary, 4, value)

        self.formula.setText("\n".join(mse_formula_lines(dataset, b)))

"""
ui/dialogs.py

Стандартні діалоги для GUI-застосунку:

    - show_error     – повідомлення про помилку
    - show_about     – вікно "Про програму"
    - show_summary   – діалог зі зведеною таблицею порівняння learning rate
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QMessageBox,
    QDialog,
    QVBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QDialogButtonBox,
    QHeaderView,
)

from regressionAPP.core.results_summary import (
    BEHAVIOUR_CONVERGING,
    BEHAVIOUR_DIVERGING,
    BEHAVIOUR_OSCILLATING,
    ResultsSummary,
)
from .styles import MARGIN, SPACING, apply_label_muted, apply_table_style


# ---------------------------------------------------------------------------
# Простi діалоги: помилка / about
# ---------------------------------------------------------------------------


def show_error(parent: Optional[QWidget], message: str, title: str = "Помилка") -> None:
    dlg = QMessageBox(parent)
    dlg.setIcon(QMessageBox.Icon.Critical)
    dlg.setWindowTitle(title)
    dlg.setText(message)
    dlg.setStandardButtons(QMessageBox.StandardButton.Ok)
    dlg.exec()


def show_about(parent: Optional[QWidget]) -> None:
    dlg = QMessageBox(parent)
    dlg.setIcon(QMessageBox.Icon.Information)
    dlg.setWindowTitle("Про програму")
    dlg.setTextFormat(Qt.TextFormat.RichText)
    dlg.setText(
        "<b>Лінійна регресія як мінімізація</b><br/>"
        "Модель y = b, функція втрат MSE(b) та градієнтний спуск "
        "з анімацією кожного кроку."
    )
    dlg.setStandardButtons(QMessageBox.StandardButton.Ok)
    dlg.exec()


def humanize_behaviour(code: Optional[str]) -> str:
    """
    Перетворити машинний код характеру спуску на людське пояснення.
    """
    if not code:
        return "Невідомо"

    mapping = {
        BEHAVIOUR_CONVERGING: "Збігається до b*",
        BEHAVIOUR_OSCILLATING: "Перестрибує через b*, але збігається",
        BEHAVIOUR_DIVERGING: "Не збігається",
    }
    return mapping.get(code, f"Інше ({code})")


# ---------------------------------------------------------------------------
# Діалог зі зведеною таблицею ResultsSummary
# ---------------------------------------------------------------------------


class SummaryDialog(QDialog):
    """
    Результати спуску з однаковим стартовим b для кількох α.
    """

    def __init__(self, parent: Optional[QWidget], summary: ResultsSummary) -> None:
        super().__init__(parent)
        self.summary = summary

        self.setWindowTitle("Порівняння learning rate")
        self.setModal(True)
        self.resize(760, 360)

        self._build_ui()
        self._populate()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        self.label_title = QLabel(
            "Той самий старт та кількість ітерацій, різні α", self
        )
        self.label_title.setWordWrap(True)

        self.table = QTableWidget(self)
        self.table.setColumnCount(6)
        self.table.setHorizontalHeaderLabels(
            ["α", "b₀", "b після спуску", "MSE", "|b − b*|", "Характер"]
        )
        apply_table_style(self.table)

        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        header.setStretchLastSection(True)

        self.label_best = QLabel("", self)
        apply_label_muted(self.label_best)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok,
            orientation=Qt.Orientation.Horizontal,
            parent=self,
        )
        buttons.accepted.connect(self.accept)

        layout.addWidget(self.label_title)
        layout.addWidget(self.table)
        layout.addWidget(self.label_best)
        layout.addWidget(buttons)

    def _populate(self) -> None:
        rows: list[dict[str, Any]] = self.summary.as_rows()
        self.table.setRowCount(len(rows))

        def _item(val: Any) -> QTableWidgetItem:
            it = QTableWidgetItem(str(val))
            it.setFlags(it.flags() & ~Qt.ItemFlag.ItemIsEditable)
            return it

        for row_idx, row in enumerate(rows):
            self.table.setItem(row_idx, 0, _item(f"{row['learning_rate']:g}"))
            self.table.setItem(row_idx, 1, _item(f"{row['start_b']:.4f}"))
            self.table.setItem(row_idx, 2, _item(f"{row['final_b']:.6f}"))
            self.table.setItem(row_idx, 3, _item(f"{row['final_mse']:.6f}"))
            self.table.setItem(row_idx, 4, _item(f"{row['distance']:.3e}"))
            self.table.setItem(row_idx, 5, _item(humanize_behaviour(row["behaviour"])))

        best = self.summary.best_by_distance()
        if best is not None:
            self.label_best.setText(
                f"Найближче до b* = {best.optimal_b:.4f}: α = {best.learning_rate:g}"
            )


def show_summary(parent: Optional[QWidget], summary: ResultsSummary) -> None:
    dlg = SummaryDialog(parent, summary)
    dlg.exec()

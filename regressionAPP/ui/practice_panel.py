"""
practice_panel.py

Вкладка "Практика": випадковий набір точок, власний повзунок b
та кнопка, що показує правильну відповідь b* = mean(y).
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QComboBox,
)

from regressionAPP.core.dataset import (
    DIFFICULTY_LABELS,
    Dataset,
    generate_practice_dataset,
)
from regressionAPP.core.history import INITIAL_B
from regressionAPP.core.metrics import mse, optimal_b
from regressionAPP.log_config import get_logger
from .control_panel import SLIDER_SCALE, slider_to_b
from .plot_view import DataPlot
from .styles import MARGIN, SPACING, PALETTE, apply_button_secondary

logger = get_logger(__name__)

PRACTICE_B_MIN = -2.0
PRACTICE_B_MAX = 20.0


class PracticePanel(QWidget):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__(parent)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.dataset: Dataset = generate_practice_dataset("medium", self.rng)
        self._build_ui()
        self._connect_signals()
        self._reset_view()

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        intro = QLabel(
            "Підберіть b, що мінімізує MSE, а потім перевірте себе.", self
        )
        intro.setWordWrap(True)
        root.addWidget(intro)

        top_row = QHBoxLayout()
        top_row.setSpacing(SPACING)

        self.combo_difficulty = QComboBox(self)
        for key, label in DIFFICULTY_LABELS.items():
            self.combo_difficulty.addItem(label, key)
        self.combo_difficulty.setCurrentIndex(list(DIFFICULTY_LABELS).index("medium"))

        self.button_new = QPushButton("Новий набір", self)
        self.button_reveal = QPushButton("Показати розв'язок", self)
        apply_button_secondary(self.button_reveal)

        top_row.addWidget(QLabel("Складність:", self))
        top_row.addWidget(self.combo_difficulty)
        top_row.addWidget(self.button_new)
        top_row.addWidget(self.button_reveal)
        top_row.addStretch(1)
        root.addLayout(top_row)

        self.plot = DataPlot(
            self,
            point_color=PALETTE.practice,
            model_color=PALETTE.practice_model,
            show_residuals=False,
            title="Практика: дані та модель y = b",
        )
        root.addWidget(self.plot, stretch=1)

        self.slider_b = QSlider(Qt.Orientation.Horizontal, self)
        self.slider_b.setRange(int(PRACTICE_B_MIN * SLIDER_SCALE), int(PRACTICE_B_MAX * SLIDER_SCALE))
        root.addWidget(self.slider_b)

        readout = QHBoxLayout()
        readout.setSpacing(SPACING)
        self.label_b = QLabel("", self)
        self.label_b.setObjectName("valueReadout")
        self.label_mse = QLabel("", self)
        self.label_mse.setObjectName("valueReadout")
        self.label_optimal = QLabel("", self)
        self.label_optimal.setStyleSheet(f"color: {PALETTE.optimum}; font-weight: 700;")
        readout.addWidget(QLabel("b =", self))
        readout.addWidget(self.label_b)
        readout.addSpacing(SPACING * 2)
        readout.addWidget(QLabel("MSE(b) =", self))
        readout.addWidget(self.label_mse)
        readout.addStretch(1)
        readout.addWidget(self.label_optimal)
        root.addLayout(readout)

    def _connect_signals(self) -> None:
        self.slider_b.valueChanged.connect(self._on_slider_changed)
        self.button_new.clicked.connect(self.new_dataset)
        self.button_reveal.clicked.connect(self.reveal_solution)

    # ------------------------------------------------------------------
    # Дії
    # ------------------------------------------------------------------

    def current_b(self) -> float:
        return slider_to_b(self.slider_b.value())

    def new_dataset(self) -> None:
        difficulty = self.combo_difficulty.currentData() or "medium"
        self.dataset = generate_practice_dataset(difficulty, self.rng)
        logger.info("Новий набір для практики (%s): %d точок", difficulty, len(self.dataset))
        self._reset_view()

    def reveal_solution(self) -> None:
        b_star = optimal_b(self.dataset)
        self.slider_b.setValue(self._to_slider(b_star))
        self.label_optimal.setText(f"Оптимальне b* = {b_star:.2f}")
        self.label_optimal.setVisible(True)

    def _reset_view(self) -> None:
        self.label_optimal.setVisible(False)
        self.plot.set_dataset(self.dataset, INITIAL_B)
        if self.slider_b.value() == self._to_slider(INITIAL_B):
            self._update_readout(INITIAL_B)
        else:
            self.slider_b.setValue(self._to_slider(INITIAL_B))

    def _on_slider_changed(self, value: int) -> None:
        self._update_readout(slider_to_b(value))

    def _update_readout(self, b: float) -> None:
        self.label_b.setText(f"{b:.2f}")
        self.label_mse.setText(f"{mse(self.dataset, b):.4f}")
        self.plot.update_b(b)

    @staticmethod
    def _to_slider(b: float) -> int:
        clamped = min(max(b, PRACTICE_B_MIN), PRACTICE_B_MAX)
        return int(round(clamped * SLIDER_SCALE))

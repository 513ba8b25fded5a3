"""
control_panel.py

Панель керування градієнтним спуском:
    - повзунок b та показники b / MSE(b);
    - learning rate α (обмежено GUI до [0.001, 1.0]);
    - кількість ітерацій;
    - кнопки: Крок, Запуск, Стоп, Випадкове b, Порівняти α.

Видає назовні:
    - сигнал bChanged(float)                    – користувач рухає повзунок
    - сигнал stepRequested(DescentConfig)
    - сигнал runRequested(DescentConfig)
    - сигнал compareRequested(DescentConfig)
    - сигнал randomizeRequested()
    - сигнал stopRequested()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QSlider,
    QSpinBox,
    QDoubleSpinBox,
)

from regressionAPP.core.history import ControllerMode, INITIAL_B
from regressionAPP.core.metrics import B_MAX, B_MIN
from .styles import MARGIN, SPACING, apply_button_secondary, apply_label_muted

# Повзунок QSlider цілочисельний: 1 поділка = 0.01
SLIDER_SCALE = 100

LEARNING_RATE_MIN = 0.001
LEARNING_RATE_MAX = 1.0
DEFAULT_LEARNING_RATE = 0.1

ITERATIONS_MIN = 1
ITERATIONS_MAX = 200
DEFAULT_ITERATIONS = 15


# ---------------------------------------------------------------------------
# Конфігурація кроку / запуску
# ---------------------------------------------------------------------------

@dataclass
class DescentConfig:
    learning_rate: float
    iterations: int


def b_to_slider(b: float) -> int:
    clamped = min(max(b, B_MIN), B_MAX)
    return int(round(clamped * SLIDER_SCALE))


def slider_to_b(value: int) -> float:
    return value / SLIDER_SCALE


# ---------------------------------------------------------------------------
# Віджет панелі керування
# ---------------------------------------------------------------------------

class ControlPanelWidget(QWidget):
    """
    Ліва панель керування спуском.
    """

    bChanged = pyqtSignal(float)
    stepRequested = pyqtSignal(DescentConfig)
    runRequested = pyqtSignal(DescentConfig)
    compareRequested = pyqtSignal(DescentConfig)
    randomizeRequested = pyqtSignal()
    stopRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._updating_slider = False
        self._build_ui()
        self._connect_signals()
        self.set_mode(ControllerMode.IDLE)

    # ------------------------------------------------------------------
    # Побудова UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self.setObjectName("controlPanel")

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        main_layout.setSpacing(SPACING)

        # ------------------------------------------------------------------
        # Блок 1. Параметр b
        # ------------------------------------------------------------------
        self.model_group = QGroupBox("Модель y = b", self)
        model_layout = QVBoxLayout(self.model_group)
        model_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        model_layout.setSpacing(SPACING)

        self.slider_b = QSlider(Qt.Orientation.Horizontal, self.model_group)
        self.slider_b.setRange(int(B_MIN * SLIDER_SCALE), int(B_MAX * SLIDER_SCALE))
        self.slider_b.setSingleStep(1)
        self.slider_b.setPageStep(50)
        self.slider_b.setValue(b_to_slider(INITIAL_B))

        readout_row = QHBoxLayout()
        readout_row.setSpacing(SPACING)
        self.label_b = QLabel("", self.model_group)
        self.label_b.setObjectName("valueReadout")
        self.label_mse = QLabel("", self.model_group)
        self.label_mse.setObjectName("valueReadout")
        readout_row.addWidget(QLabel("b =", self.model_group))
        readout_row.addWidget(self.label_b)
        readout_row.addStretch(1)
        readout_row.addWidget(QLabel("MSE(b) =", self.model_group))
        readout_row.addWidget(self.label_mse)

        model_layout.addWidget(self.slider_b)
        model_layout.addLayout(readout_row)

        main_layout.addWidget(self.model_group)

        # ------------------------------------------------------------------
        # Блок 2. Параметри спуску
        # ------------------------------------------------------------------
        self.params_group = QGroupBox("Градієнтний спуск", self)
        params_layout = QVBoxLayout(self.params_group)
        params_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        params_layout.setSpacing(SPACING)

        params_row = QHBoxLayout()
        params_row.setSpacing(SPACING)

        self.input_learning_rate = QDoubleSpinBox(self.params_group)
        self.input_learning_rate.setRange(LEARNING_RATE_MIN, LEARNING_RATE_MAX)
        self.input_learning_rate.setDecimals(3)
        self.input_learning_rate.setSingleStep(0.01)
        self.input_learning_rate.setValue(DEFAULT_LEARNING_RATE)

        self.input_iterations = QSpinBox(self.params_group)
        self.input_iterations.setRange(ITERATIONS_MIN, ITERATIONS_MAX)
        self.input_iterations.setValue(DEFAULT_ITERATIONS)

        params_row.addWidget(QLabel("α:", self.params_group))
        params_row.addWidget(self.input_learning_rate)
        params_row.addSpacing(SPACING * 2)
        params_row.addWidget(QLabel("ітерацій:", self.params_group))
        params_row.addWidget(self.input_iterations)
        params_row.addStretch(1)

        hint = QLabel(
            "α > 0.5 дає перестрибування через мінімум, α = 1 — розбіжність.",
            self.params_group,
        )
        hint.setWordWrap(True)
        apply_label_muted(hint)

        params_layout.addLayout(params_row)
        params_layout.addWidget(hint)

        main_layout.addWidget(self.params_group)

        # ------------------------------------------------------------------
        # Кнопки
        # ------------------------------------------------------------------
        actions_row = QHBoxLayout()
        actions_row.setSpacing(SPACING)

        self.button_step = QPushButton("Крок", self)
        self.button_run = QPushButton("Запуск", self)
        self.button_stop = QPushButton("Стоп", self)
        actions_row.addWidget(self.button_step)
        actions_row.addWidget(self.button_run)
        actions_row.addWidget(self.button_stop)

        extra_row = QHBoxLayout()
        extra_row.setSpacing(SPACING)

        self.button_randomize = QPushButton("Випадкове b", self)
        self.button_compare = QPushButton("Порівняти α", self)
        apply_button_secondary(self.button_randomize)
        apply_button_secondary(self.button_compare)
        extra_row.addWidget(self.button_randomize)
        extra_row.addWidget(self.button_compare)
        extra_row.addStretch(1)

        main_layout.addLayout(actions_row)
        main_layout.addLayout(extra_row)
        main_layout.addStretch(1)

    # ------------------------------------------------------------------
    # Сигнали
    # ------------------------------------------------------------------

    def _connect_signals(self) -> None:
        self.slider_b.valueChanged.connect(self._on_slider_changed)
        self.button_step.clicked.connect(lambda: self.stepRequested.emit(self.build_config()))
        self.button_run.clicked.connect(lambda: self.runRequested.emit(self.build_config()))
        self.button_compare.clicked.connect(
            lambda: self.compareRequested.emit(self.build_config())
        )
        self.button_randomize.clicked.connect(self.randomizeRequested.emit)
        self.button_stop.clicked.connect(self.stopRequested.emit)

    def _on_slider_changed(self, value: int) -> None:
        # програмне оновлення (тік анімації) не є введенням користувача
        if self._updating_slider:
            return
        self.bChanged.emit(slider_to_b(value))

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def build_config(self) -> DescentConfig:
        return DescentConfig(
            learning_rate=float(self.input_learning_rate.value()),
            iterations=int(self.input_iterations.value()),
        )

    def show_b(self, b: float, mse_value: float) -> None:
        """Показати b та MSE(b); повзунок обмежується діапазоном [B_MIN, B_MAX]."""
        self._updating_slider = True
        try:
            self.slider_b.setValue(b_to_slider(b))
        finally:
            self._updating_slider = False
        self.label_b.setText(f"{b:.2f}")
        self.label_mse.setText(f"{mse_value:.4f}")

    def set_mode(self, mode: ControllerMode) -> None:
        idle = mode is ControllerMode.IDLE
        self.slider_b.setEnabled(idle)
        self.button_step.setEnabled(idle)
        self.button_run.setEnabled(idle)
        self.button_randomize.setEnabled(idle)
        self.button_compare.setEnabled(idle)
        self.button_stop.setEnabled(not idle)

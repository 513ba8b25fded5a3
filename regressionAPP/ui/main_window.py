"""
Головне вікно демо "Лінійна регресія як мінімізація":
    - вкладка "Градієнтний спуск": зліва панель керування, справа графіки
      над таблицями (історія ітерацій та залишки);
    - вкладка "Практика";
    - вкладка "Перевірка розуміння".

MainWindow реалізує інтерфейс DisplaySink з core.controller:
    show_b / add_history_entry / clear_history / set_mode.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStatusBar,
    QSplitter,
    QTabWidget,
)

from regressionAPP.core.dataset import Dataset
from regressionAPP.core.history import ControllerMode, HistoryEntry
from .control_panel import ControlPanelWidget
from .table_view import HistoryTableWidget
from .residual_view import ResidualViewWidget
from .plot_view import PlotView
from .practice_panel import PracticePanel
from .concept_panel import ConceptPanel
from .dialogs import show_about
from .styles import MARGIN, SPACING

MODE_MESSAGES = {
    ControllerMode.IDLE: "Готово",
    ControllerMode.ANIMATING: "Крок спуску…",
    ControllerMode.RUNNING: "Виконується спуск…",
}


class MainWindow(QMainWindow):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__(parent)

        self.setWindowTitle("Лінійна регресія як мінімізація (y = b)")
        self.resize(1400, 880)

        self.dataset: Optional[Dataset] = None
        self._rng = rng

        self._create_actions()
        self._create_menu()
        self._create_status_bar()
        self._create_content()
        self._connect_signals()

    # ----------------------------------------------------------------------
    # Menu + actions
    # ----------------------------------------------------------------------
    def _create_actions(self) -> None:
        self.action_exit = QAction("Вихід", self, shortcut="Ctrl+Q")
        self.action_about = QAction("Про програму", self)

    def _create_menu(self) -> None:
        menu = self.menuBar()
        menu.addMenu("Файл").addAction(self.action_exit)
        menu.addMenu("Довідка").addAction(self.action_about)

    def _create_status_bar(self) -> None:
        status = QStatusBar(self)
        self.setStatusBar(status)
        status.showMessage("Готово")

    # ----------------------------------------------------------------------
    # CONTENT LAYOUT
    # ----------------------------------------------------------------------
    def _create_content(self) -> None:
        self.tabs = QTabWidget(self)
        self.setCentralWidget(self.tabs)

        self.tabs.addTab(self._build_descent_tab(), "Градієнтний спуск")

        self.practice_panel = PracticePanel(self.tabs, rng=self._rng)
        self.tabs.addTab(self.practice_panel, "Практика")

        self.concept_panel = ConceptPanel(self.tabs)
        self.tabs.addTab(self.concept_panel, "Перевірка розуміння")

    def _build_descent_tab(self) -> QWidget:
        tab = QWidget(self)
        root = QHBoxLayout(tab)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        left = QWidget(tab)
        left.setMinimumWidth(360)
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)
        self.control_panel = ControlPanelWidget(left)
        left_layout.addWidget(self.control_panel)
        left_layout.addStretch()

        splitter = QSplitter(Qt.Orientation.Vertical, tab)
        splitter.setHandleWidth(6)

        self.plot_view = PlotView(splitter)
        splitter.addWidget(self.plot_view)

        bottom = QWidget(splitter)
        bottom_layout = QHBoxLayout(bottom)
        bottom_layout.setContentsMargins(0, 0, 0, 0)
        bottom_layout.setSpacing(SPACING)
        self.history_table = HistoryTableWidget(bottom)
        self.residual_view = ResidualViewWidget(bottom)
        bottom_layout.addWidget(self.history_table, stretch=1)
        bottom_layout.addWidget(self.residual_view, stretch=1)

        splitter.addWidget(bottom)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        root.addWidget(left, stretch=2)
        root.addWidget(splitter, stretch=5)
        return tab

    def _connect_signals(self) -> None:
        self.action_exit.triggered.connect(self.close)
        self.action_about.triggered.connect(lambda: show_about(self))

    # ------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------
    def set_dataset(self, dataset: Dataset, b: float) -> None:
        self.dataset = dataset
        self.plot_view.set_dataset(dataset, b)
        self.residual_view.update_view(dataset, b)

    # ------------------------------------------------------------------
    # DisplaySink
    # ------------------------------------------------------------------
    def show_b(self, b: float, mse: float) -> None:
        self.control_panel.show_b(b, mse)
        self.plot_view.update_b(b, mse)
        if self.dataset is not None:
            self.residual_view.update_view(self.dataset, b)

    def add_history_entry(self, entry: HistoryEntry) -> None:
        self.history_table.add_entry(entry)
        self.plot_view.add_trail_entry(entry)

    def clear_history(self) -> None:
        self.history_table.clear_table()
        self.plot_view.clear_trail()

    def set_mode(self, mode: ControllerMode) -> None:
        self.control_panel.set_mode(mode)
        self.statusBar().showMessage(MODE_MESSAGES[mode])

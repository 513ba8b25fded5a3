"""
app.py

Контролер GUI-застосунку "Лінійна регресія як мінімізація".

Зв'язує:
    - ui.MainWindow (PyQt6) — він же DisplaySink;
    - core.controller.DescentController (крок / запуск / випадкове b);
    - core.animator.TrajectoryAnimator з ui.qt_scheduler.QtScheduler;
    - core.results_summary (порівняння кількох learning rate).

Функціонал:
    - реагує на сигнали ControlPanelWidget;
    - перевіряє DescentConfig перед викликом core;
    - відхилені дії (контролер зайнятий) показує в статус-барі;
    - після завершення запуску показує підсумок у статус-барі.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import numpy as np
from PyQt6.QtWidgets import QApplication

from regressionAPP.core.animator import AnimationParameters, Scheduler, TrajectoryAnimator
from regressionAPP.core.controller import DescentController
from regressionAPP.core.dataset import Dataset, main_dataset
from regressionAPP.core.engine import STOPPED_CANCELLED, DescentRunResult, GradientDescentEngine
from regressionAPP.core.history import OptimizerState
from regressionAPP.core.results_summary import compare_learning_rates
from regressionAPP.log_config import get_logger, setup_logging
from regressionAPP.ui.control_panel import (
    DescentConfig,
    ITERATIONS_MAX,
    ITERATIONS_MIN,
    LEARNING_RATE_MAX,
    LEARNING_RATE_MIN,
)
from regressionAPP.ui.dialogs import show_error, show_summary
from regressionAPP.ui.main_window import MainWindow
from regressionAPP.ui.qt_scheduler import QtScheduler
from regressionAPP.ui.styles import apply_app_style

logger = get_logger(__name__)


class DescentAppController:
    """
    Схема:
        ControlPanel --[DescentConfig]--> DescentAppController
        DescentAppController -> DescentController.step_once / run
        DescentController -> TrajectoryAnimator -> MainWindow.show_b (кожен тік)
    """

    def __init__(
        self,
        window: MainWindow,
        dataset: Optional[Dataset] = None,
        scheduler: Optional[Scheduler] = None,
        params: Optional[AnimationParameters] = None,
        rng: Optional[np.random.Generator] = None,
        engine: Optional[GradientDescentEngine] = None,
    ) -> None:
        self.window = window
        self.engine = engine if engine is not None else GradientDescentEngine()
        self.last_result: Optional[DescentRunResult] = None

        animator = TrajectoryAnimator(scheduler if scheduler is not None else QtScheduler())
        self.controller = DescentController(
            dataset=dataset if dataset is not None else main_dataset(),
            animator=animator,
            state=OptimizerState(),
            sink=window,
            params=params,
            rng=rng,
        )

        self.window.set_dataset(self.controller.dataset, self.controller.state.current_b)
        self.controller.refresh()

        panel = self.window.control_panel
        panel.bChanged.connect(self.on_b_changed)
        panel.stepRequested.connect(self.on_step_requested)
        panel.runRequested.connect(self.on_run_requested)
        panel.compareRequested.connect(self.on_compare_requested)
        panel.randomizeRequested.connect(self.on_randomize_requested)
        panel.stopRequested.connect(self.on_stop_requested)

    # ------------------------------------------------------------------
    # Валідація вхідних даних
    # ------------------------------------------------------------------

    def _validate_config(self, cfg: DescentConfig) -> bool:
        """
        Діапазони вже обмежені спінбоксами, але конфіг може прийти й не з GUI.
        Якщо щось не так, показує діалог помилки та повертає False.
        """
        if not (LEARNING_RATE_MIN <= cfg.learning_rate <= LEARNING_RATE_MAX):
            show_error(
                self.window,
                f"Learning rate має бути в межах [{LEARNING_RATE_MIN}, {LEARNING_RATE_MAX}].",
                title="Некоректне значення α",
            )
            self.window.statusBar().showMessage("Помилка: некоректне значення α")
            return False

        if not (ITERATIONS_MIN <= cfg.iterations <= ITERATIONS_MAX):
            show_error(
                self.window,
                f"Кількість ітерацій має бути в межах [{ITERATIONS_MIN}, {ITERATIONS_MAX}].",
                title="Некоректна кількість ітерацій",
            )
            self.window.statusBar().showMessage("Помилка: некоректна кількість ітерацій")
            return False

        return True

    def _report_rejected(self, action: str) -> None:
        self.window.statusBar().showMessage(
            f"{action}: дочекайтеся завершення анімації або натисніть «Стоп»"
        )

    # ------------------------------------------------------------------
    # Обробники сигналів
    # ------------------------------------------------------------------

    def on_b_changed(self, b: float) -> None:
        if not self.controller.set_b(b):
            # повернути повзунок до фактичного стану
            self.window.show_b(self.controller.state.current_b, self.controller.current_mse())

    def on_randomize_requested(self) -> None:
        if not self.controller.randomize():
            self._report_rejected("Випадкове b")

    def on_step_requested(self, cfg: DescentConfig) -> None:
        if not self._validate_config(cfg):
            return
        if not self.controller.step_once(cfg.learning_rate, on_done=self._on_step_done):
            self._report_rejected("Крок")

    def on_run_requested(self, cfg: DescentConfig) -> None:
        if not self._validate_config(cfg):
            return
        if not self.controller.run(cfg.learning_rate, cfg.iterations, on_done=self._on_run_done):
            self._report_rejected("Запуск")

    def on_stop_requested(self) -> None:
        self.controller.cancel()

    def on_compare_requested(self, cfg: DescentConfig) -> None:
        if not self._validate_config(cfg):
            return
        if not self.controller.state.is_idle:
            self._report_rejected("Порівняння")
            return

        start_b = self.controller.state.current_b
        try:
            summary = compare_learning_rates(
                self.controller.dataset,
                start_b,
                cfg.iterations,
                engine=self.engine,
            )
        except ValueError as exc:
            logger.exception("Порівняння learning rate завершилось помилкою")
            show_error(self.window, str(exc), title="Помилка порівняння")
            self.window.statusBar().showMessage(f"Помилка порівняння: {exc}")
            return

        show_summary(self.window, summary)

    # ------------------------------------------------------------------
    # Завершення кроку / запуску
    # ------------------------------------------------------------------

    def _on_step_done(self, state: OptimizerState) -> None:
        last = state.history[-1]
        self.window.statusBar().showMessage(
            f"Крок {last.iteration}: b = {state.current_b:.4f}, "
            f"MSE = {self.controller.current_mse():.4f}, градієнт був {last.gradient:.4f}"
        )

    def _on_run_done(self, result: DescentRunResult) -> None:
        self.last_result = result
        prefix = "Зупинено" if result.stopped_by == STOPPED_CANCELLED else "Готово"
        self.window.statusBar().showMessage(
            f"{prefix}: ітерацій {result.n_iter}, b = {result.final_b:.6f}, "
            f"MSE = {result.final_mse:.6f}, b* = {result.optimal_b:.4f}"
        )


# ---------------------------------------------------------------------------
# Точка входу
# ---------------------------------------------------------------------------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="regression-demo",
        description="Лінійна регресія як мінімізація: y = b та градієнтний спуск",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Рівень логування (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Файл логів (для DEBUG/INFO)",
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Дублювати логи в stderr",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file, console=args.log_console)

    app = QApplication(sys.argv[:1])
    apply_app_style(app)

    window = MainWindow()

    # Контролер прив'язується до сигналів вікна
    _controller = DescentAppController(window)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

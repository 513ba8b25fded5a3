"""
engine.py

Синхронний (без анімації) двигун градієнтного спуску для моделі y = b.

Функціонал:
    - виконує рівно N кроків b_{k+1} = b_k - α * MSE'(b_k);
    - формує трасу ітерацій (HistoryEntry) — ту саму, що й анімований
      DescentController;
    - підтримує callback на кожній ітерації;
    - використовується для порівняння кількох learning rate
      (core.results_summary) без очікування анімацій.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .dataset import Dataset
from .gradient_step import gradient_step
from .history import HistoryEntry
from .metrics import mse, optimal_b
from ..log_config import get_logger

logger = get_logger(__name__)

STOPPED_MAX_ITER = "max_iter"
STOPPED_CANCELLED = "cancelled"


@dataclass
class DescentRunResult:
    """
    Підсумок одного запуску спуску.

    Атрибути:
        learning_rate - використаний крок α
        start_b       - початкове значення b
        final_b       - значення b після останнього кроку
        final_mse     - MSE(final_b)
        optimal_b     - аналітичний мінімум b* = mean(y)
        history       - записи ітерацій (знімки ДО кроку)
        n_iter        - кількість виконаних ітерацій
        stopped_by    - "max_iter" або "cancelled"
    """
    learning_rate: float
    start_b: float
    final_b: float
    final_mse: float
    optimal_b: float
    history: List[HistoryEntry]
    n_iter: int
    stopped_by: str

    @property
    def start_distance(self) -> float:
        return abs(self.start_b - self.optimal_b)

    @property
    def final_distance(self) -> float:
        return abs(self.final_b - self.optimal_b)


HistoryCallback = Callable[[HistoryEntry], None]


class GradientDescentEngine:
    """
    Двигун, що виконує фіксовану кількість ітерацій без ранньої зупинки.

    Налаштування за замовчуванням (можуть бути переозначені у run()):
        iterations : кількість ітерацій (default: 15)
    """

    def __init__(self, iterations: int = 15) -> None:
        self.iterations_default = iterations

    def run(
        self,
        dataset: Dataset,
        start_b: float,
        learning_rate: float,
        iterations: Optional[int] = None,
        callback: Optional[HistoryCallback] = None,
    ) -> DescentRunResult:
        iterations = iterations if iterations is not None else self.iterations_default
        if iterations < 1:
            raise ValueError(f"Кількість ітерацій має бути >= 1, отримано {iterations}")

        history: List[HistoryEntry] = []
        b = float(start_b)

        for k in range(iterations):
            step = gradient_step(dataset, b, learning_rate)
            entry = HistoryEntry(iteration=k, b=b, mse=step.mse, gradient=step.gradient)
            history.append(entry)
            if callback is not None:
                callback(entry)
            b = step.new_b

        result = DescentRunResult(
            learning_rate=learning_rate,
            start_b=float(start_b),
            final_b=b,
            final_mse=mse(dataset, b),
            optimal_b=optimal_b(dataset),
            history=history,
            n_iter=len(history),
            stopped_by=STOPPED_MAX_ITER,
        )
        logger.debug(
            "engine run: lr=%g, b0=%g -> b=%g за %d ітерацій",
            learning_rate, start_b, b, result.n_iter,
        )
        return result


__all__ = [
    "STOPPED_MAX_ITER",
    "STOPPED_CANCELLED",
    "DescentRunResult",
    "GradientDescentEngine",
]

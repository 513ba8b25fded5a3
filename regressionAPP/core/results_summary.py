"""
results_summary.py

Зведена таблиця запусків спуску з різними learning rate
для одного набору даних та однакового стартового b.

Працює поверх DescentRunResult:
    - learning_rate, start_b, final_b, final_mse, optimal_b, history
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .dataset import Dataset
from .engine import DescentRunResult, GradientDescentEngine

# Варіанти α для порівняння (у межах повзунка GUI [0.001, 1.0])
COMPARISON_LEARNING_RATES: Sequence[float] = (0.05, 0.2, 0.5, 0.9, 1.0)

BEHAVIOUR_CONVERGING = "converging"
BEHAVIOUR_OSCILLATING = "oscillating"
BEHAVIOUR_DIVERGING = "diverging"


def classify(run: DescentRunResult) -> str:
    """
    Характер спуску:
        - diverging   : b не наблизилось до b* (|b_N - b*| >= |b_0 - b*|);
        - oscillating : градієнт змінював знак (перестрибування через мінімум);
        - converging  : інакше.
    """
    if run.final_distance >= run.start_distance and run.start_distance > 0.0:
        return BEHAVIOUR_DIVERGING

    gradients = [entry.gradient for entry in run.history]
    for prev, cur in zip(gradients, gradients[1:]):
        if prev * cur < 0.0:
            return BEHAVIOUR_OSCILLATING

    return BEHAVIOUR_CONVERGING


@dataclass
class ResultsSummary:
    """
    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(engine.run(dataset, -7.0, 0.2))
        summary.add_run(engine.run(dataset, -7.0, 0.9))
        rows = summary.as_rows()  # для GUI
    """
    runs: List[DescentRunResult] = field(default_factory=list)

    def add_run(self, run: DescentRunResult) -> None:
        self.runs.append(run)

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Поля рядка:
            learning_rate, start_b, final_b, final_mse,
            distance (|b_N - b*|), n_iter, behaviour
        """
        rows: List[Dict[str, Any]] = []
        for run in self.runs:
            rows.append(
                {
                    "learning_rate": float(run.learning_rate),
                    "start_b": float(run.start_b),
                    "final_b": float(run.final_b),
                    "final_mse": float(run.final_mse),
                    "distance": float(run.final_distance),
                    "n_iter": int(run.n_iter),
                    "behaviour": classify(run),
                }
            )
        return rows

    def best_by_distance(self) -> Optional[DescentRunResult]:
        """Запуск, що закінчився найближче до b*. None, якщо запусків немає."""
        if not self.runs:
            return None
        return min(self.runs, key=lambda run: run.final_distance)


def compare_learning_rates(
    dataset: Dataset,
    start_b: float,
    iterations: int,
    learning_rates: Sequence[float] = COMPARISON_LEARNING_RATES,
    engine: Optional[GradientDescentEngine] = None,
) -> ResultsSummary:
    engine = engine if engine is not None else GradientDescentEngine()
    summary = ResultsSummary()
    for lr in learning_rates:
        summary.add_run(engine.run(dataset, start_b, lr, iterations=iterations))
    return summary


__all__ = [
    "COMPARISON_LEARNING_RATES",
    "BEHAVIOUR_CONVERGING",
    "BEHAVIOUR_OSCILLATING",
    "BEHAVIOUR_DIVERGING",
    "classify",
    "ResultsSummary",
    "compare_learning_rates",
]

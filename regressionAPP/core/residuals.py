"""
residuals.py

Пояснювальні дані для поточного b:
    - рядки таблиці залишків (x, y, ŷ = b, y - b, (y - b)²);
    - "живу" формулу MSE у трьох рядках (символьно, з підстановкою, значення);
    - відрізки залишків для графіка даних.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .dataset import Dataset
from .metrics import mse


@dataclass(frozen=True)
class ResidualRow:
    x: float
    y: float
    prediction: float
    residual: float
    squared_error: float


def residual_rows(dataset: Dataset, b: float) -> List[ResidualRow]:
    rows: List[ResidualRow] = []
    for p in dataset.points:
        residual = p.y - b
        rows.append(
            ResidualRow(
                x=p.x,
                y=p.y,
                prediction=b,
                residual=residual,
                squared_error=residual * residual,
            )
        )
    return rows


def mse_formula_lines(dataset: Dataset, b: float) -> Tuple[str, str, str]:
    """
    Три рядки формули, наприклад для {(2, 2.5), (7, 6.5)} та b = 3:

        MSE(b) = 1/2 * [ (y1 - b)^2 + (y2 - b)^2 ]
        = 1/2 * [ (2.50 - 3.00)^2 + (6.50 - 3.00)^2 ]
        = 6.2500
    """
    n = len(dataset)
    symbolic = " + ".join(f"(y{i + 1} - b)^2" for i in range(n))
    numeric = " + ".join(f"({p.y:.2f} - {b:.2f})^2" for p in dataset.points)
    return (
        f"MSE(b) = 1/{n} * [ {symbolic} ]",
        f"= 1/{n} * [ {numeric} ]",
        f"= {mse(dataset, b):.4f}",
    )


def residual_segments(
    dataset: Dataset, b: float
) -> List[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """Вертикальні відрізки від кожної точки до лінії y = b."""
    return [((p.x, p.y), (p.x, b)) for p in dataset.points]


__all__ = [
    "ResidualRow",
    "residual_rows",
    "mse_formula_lines",
    "residual_segments",
]

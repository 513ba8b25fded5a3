"""
metrics.py

Функція втрат моделі y = b та її похідна.

    MSE(b)    = (1/n) * Σ (y_i - b)²
    MSE'(b)   = -(2/n) * Σ (y_i - b)
    b*        = mean(y_i)            — єдиний корінь MSE'(b)

Функції чисті та не перевіряють вхід: непорожність гарантує Dataset.
Також тут хелпери для побудови графіків (діапазон b, крива MSE, лінія моделі).
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .dataset import Dataset

ArrayLike = np.ndarray

B_MIN = -10.0
B_MAX = 10.0


# ---------------------------------------------------------------------------
# Метрики
# ---------------------------------------------------------------------------

def mse(dataset: Dataset, b: float) -> float:
    """MSE(b) = (1/n) * Σ (y_i - b)²"""
    residuals = dataset.ys - b
    return float(np.sum(residuals * residuals) / len(dataset))


def mse_derivative(dataset: Dataset, b: float) -> float:
    """dMSE/db = -(2/n) * Σ (y_i - b)"""
    residuals = dataset.ys - b
    return float(-(2.0 / len(dataset)) * np.sum(residuals))


def optimal_b(dataset: Dataset) -> float:
    """b* = середнє значення y_i."""
    return float(np.sum(dataset.ys) / len(dataset))


# ---------------------------------------------------------------------------
# Дані для графіків
# ---------------------------------------------------------------------------

def b_range(lo: float = B_MIN, hi: float = B_MAX, steps: int = 50) -> ArrayLike:
    """steps + 1 рівномірно розподілених значень b на [lo, hi]."""
    return np.linspace(lo, hi, steps + 1)


def mse_curve(dataset: Dataset, bs: ArrayLike) -> ArrayLike:
    """Векторизована MSE(b) для масиву значень b."""
    bs = np.asarray(bs, dtype=float)
    residuals = dataset.ys[np.newaxis, :] - bs[:, np.newaxis]
    return np.mean(residuals * residuals, axis=1)


def model_line(dataset: Dataset, b: float) -> List[Tuple[float, float]]:
    """Дві точки горизонтальної лінії y = b з відступом 1 по x."""
    xs = dataset.xs
    return [(float(xs.min()) - 1.0, b), (float(xs.max()) + 1.0, b)]


__all__ = [
    "B_MIN",
    "B_MAX",
    "mse",
    "mse_derivative",
    "optimal_b",
    "b_range",
    "mse_curve",
    "model_line",
]

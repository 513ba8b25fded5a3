"""
gradient_step.py

Один крок градієнтного спуску для моделі y = b.

Ідея:
    b_{k+1} = b_k - α * MSE'(b_k)

Крок α (learning rate) НЕ обмежується: при α поза (0, ~1] спуск
осцилює або розбігається, і саме це застосунок має показувати.
Критерію зупинки немає: кількість ітерацій задає викликач.
"""

from __future__ import annotations

from dataclasses import dataclass

from .dataset import Dataset
from .metrics import mse, mse_derivative


@dataclass(frozen=True)
class GradientStep:
    """
    Результат одного кроку.

    Атрибути:
        new_b    - нове значення параметра b_{k+1}
        gradient - MSE'(b_k), обчислена в поточній точці
        mse      - MSE(b_k), значення в поточній точці
    """
    new_b: float
    gradient: float
    mse: float


def gradient_step(dataset: Dataset, current_b: float, learning_rate: float) -> GradientStep:
    gradient = mse_derivative(dataset, current_b)
    return GradientStep(
        new_b=current_b - learning_rate * gradient,
        gradient=gradient,
        mse=mse(dataset, current_b),
    )


__all__ = [
    "GradientStep",
    "gradient_step",
]

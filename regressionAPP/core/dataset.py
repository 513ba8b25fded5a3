"""
dataset.py

Набори точок для моделі y = b.

Формат:
    - DataPoint(x, y)      — одна точка;
    - Dataset(points)      — незмінний, непорожній набір точок;
    - main_dataset()       — фіксований демонстраційний набір {(2, 2.5), (7, 6.5)};
    - generate_practice_dataset(difficulty, rng) — випадковий набір для
      вкладки "Практика" (easy | medium | hard).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np


class EmptyDatasetError(ValueError):
    """Спроба створити набір без жодної точки (MSE не визначена)."""


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


@dataclass(frozen=True)
class Dataset:
    """
    Незмінний набір точок.

    Інваріант: n >= 1 та всі координати скінченні. Перевіряється
    при створенні, тому метрики в core.metrics можуть довіряти входу.
    """
    points: Tuple[DataPoint, ...]

    def __post_init__(self) -> None:
        if len(self.points) == 0:
            raise EmptyDatasetError("Набір даних повинен містити хоча б одну точку.")
        for p in self.points:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise ValueError(f"Некоректна точка (NaN/∞): {p}")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "Dataset":
        return cls(tuple(DataPoint(float(x), float(y)) for x, y in pairs))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def xs(self) -> np.ndarray:
        return np.array([p.x for p in self.points], dtype=float)

    @property
    def ys(self) -> np.ndarray:
        return np.array([p.y for p in self.points], dtype=float)


# ---------------------------------------------------------------------------
# Демонстраційний набір
# ---------------------------------------------------------------------------

MAIN_POINTS: Tuple[Tuple[float, float], ...] = ((2.0, 2.5), (7.0, 6.5))


def main_dataset() -> Dataset:
    return Dataset.from_pairs(MAIN_POINTS)


# ---------------------------------------------------------------------------
# Генератор наборів для практики
# ---------------------------------------------------------------------------

# (мін. кількість точок, макс. кількість точок)
DIFFICULTY_POINT_COUNTS = {
    "easy": (2, 2),
    "medium": (3, 4),
    "hard": (5, 8),
}

DIFFICULTY_LABELS = {
    "easy": "Легкий",
    "medium": "Середній",
    "hard": "Складний",
}

Y_RANGE = (1.0, 10.0)
OUTLIER_RANGE = (12.0, 20.0)
OUTLIER_PROBABILITY = 0.2


def generate_practice_dataset(
    difficulty: str = "medium",
    rng: Optional[np.random.Generator] = None,
) -> Dataset:
    """
    Згенерувати випадковий набір для практики.

    x = 1, 2, ..., n; y ~ U[1, 10).
    Для "hard" остання точка з імовірністю 0.2 стає викидом y ~ U[12, 20).
    """
    if difficulty not in DIFFICULTY_POINT_COUNTS:
        raise ValueError(f"Невідомий рівень складності: {difficulty!r}")

    rng = rng if rng is not None else np.random.default_rng()
    count_min, count_max = DIFFICULTY_POINT_COUNTS[difficulty]
    n_points = int(rng.integers(count_min, count_max + 1))

    pairs = []
    for i in range(n_points):
        y = float(rng.uniform(*Y_RANGE))
        is_last = i == n_points - 1
        if difficulty == "hard" and is_last and rng.random() < OUTLIER_PROBABILITY:
            y = float(rng.uniform(*OUTLIER_RANGE))
        pairs.append((float(i + 1), y))

    return Dataset.from_pairs(pairs)


__all__ = [
    "EmptyDatasetError",
    "DataPoint",
    "Dataset",
    "MAIN_POINTS",
    "main_dataset",
    "DIFFICULTY_POINT_COUNTS",
    "DIFFICULTY_LABELS",
    "generate_practice_dataset",
]

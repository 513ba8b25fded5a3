"""
history.py

Структури даних стану спуску. Використовуються і контролером, і GUI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

INITIAL_B = 3.0


@dataclass(frozen=True)
class HistoryEntry:
    """
    Знімок однієї ітерації, зроблений ДО кроку.

    Атрибути:
        iteration - номер ітерації (0, 1, 2, ...)
        b         - значення b_k, з якого робився крок
        mse       - MSE(b_k)
        gradient  - MSE'(b_k)
    """
    iteration: int
    b: float
    mse: float
    gradient: float


class ControllerMode(Enum):
    IDLE = "idle"
    ANIMATING = "animating"  # один крок "Крок"
    RUNNING = "running"      # багатокроковий запуск


@dataclass
class OptimizerState:
    """
    Поточний стан спуску.

    history лише доповнюється (по одному запису на ітерацію) і
    очищається на старті запуску та при "Випадковому b".
    mode змінює лише DescentController.
    """
    current_b: float = INITIAL_B
    history: List[HistoryEntry] = field(default_factory=list)
    mode: ControllerMode = ControllerMode.IDLE

    @property
    def is_running(self) -> bool:
        return self.mode is ControllerMode.RUNNING

    @property
    def is_idle(self) -> bool:
        return self.mode is ControllerMode.IDLE


__all__ = [
    "INITIAL_B",
    "HistoryEntry",
    "ControllerMode",
    "OptimizerState",
]

"""
concepts.py

Питання для перевірки розуміння (вкладка "Перевірка розуміння").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ConceptQuestion:
    question: str
    answer: str


CONCEPT_QUESTIONS: Tuple[ConceptQuestion, ...] = (
    ConceptQuestion(
        question=(
            "Чому оптимальний зсув b* у моделі y = b дорівнює середньому "
            "значенню y?"
        ),
        answer=(
            "Мінімум MSE вимагає, щоб похідна dMSE/db дорівнювала нулю. "
            "Для y = b маємо dMSE/db = -(2/n) Σ(y_i - b). Прирівнявши її до нуля, "
            "отримуємо b* = (1/n) Σ y_i, тобто середнє значення y."
        ),
    ),
    ConceptQuestion(
        question=(
            "Що означає, якщо один зі стовпчиків залишків значно довший "
            "за інші?"
        ),
        answer=(
            "Довгий стовпчик означає, що точка далеко від лінії y = b і дає "
            "великий внесок у квадратичну помилку. Він показує, де модель "
            "помиляється найбільше і яка точка найсильніше впливає на MSE."
        ),
    ),
    ConceptQuestion(
        question="Що станеться з MSE(b), якщо трохи збільшити b від оптимального значення?",
        answer=(
            "MSE зросте: парабола MSE(b) відкрита вгору, тому будь-яке "
            "відхилення від b* у середньому збільшує модулі залишків."
        ),
    ),
    ConceptQuestion(
        question="Як дуже великий викид у даних впливає на положення мінімуму MSE(b)?",
        answer=(
            "Викид зсуває середнє (а отже, й b*) у свій бік. Оскільки MSE "
            "підносить залишки до квадрата, викиди сильно впливають на "
            "положення мінімуму."
        ),
    ),
)


__all__ = [
    "ConceptQuestion",
    "CONCEPT_QUESTIONS",
]

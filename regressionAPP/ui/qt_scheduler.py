"""
qt_scheduler.py

Планувальник для core.animator на основі QTimer: тіки анімації
виконуються в циклі подій Qt, без окремих потоків.
"""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QTimer


class QtScheduler:
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        QTimer.singleShot(max(0, int(round(delay_ms))), callback)


__all__ = ["QtScheduler"]

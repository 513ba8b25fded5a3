"""
animator.py

Анімація переходу b_old -> b_new для візуалізації кроку спуску.

Ідея:
    - значення між b_old та b_new генеруються як скінченна послідовність
      "тиків" з ease-out cubic згладжуванням: eased = 1 - (1 - t)^3;
    - останній тік дорівнює рівно b_new (без похибки згладжування);
    - час задає зовнішній планувальник (Scheduler): у GUI це QTimer
      (ui.qt_scheduler.QtScheduler), у тестах — ManualScheduler з
      "ручним" годинником;
    - між тіками перевіряється CancellationToken.

Анімація кооперативна: усі колбеки виконуються в потоці викликача,
жодні два тіки не виконуються одночасно.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Protocol, Tuple

from ..log_config import get_logger

logger = get_logger(__name__)

TickCallback = Callable[[float], None]
DoneCallback = Callable[[], None]


# ---------------------------------------------------------------------------
# Параметри та інтерполяція
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AnimationParameters:
    """
    duration_ms - тривалість анімації одного кроку (> 0)
    step_count  - кількість тіків (>= 1)
    """
    duration_ms: float = 400.0
    step_count: int = 20

    def __post_init__(self) -> None:
        if not self.duration_ms > 0:
            raise ValueError(f"duration_ms має бути > 0, отримано {self.duration_ms}")
        if self.step_count < 1:
            raise ValueError(f"step_count має бути >= 1, отримано {self.step_count}")

    @property
    def tick_interval_ms(self) -> float:
        return self.duration_ms / self.step_count


def ease_out_cubic(progress: float) -> float:
    return 1.0 - (1.0 - progress) ** 3


def interpolation_ticks(from_b: float, to_b: float, step_count: int) -> Iterator[float]:
    """
    Значення b для тіків i = 1..step_count.
    Останнє значення — рівно to_b.
    """
    for i in range(1, step_count + 1):
        if i == step_count:
            yield to_b
        else:
            yield from_b + (to_b - from_b) * ease_out_cubic(i / step_count)


# ---------------------------------------------------------------------------
# Планувальники та скасування
# ---------------------------------------------------------------------------

class Scheduler(Protocol):
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        ...


class ManualScheduler:
    """
    Планувальник з "ручним" годинником.

    Колбеки виконуються лише в advance() / run_until_idle(),
    у порядку часу спрацювання, а при однаковому часі — FIFO.
    """

    def __init__(self) -> None:
        self.now_ms: float = 0.0
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._counter), callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, ms: float) -> None:
        target = self.now_ms + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self.now_ms = due
            callback()
        self.now_ms = target

    def run_until_idle(self, max_callbacks: int = 100_000) -> int:
        """Виконати всі заплановані колбеки. Повертає їх кількість."""
        executed = 0
        while self._queue:
            if executed >= max_callbacks:
                raise RuntimeError("ManualScheduler: перевищено max_callbacks")
            due, _, callback = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, due)
            callback()
            executed += 1
        return executed


class CancellationToken:
    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


# ---------------------------------------------------------------------------
# Аніматор
# ---------------------------------------------------------------------------

class AnimatorBusyError(RuntimeError):
    """animate() викликано, поки попередня анімація ще триває."""


class TrajectoryAnimator:
    """
    Послідовно видає тіки інтерполяції від from_b до to_b.

    Контракт animate():
        - on_tick(b) викликається рівно params.step_count разів у порядку
          зростання часу (якщо анімацію не скасовано);
        - кожен тік чекає params.tick_interval_ms від попереднього;
        - on_complete() викликається рівно один раз, після останнього тіку
          (або після скасування);
        - поки анімація триває, повторний animate() відхиляється
          з AnimatorBusyError.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self.scheduler = scheduler
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def animate(
        self,
        from_b: float,
        to_b: float,
        params: AnimationParameters,
        on_tick: TickCallback,
        on_complete: DoneCallback,
        token: Optional[CancellationToken] = None,
    ) -> None:
        if self._busy:
            raise AnimatorBusyError("Анімація вже виконується")

        self._busy = True
        ticks = interpolation_ticks(from_b, to_b, params.step_count)
        interval = params.tick_interval_ms
        remaining = params.step_count

        logger.debug(
            "animate %.6f -> %.6f (%d тіків по %.1f мс)",
            from_b, to_b, params.step_count, interval,
        )

        def finish() -> None:
            self._busy = False
            on_complete()

        def fire() -> None:
            nonlocal remaining
            if token is not None and token.cancelled:
                logger.debug("Анімацію скасовано, залишилось тіків: %d", remaining)
                finish()
                return

            try:
                on_tick(next(ticks))
            except Exception:
                self._busy = False
                raise

            remaining -= 1
            if remaining == 0:
                finish()
            else:
                self.scheduler.call_later(interval, fire)

        self.scheduler.call_later(interval, fire)


__all__ = [
    "AnimationParameters",
    "ease_out_cubic",
    "interpolation_ticks",
    "Scheduler",
    "ManualScheduler",
    "CancellationToken",
    "AnimatorBusyError",
    "TrajectoryAnimator",
]

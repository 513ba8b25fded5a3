"""
controller.py

Контролер градієнтного спуску з анімацією.

Зв'язує:
    - core.gradient_step (обчислення кроку);
    - core.animator.TrajectoryAnimator (плавний перехід b_old -> b_new);
    - DisplaySink (GUI або тестовий приймач), який отримує:
        show_b(b, mse)            — на кожному тіку анімації;
        add_history_entry(entry)  — на кожній ітерації;
        clear_history()           — при очищенні історії;
        set_mode(mode)            — при зміні режиму.

Режими (ControllerMode):
    IDLE -> ANIMATING (крок) -> IDLE
    IDLE -> RUNNING (N ітерацій, кожна: крок -> анімація -> запис) -> IDLE

Будь-яка дія, крім cancel(), дозволена лише в IDLE. В інших режимах
вона відхиляється (повертає False), тому рух повзунка не може
"змагатися" з анімацією, а повторний "Запуск" нічого не робить.

Помилка в sink або колбеку повертає контролер у IDLE і передається
викликачу далі. Крок, що виконувався, застосовується миттєво.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

import numpy as np

from .animator import AnimationParameters, CancellationToken, TrajectoryAnimator
from .dataset import Dataset
from .engine import STOPPED_CANCELLED, STOPPED_MAX_ITER, DescentRunResult
from .gradient_step import gradient_step
from .history import ControllerMode, HistoryEntry, OptimizerState
from .metrics import B_MAX, B_MIN, mse, optimal_b
from ..log_config import get_logger

logger = get_logger(__name__)


class DisplaySink(Protocol):
    def show_b(self, b: float, mse: float) -> None:
        ...

    def add_history_entry(self, entry: HistoryEntry) -> None:
        ...

    def clear_history(self) -> None:
        ...

    def set_mode(self, mode: ControllerMode) -> None:
        ...


class NullSink:
    """Приймач, що нічого не відображає (для запуску без GUI)."""

    def show_b(self, b: float, mse: float) -> None:
        pass

    def add_history_entry(self, entry: HistoryEntry) -> None:
        pass

    def clear_history(self) -> None:
        pass

    def set_mode(self, mode: ControllerMode) -> None:
        pass


StepDoneCallback = Callable[[OptimizerState], None]
RunDoneCallback = Callable[[DescentRunResult], None]


class DescentController:
    """
    Єдиний "власник" OptimizerState: current_b, history та mode
    змінюються лише тут.
    """

    def __init__(
        self,
        dataset: Dataset,
        animator: TrajectoryAnimator,
        state: Optional[OptimizerState] = None,
        sink: Optional[DisplaySink] = None,
        params: Optional[AnimationParameters] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.dataset = dataset
        self.animator = animator
        self.state = state if state is not None else OptimizerState()
        self.sink: DisplaySink = sink if sink is not None else NullSink()
        self.params = params if params is not None else AnimationParameters()
        self.rng = rng if rng is not None else np.random.default_rng()

        self._token: Optional[CancellationToken] = None
        # b_new кроку, запис якого вже в історії, а анімація ще триває
        self._pending_b: Optional[float] = None

    # ------------------------------------------------------------------
    # Стан
    # ------------------------------------------------------------------

    @property
    def mode(self) -> ControllerMode:
        return self.state.mode

    def current_mse(self) -> float:
        return mse(self.dataset, self.state.current_b)

    def refresh(self) -> None:
        """Повністю передати поточний стан у sink."""
        self.sink.set_mode(self.state.mode)
        self.sink.clear_history()
        for entry in self.state.history:
            self.sink.add_history_entry(entry)
        self.sink.show_b(self.state.current_b, self.current_mse())

    def _set_mode(self, mode: ControllerMode) -> None:
        self.state.mode = mode
        self.sink.set_mode(mode)

    def _clear_history(self) -> None:
        self.state.history.clear()
        self.sink.clear_history()

    def _reject(self, action: str) -> bool:
        logger.info("%s відхилено: режим %s", action, self.state.mode.value)
        return False

    def _abort(self) -> None:
        """
        Повернути контролер у IDLE після помилки в sink або колбеку.
        Незавершений крок застосовується миттєво, як при скасуванні.
        """
        if self._pending_b is not None:
            self.state.current_b = self._pending_b
            self._pending_b = None
        self._token = None
        self.state.mode = ControllerMode.IDLE
        try:
            self.sink.set_mode(ControllerMode.IDLE)
        except Exception:
            logger.exception("Не вдалося показати режим IDLE після помилки")

    def _guard(self, callback: Callable[..., None]) -> Callable[..., None]:
        def wrapper(*args) -> None:
            try:
                callback(*args)
            except Exception:
                logger.exception("Помилка під час спуску (режим %s)", self.state.mode.value)
                self._abort()
                raise
        return wrapper

    # ------------------------------------------------------------------
    # Миттєві дії (лише в IDLE)
    # ------------------------------------------------------------------

    def set_b(self, b: float) -> bool:
        """Значення з повзунка."""
        if not self.state.is_idle:
            return self._reject("set_b")
        self.state.current_b = float(b)
        self.sink.show_b(self.state.current_b, self.current_mse())
        return True

    def randomize(self) -> bool:
        """Випадкове b з [B_MIN, B_MAX] без анімації; історія очищується."""
        if not self.state.is_idle:
            return self._reject("randomize")
        self.state.current_b = float(self.rng.uniform(B_MIN, B_MAX))
        self._clear_history()
        self.sink.show_b(self.state.current_b, self.current_mse())
        logger.info("Випадкове b = %.4f", self.state.current_b)
        return True

    # ------------------------------------------------------------------
    # Анімовані дії
    # ------------------------------------------------------------------

    def step_once(self, learning_rate: float, on_done: Optional[StepDoneCallback] = None) -> bool:
        """
        Один крок: запис в історію (b до кроку) -> анімація -> current_b = b_new.
        """
        if not self.state.is_idle:
            return self._reject("step_once")

        token = self._token = CancellationToken()

        def finish() -> None:
            self._token = None
            self._set_mode(ControllerMode.IDLE)
            if on_done is not None:
                on_done(self.state)

        def start() -> None:
            self._set_mode(ControllerMode.ANIMATING)
            self._perform_iteration(learning_rate, token, finish)

        self._guard(start)()
        return True

    def run(
        self,
        learning_rate: float,
        iterations: int,
        on_done: Optional[RunDoneCallback] = None,
    ) -> bool:
        """
        N послідовних анімованих ітерацій. Наступна ітерація починається
        лише після повного завершення анімації попередньої.
        """
        if iterations < 1:
            raise ValueError(f"Кількість ітерацій має бути >= 1, отримано {iterations}")
        if not self.state.is_idle:
            return self._reject("run")

        token = self._token = CancellationToken()
        start_b = self.state.current_b

        logger.info(
            "Запуск спуску: b0=%.4f, lr=%g, ітерацій=%d",
            start_b, learning_rate, iterations,
        )

        def finish(stopped_by: str) -> None:
            self._token = None
            self._set_mode(ControllerMode.IDLE)
            result = DescentRunResult(
                learning_rate=learning_rate,
                start_b=start_b,
                final_b=self.state.current_b,
                final_mse=self.current_mse(),
                optimal_b=optimal_b(self.dataset),
                history=list(self.state.history),
                n_iter=len(self.state.history),
                stopped_by=stopped_by,
            )
            logger.info(
                "Спуск завершено (%s): b=%.6f, MSE=%.6f, ітерацій=%d",
                stopped_by, result.final_b, result.final_mse, result.n_iter,
            )
            if on_done is not None:
                on_done(result)

        def next_iteration() -> None:
            if len(self.state.history) >= iterations:
                finish(STOPPED_MAX_ITER)
                return
            if token.cancelled:
                finish(STOPPED_CANCELLED)
                return
            self._perform_iteration(learning_rate, token, next_iteration)

        def start() -> None:
            self._clear_history()
            self._set_mode(ControllerMode.RUNNING)
            next_iteration()

        self._guard(start)()
        return True

    def cancel(self) -> bool:
        """
        Зупинити поточний крок/запуск. Крок, анімація якого перервана,
        завершується миттєво (current_b = b_new), тому історія та current_b
        залишаються узгодженими.
        """
        if self._token is None:
            return False
        logger.info("Скасування (режим %s)", self.state.mode.value)
        self._token.cancel()
        return True

    # ------------------------------------------------------------------
    # Одна ітерація
    # ------------------------------------------------------------------

    def _perform_iteration(
        self,
        learning_rate: float,
        token: CancellationToken,
        then: Callable[[], None],
    ) -> None:
        b = self.state.current_b
        step = gradient_step(self.dataset, b, learning_rate)

        entry = HistoryEntry(
            iteration=len(self.state.history),
            b=b,
            mse=step.mse,
            gradient=step.gradient,
        )
        self.state.history.append(entry)
        self._pending_b = step.new_b
        self.sink.add_history_entry(entry)

        def on_tick(value: float) -> None:
            self.sink.show_b(value, mse(self.dataset, value))

        def on_complete() -> None:
            self.state.current_b = step.new_b
            self._pending_b = None
            if token.cancelled:
                self.sink.show_b(step.new_b, mse(self.dataset, step.new_b))
            then()

        self.animator.animate(
            b, step.new_b, self.params, self._guard(on_tick), self._guard(on_complete), token
        )


__all__ = [
    "DisplaySink",
    "NullSink",
    "DescentController",
]

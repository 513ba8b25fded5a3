import pytest

from regressionAPP.core.controller import DescentController
from regressionAPP.core.engine import STOPPED_CANCELLED, STOPPED_MAX_ITER
from regressionAPP.core.history import ControllerMode, OptimizerState
from regressionAPP.core.metrics import B_MAX, B_MIN


@pytest.fixture
def controller(main_dataset, animator, recording_sink, rng):
    return DescentController(
        dataset=main_dataset,
        animator=animator,
        sink=recording_sink,
        rng=rng,
    )


def test_initial_state(controller) -> None:
    assert controller.mode is ControllerMode.IDLE
    assert controller.state.current_b == 3.0
    assert controller.state.history == []
    assert controller.current_mse() == pytest.approx(6.25)


def test_refresh_pushes_full_state(controller, recording_sink) -> None:
    controller.refresh()
    assert recording_sink.modes == [ControllerMode.IDLE]
    assert recording_sink.clears == 1
    assert recording_sink.shown == [(3.0, pytest.approx(6.25))]


def test_set_b_updates_state_and_sink(controller, recording_sink) -> None:
    assert controller.set_b(4.5) is True
    assert controller.state.current_b == 4.5
    assert recording_sink.shown[-1] == (4.5, pytest.approx(4.0))


def test_step_once_records_pre_step_snapshot(controller, manual_scheduler, recording_sink) -> None:
    finished = []
    assert controller.step_once(0.1, on_done=finished.append) is True
    assert controller.mode is ControllerMode.ANIMATING

    manual_scheduler.run_until_idle()

    assert controller.mode is ControllerMode.IDLE
    assert controller.state.current_b == pytest.approx(3.3)
    assert len(controller.state.history) == 1

    entry = controller.state.history[0]
    assert entry.iteration == 0
    assert entry.b == 3.0
    assert entry.mse == pytest.approx(6.25)
    assert entry.gradient == pytest.approx(-3.0)

    assert finished == [controller.state]
    assert recording_sink.modes == [ControllerMode.ANIMATING, ControllerMode.IDLE]
    # 20 animation ticks, the last one at the new b
    assert len(recording_sink.shown) == 20
    assert recording_sink.shown[-1][0] == pytest.approx(3.3)


def test_consecutive_steps_append_history(controller, manual_scheduler) -> None:
    for _ in range(3):
        controller.step_once(0.1)
        manual_scheduler.run_until_idle()

    assert [e.iteration for e in controller.state.history] == [0, 1, 2]
    assert controller.state.history[1].b == pytest.approx(3.3)


def test_run_converges_from_negative_start(controller, manual_scheduler) -> None:
    results = []
    controller.set_b(-7.0)

    assert controller.run(0.2, 15, on_done=results.append) is True
    assert controller.mode is ControllerMode.RUNNING
    manual_scheduler.run_until_idle()

    assert controller.mode is ControllerMode.IDLE
    assert len(controller.state.history) == 15
    assert abs(controller.state.current_b - 4.5) < 0.01

    (result,) = results
    assert result.n_iter == 15
    assert result.stopped_by == STOPPED_MAX_ITER
    assert result.start_b == -7.0
    assert result.final_b == controller.state.current_b
    assert result.optimal_b == pytest.approx(4.5)


def test_run_iterations_are_sequential(controller, manual_scheduler) -> None:
    controller.run(0.1, 3)
    assert len(controller.state.history) == 1

    manual_scheduler.advance(399)
    assert len(controller.state.history) == 1
    manual_scheduler.advance(1)
    assert len(controller.state.history) == 2
    manual_scheduler.advance(400)
    assert len(controller.state.history) == 3
    assert controller.mode is ControllerMode.RUNNING
    manual_scheduler.advance(400)
    assert controller.mode is ControllerMode.IDLE


def test_run_clears_previous_history(controller, manual_scheduler) -> None:
    controller.step_once(0.1)
    manual_scheduler.run_until_idle()
    assert len(controller.state.history) == 1

    controller.run(0.1, 2)
    assert len(controller.state.history) == 1  # first iteration of the new run
    manual_scheduler.run_until_idle()
    assert [e.iteration for e in controller.state.history] == [0, 1]


def test_run_rejects_zero_iterations(controller) -> None:
    with pytest.raises(ValueError):
        controller.run(0.1, 0)


def test_actions_rejected_while_running(controller, manual_scheduler) -> None:
    controller.run(0.1, 5)

    assert controller.set_b(1.0) is False
    assert controller.randomize() is False
    assert controller.step_once(0.1) is False
    assert controller.run(0.1, 5) is False
    assert controller.state.current_b == 3.0

    manual_scheduler.run_until_idle()
    assert len(controller.state.history) == 5


def test_actions_rejected_while_stepping(controller, manual_scheduler) -> None:
    controller.step_once(0.1)
    assert controller.set_b(1.0) is False
    assert controller.run(0.1, 3) is False
    manual_scheduler.run_until_idle()
    assert controller.state.current_b == pytest.approx(3.3)


def test_cancel_mid_run_completes_in_flight_step(controller, manual_scheduler) -> None:
    results = []
    controller.set_b(-7.0)
    controller.run(0.2, 15, on_done=results.append)

    manual_scheduler.advance(100)
    assert controller.cancel() is True
    manual_scheduler.run_until_idle()

    assert controller.mode is ControllerMode.IDLE
    assert len(controller.state.history) == 1
    # -7 - 0.2 * (-23)
    assert controller.state.current_b == pytest.approx(-2.4)

    (result,) = results
    assert result.stopped_by == STOPPED_CANCELLED
    assert result.n_iter == 1


def test_cancel_when_idle_is_noop(controller) -> None:
    assert controller.cancel() is False


def test_randomize_in_range_and_clears_history(controller, manual_scheduler, recording_sink) -> None:
    controller.step_once(0.1)
    manual_scheduler.run_until_idle()

    for _ in range(50):
        assert controller.randomize() is True
        assert B_MIN <= controller.state.current_b <= B_MAX
        assert controller.state.history == []
    assert recording_sink.entries == []


def test_controller_uses_given_state(main_dataset, animator) -> None:
    state = OptimizerState(current_b=1.0)
    controller = DescentController(main_dataset, animator, state=state)
    assert controller.state is state
    assert controller.current_mse() == pytest.approx((1.5 ** 2 + 5.5 ** 2) / 2)


class FailingSink:
    """Sink whose `method` raises on the `fail_at`-th call (1-based), once."""

    def __init__(self, method: str, fail_at: int = 1):
        self.method = method
        self.fail_at = fail_at
        self.calls = 0
        self.modes = []

    def _maybe_fail(self, method: str) -> None:
        if method != self.method:
            return
        self.calls += 1
        if self.calls == self.fail_at:
            raise RuntimeError(f"{method} failed")

    def show_b(self, b, mse):
        self._maybe_fail("show_b")

    def add_history_entry(self, entry):
        self._maybe_fail("add_history_entry")

    def clear_history(self):
        pass

    def set_mode(self, mode):
        self.modes.append(mode)


def test_sink_error_during_step_returns_to_idle(main_dataset, animator, manual_scheduler) -> None:
    sink = FailingSink("show_b")
    controller = DescentController(main_dataset, animator, sink=sink)

    assert controller.step_once(0.1) is True
    with pytest.raises(RuntimeError):
        manual_scheduler.run_until_idle()

    assert controller.mode is ControllerMode.IDLE
    assert sink.modes[-1] is ControllerMode.IDLE
    assert not animator.busy
    assert controller.cancel() is False
    # the recorded step is applied so history and current_b agree
    assert len(controller.state.history) == 1
    assert controller.state.current_b == pytest.approx(3.3)

    assert controller.step_once(0.1) is True
    manual_scheduler.run_until_idle()
    assert controller.state.current_b == pytest.approx(3.54)
    assert controller.randomize() is True
    assert controller.set_b(1.0) is True


def test_sink_error_mid_run_returns_to_idle(main_dataset, animator, manual_scheduler) -> None:
    # set_b is call 1, the first iteration ticks are calls 2-21
    sink = FailingSink("show_b", fail_at=25)
    controller = DescentController(main_dataset, animator, sink=sink)
    controller.set_b(-7.0)
    results = []

    controller.run(0.2, 15, on_done=results.append)
    with pytest.raises(RuntimeError):
        manual_scheduler.run_until_idle()

    assert controller.mode is ControllerMode.IDLE
    assert results == []
    assert len(controller.state.history) == 2
    assert controller.state.current_b == pytest.approx(0.36)

    assert controller.run(0.2, 15, on_done=results.append) is True
    manual_scheduler.run_until_idle()
    assert len(controller.state.history) == 15
    assert len(results) == 1


def test_sink_error_when_recording_entry_returns_to_idle(main_dataset, animator) -> None:
    sink = FailingSink("add_history_entry")
    controller = DescentController(main_dataset, animator, sink=sink)

    with pytest.raises(RuntimeError):
        controller.step_once(0.1)

    assert controller.mode is ControllerMode.IDLE
    assert not animator.busy
    assert len(controller.state.history) == 1
    assert controller.state.current_b == pytest.approx(3.3)
    assert controller.step_once(0.1) is True

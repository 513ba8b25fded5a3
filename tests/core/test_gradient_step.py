import pytest

from regressionAPP.core.gradient_step import gradient_step
from regressionAPP.core.metrics import mse_derivative


def test_step_from_initial_b(main_dataset) -> None:
    step = gradient_step(main_dataset, 3.0, 0.1)

    assert step.gradient == pytest.approx(-3.0)
    assert step.mse == pytest.approx(6.25)
    assert step.new_b == pytest.approx(3.3)


def test_step_at_optimum_does_not_move(main_dataset) -> None:
    step = gradient_step(main_dataset, 4.5, 0.7)
    assert step.new_b == pytest.approx(4.5)
    assert step.gradient == pytest.approx(0.0)


def test_half_learning_rate_lands_on_optimum_for_two_points(main_dataset) -> None:
    # for n = 2, dMSE/db = 2 (b - b*), so alpha = 0.5 jumps straight to b*
    step = gradient_step(main_dataset, -7.0, 0.5)
    assert step.new_b == pytest.approx(4.5)


def test_learning_rate_one_overshoots_symmetrically(main_dataset) -> None:
    step = gradient_step(main_dataset, 3.0, 1.0)
    assert step.new_b == pytest.approx(6.0)


def test_large_learning_rate_is_not_clamped(main_dataset) -> None:
    step = gradient_step(main_dataset, 3.0, 5.0)
    assert step.new_b == pytest.approx(18.0)


@pytest.mark.parametrize(
    "b, lr",
    [(3.0, 0.1), (-7.0, 0.2), (4.5, 0.9), (12.345, 1.0), (-0.001, 0.003), (8.0, 5.0)],
)
def test_new_b_is_exact_update(main_dataset, b, lr) -> None:
    step = gradient_step(main_dataset, b, lr)
    assert step.new_b == b - lr * mse_derivative(main_dataset, b)
    assert step.gradient == mse_derivative(main_dataset, b)

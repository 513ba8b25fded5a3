import pytest

from regressionAPP.core.residuals import mse_formula_lines, residual_rows, residual_segments


def test_residual_rows(main_dataset) -> None:
    first, second = residual_rows(main_dataset, 3.0)

    assert (first.x, first.y, first.prediction) == (2.0, 2.5, 3.0)
    assert first.residual == pytest.approx(-0.5)
    assert first.squared_error == pytest.approx(0.25)
    assert second.residual == pytest.approx(3.5)
    assert second.squared_error == pytest.approx(12.25)


def test_mse_formula_lines(main_dataset) -> None:
    symbolic, substituted, value = mse_formula_lines(main_dataset, 3.0)

    assert symbolic == "MSE(b) = 1/2 * [ (y1 - b)^2 + (y2 - b)^2 ]"
    assert substituted == "= 1/2 * [ (2.50 - 3.00)^2 + (6.50 - 3.00)^2 ]"
    assert value == "= 6.2500"


def test_residual_segments(main_dataset) -> None:
    assert residual_segments(main_dataset, 4.0) == [
        ((2.0, 2.5), (2.0, 4.0)),
        ((7.0, 6.5), (7.0, 4.0)),
    ]

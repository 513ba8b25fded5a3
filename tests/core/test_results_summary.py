import pytest

from regressionAPP.core.engine import GradientDescentEngine
from regressionAPP.core.results_summary import (
    BEHAVIOUR_CONVERGING,
    BEHAVIOUR_DIVERGING,
    BEHAVIOUR_OSCILLATING,
    COMPARISON_LEARNING_RATES,
    ResultsSummary,
    classify,
    compare_learning_rates,
)


def test_compare_runs_every_learning_rate(main_dataset) -> None:
    summary = compare_learning_rates(main_dataset, -7.0, 15)
    rows = summary.as_rows()

    assert [row["learning_rate"] for row in rows] == list(COMPARISON_LEARNING_RATES)
    assert all(row["start_b"] == -7.0 for row in rows)
    assert all(row["n_iter"] == 15 for row in rows)


def test_behaviour_classification(main_dataset) -> None:
    summary = compare_learning_rates(main_dataset, -7.0, 15)
    behaviour = {row["learning_rate"]: row["behaviour"] for row in summary.as_rows()}

    assert behaviour[0.05] == BEHAVIOUR_CONVERGING
    assert behaviour[0.2] == BEHAVIOUR_CONVERGING
    assert behaviour[0.5] == BEHAVIOUR_CONVERGING
    assert behaviour[0.9] == BEHAVIOUR_OSCILLATING
    assert behaviour[1.0] == BEHAVIOUR_DIVERGING


def test_best_by_distance(main_dataset) -> None:
    summary = compare_learning_rates(main_dataset, -7.0, 15)
    best = summary.best_by_distance()
    assert best is not None
    assert best.learning_rate == 0.5
    assert best.final_b == pytest.approx(4.5)


def test_empty_summary() -> None:
    summary = ResultsSummary()
    assert summary.as_rows() == []
    assert summary.best_by_distance() is None


def test_start_at_optimum_is_converging(main_dataset) -> None:
    run = GradientDescentEngine().run(main_dataset, 4.5, 1.0, iterations=3)
    assert classify(run) == BEHAVIOUR_CONVERGING


def test_custom_learning_rates_and_engine(main_dataset) -> None:
    engine = GradientDescentEngine(iterations=1)
    summary = compare_learning_rates(
        main_dataset, 3.0, 2, learning_rates=(0.1,), engine=engine
    )
    (row,) = summary.as_rows()
    assert row["n_iter"] == 2
    assert row["distance"] == pytest.approx(abs(4.5 - 3.0) * 0.8 ** 2)

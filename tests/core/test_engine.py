import pytest

from regressionAPP.core.engine import STOPPED_MAX_ITER, GradientDescentEngine


def test_engine_runs_exact_iteration_count(main_dataset) -> None:
    result = GradientDescentEngine().run(main_dataset, -7.0, 0.2)

    assert result.n_iter == 15
    assert len(result.history) == 15
    assert [e.iteration for e in result.history] == list(range(15))
    assert result.stopped_by == STOPPED_MAX_ITER
    assert abs(result.final_b - 4.5) < 0.01


def test_engine_history_matches_trajectory(main_dataset) -> None:
    result = GradientDescentEngine().run(main_dataset, 3.0, 0.1, iterations=2)

    first, second = result.history
    assert first.b == 3.0
    assert first.gradient == pytest.approx(-3.0)
    assert second.b == pytest.approx(3.3)
    assert result.final_b == pytest.approx(3.3 + 0.1 * 2 * (4.5 - 3.3))


def test_engine_callback_receives_each_entry(main_dataset) -> None:
    seen = []
    GradientDescentEngine().run(main_dataset, 0.0, 0.3, iterations=4, callback=seen.append)
    assert [e.iteration for e in seen] == [0, 1, 2, 3]


def test_engine_learning_rate_one_does_not_converge(main_dataset) -> None:
    result = GradientDescentEngine().run(main_dataset, 3.0, 1.0, iterations=15)
    # b bounces between 3 and 6 around b* = 4.5
    assert result.final_distance == pytest.approx(result.start_distance)


def test_engine_default_iterations_override(main_dataset) -> None:
    engine = GradientDescentEngine(iterations=3)
    assert engine.run(main_dataset, 3.0, 0.1).n_iter == 3
    assert engine.run(main_dataset, 3.0, 0.1, iterations=5).n_iter == 5


def test_engine_rejects_non_positive_iterations(main_dataset) -> None:
    with pytest.raises(ValueError):
        GradientDescentEngine().run(main_dataset, 3.0, 0.1, iterations=0)

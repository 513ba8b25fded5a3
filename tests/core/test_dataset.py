import math

import numpy as np
import pytest

from regressionAPP.core.dataset import (
    DIFFICULTY_POINT_COUNTS,
    DataPoint,
    Dataset,
    EmptyDatasetError,
    MAIN_POINTS,
    generate_practice_dataset,
)


def test_main_dataset_points(main_dataset) -> None:
    assert len(main_dataset) == 2
    assert main_dataset.points == (DataPoint(2.0, 2.5), DataPoint(7.0, 6.5))
    assert list(main_dataset.xs) == [p[0] for p in MAIN_POINTS]
    assert list(main_dataset.ys) == [p[1] for p in MAIN_POINTS]


def test_empty_dataset_rejected() -> None:
    with pytest.raises(EmptyDatasetError):
        Dataset(())


def test_empty_dataset_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Dataset.from_pairs([])


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_point_rejected(bad) -> None:
    with pytest.raises(ValueError):
        Dataset.from_pairs([(1.0, 2.0), (2.0, bad)])


def test_dataset_is_immutable(main_dataset) -> None:
    with pytest.raises(AttributeError):
        main_dataset.points = ()


@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
def test_practice_dataset_size_and_x_values(difficulty) -> None:
    rng = np.random.default_rng(7)
    lo, hi = DIFFICULTY_POINT_COUNTS[difficulty]
    for _ in range(20):
        dataset = generate_practice_dataset(difficulty, rng)
        assert lo <= len(dataset) <= hi
        assert list(dataset.xs) == [float(i) for i in range(1, len(dataset) + 1)]


def test_practice_dataset_y_range_without_outliers() -> None:
    rng = np.random.default_rng(3)
    for _ in range(20):
        dataset = generate_practice_dataset("medium", rng)
        assert all(1.0 <= y < 10.0 for y in dataset.ys)


def test_hard_dataset_outlier_only_in_last_point() -> None:
    rng = np.random.default_rng(11)
    seen_outlier = False
    for _ in range(200):
        dataset = generate_practice_dataset("hard", rng)
        ys = dataset.ys
        assert all(1.0 <= y < 10.0 for y in ys[:-1])
        if ys[-1] >= 12.0:
            seen_outlier = True
            assert ys[-1] < 20.0
    assert seen_outlier


def test_practice_dataset_is_reproducible_with_seed() -> None:
    a = generate_practice_dataset("hard", np.random.default_rng(42))
    b = generate_practice_dataset("hard", np.random.default_rng(42))
    assert a == b


def test_unknown_difficulty_rejected() -> None:
    with pytest.raises(ValueError):
        generate_practice_dataset("impossible")

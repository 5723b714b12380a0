import math

import pytest

from sma_trader.errors import InvalidInputError
from sma_trader.strategies.moving_average import compute_sma


def test_sma_absent_until_window_filled():
    sma = compute_sma([1.0, 2.0, 3.0, 4.0, 5.0], 3)
    assert sma[:2] == [None, None]
    assert sma[2:] == [pytest.approx(2.0), pytest.approx(3.0), pytest.approx(4.0)]


@pytest.mark.parametrize("window", [1, 2, 5, 7])
def test_sma_matches_slice_mean(window):
    series = [3.0, 7.5, 1.25, 9.0, 4.0, 6.5, 2.0]
    sma = compute_sma(series, window)
    assert len(sma) == len(series)
    for i, value in enumerate(sma):
        if i < window - 1:
            assert value is None
        else:
            chunk = series[i - window + 1 : i + 1]
            assert value == pytest.approx(sum(chunk) / window)


def test_window_one_is_identity():
    assert compute_sma([4.0, 5.0, 6.0], 1) == [4.0, 5.0, 6.0]


def test_window_longer_than_series_is_all_absent():
    assert compute_sma([1.0, 2.0], 5) == [None, None]


def test_empty_series_gives_empty_result():
    assert compute_sma([], 3) == []


@pytest.mark.parametrize("window", [0, -2, 2.5, True, "3"])
def test_invalid_window_rejected(window):
    with pytest.raises(InvalidInputError):
        compute_sma([1.0, 2.0, 3.0], window)


def test_non_finite_values_rejected():
    with pytest.raises(InvalidInputError):
        compute_sma([1.0, math.nan, 3.0], 2)

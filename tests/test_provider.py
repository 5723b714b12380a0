from datetime import date

import numpy as np
import pytest

from sma_trader.data.provider import closes, synthetic_price_series, to_frame
from sma_trader.errors import InvalidInputError


def test_default_series_covers_a_year_of_days():
    prices = synthetic_price_series(seed=3)
    assert len(prices) == 365
    assert prices[0].date == "2023-01-01"
    assert prices[-1].date == "2023-12-31"


def test_closes_stay_within_drift_band():
    prices = synthetic_price_series(n=100, base=5000.0, drift=2.0, noise=50.0, seed=11)
    for i, p in enumerate(prices):
        assert 5000.0 + 2.0 * i <= p.close < 5000.0 + 2.0 * i + 50.0


def test_same_seed_same_series():
    assert synthetic_price_series(n=30, seed=5) == synthetic_price_series(n=30, seed=5)
    assert synthetic_price_series(n=30, seed=5) != synthetic_price_series(n=30, seed=6)


def test_zero_noise_is_a_straight_line():
    prices = synthetic_price_series(n=4, start=date(2024, 2, 28), base=10.0, drift=1.5, noise=0.0)
    assert closes(prices) == [10.0, 11.5, 13.0, 14.5]
    assert [p.date for p in prices] == ["2024-02-28", "2024-02-29", "2024-03-01", "2024-03-02"]


@pytest.mark.parametrize("kwargs", [dict(n=0), dict(noise=-1.0), dict(n=10, base=5.0, drift=-1.0, noise=0.0)])
def test_invalid_generator_arguments(kwargs):
    with pytest.raises(InvalidInputError):
        synthetic_price_series(**kwargs)


def test_to_frame_turns_absent_into_nan():
    prices = synthetic_price_series(n=3, noise=0.0)
    df = to_frame(prices, **{"SMA 2": [None, 1.0, 2.0]})
    assert df.index.name == "Date"
    assert np.isnan(df["SMA 2"].iloc[0])
    assert df["SMA 2"].iloc[2] == 2.0


def test_to_frame_rejects_misaligned_series():
    prices = synthetic_price_series(n=3, noise=0.0)
    with pytest.raises(InvalidInputError):
        to_frame(prices, short=[1.0])

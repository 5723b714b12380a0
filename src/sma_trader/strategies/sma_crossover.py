from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

from ..data.provider import closes, to_frame
from ..errors import InvalidInputError
from ..execution.simulator import DEFAULT_BUY_FRACTION, simulate
from ..models.trade import PricePoint, SimulationResult, SimulationState
from .moving_average import compute_sma, validate_window


class SMACrossover:
    """Simple moving-average crossover strategy.

    Buys a fraction of capital when the short SMA crosses above the long SMA,
    sells everything when it crosses back below.
    """

    def __init__(self, short_window: int = 10, long_window: int = 30, buy_fraction: float = DEFAULT_BUY_FRACTION):
        self.short = validate_window(short_window)
        self.long = validate_window(long_window)
        if self.short >= self.long:
            raise InvalidInputError("short_window must be smaller than long_window")
        if not 0 < buy_fraction <= 1:
            raise InvalidInputError(f"buy_fraction must be in (0, 1], got {buy_fraction!r}")
        self.buy_fraction = buy_fraction

    @property
    def labels(self) -> tuple[str, str]:
        return f"SMA {self.short}", f"SMA {self.long}"

    def moving_averages(self, prices: Sequence[PricePoint]) -> tuple[list[Optional[float]], list[Optional[float]]]:
        values = closes(prices)
        return compute_sma(values, self.short), compute_sma(values, self.long)

    def run(self, prices: Sequence[PricePoint], state: SimulationState) -> SimulationResult:
        short_ma, long_ma = self.moving_averages(prices)
        return simulate(prices, short_ma, long_ma, state.capital, state.position, buy_fraction=self.buy_fraction)

    def frame(self, prices: Sequence[PricePoint]) -> pd.DataFrame:
        short_ma, long_ma = self.moving_averages(prices)
        short_label, long_label = self.labels
        return to_frame(prices, **{short_label: short_ma, long_label: long_ma})

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from typing import Optional, Sequence

from ..errors import InvalidInputError
from ..models.trade import PortfolioSummary, PricePoint, SimulationResult, Trade
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BUY_FRACTION = 0.1


class CrossState(Enum):
    """Which side of the long SMA the short SMA was last seen on."""

    UNKNOWN = "unknown"
    SHORT_BELOW = "short_below"
    SHORT_ABOVE = "short_above"


def next_state(state: CrossState, short: float, long: float) -> CrossState:
    """Advance the tracked crossover state by one sample.

    A tie keeps whatever side was tracked before, so a plateau neither fires
    nor forgets the prior side.
    """
    if short > long:
        return CrossState.SHORT_ABOVE
    if short < long:
        return CrossState.SHORT_BELOW
    return state


def _is_absent(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _validate(prices, short_ma, long_ma, initial_capital, initial_position, buy_fraction):
    if not prices:
        raise InvalidInputError("price series is empty")
    if len(short_ma) != len(prices) or len(long_ma) != len(prices):
        raise InvalidInputError(
            f"moving averages must match the price series length "
            f"(prices={len(prices)}, short={len(short_ma)}, long={len(long_ma)})"
        )
    for name, value in (("initial_capital", initial_capital), ("initial_position", initial_position)):
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value) or value < 0:
            raise InvalidInputError(f"{name} must be a non-negative number, got {value!r}")
    if isinstance(buy_fraction, bool) or not isinstance(buy_fraction, Real) or not 0 < buy_fraction <= 1:
        raise InvalidInputError(f"buy_fraction must be in (0, 1], got {buy_fraction!r}")
    for prev, cur in zip(prices, prices[1:]):
        if cur.date <= prev.date:
            raise InvalidInputError(f"price dates must be strictly ascending ({prev.date} then {cur.date})")


def simulate(
    prices: Sequence[PricePoint],
    short_ma: Sequence[Optional[float]],
    long_ma: Sequence[Optional[float]],
    initial_capital: float,
    initial_position: float = 0.0,
    buy_fraction: float = DEFAULT_BUY_FRACTION,
) -> SimulationResult:
    """Replay an SMA crossover strategy over the full price history.

    An upward crossing spends ``buy_fraction`` of the current capital at that
    day's close. A downward crossing sells the whole position. Every call starts
    again from ``initial_capital``/``initial_position``; nothing carries over
    from earlier runs. All input checks run before any trade is produced.
    """
    prices = list(prices)
    short_ma = list(short_ma)
    long_ma = list(long_ma)
    _validate(prices, short_ma, long_ma, initial_capital, initial_position, buy_fraction)

    capital = float(initial_capital)
    position = float(initial_position)
    trades: list[Trade] = []

    state = CrossState.UNKNOWN
    prev_ready = False
    for price, short, long in zip(prices, short_ma, long_ma):
        if _is_absent(short) or _is_absent(long):
            state = CrossState.UNKNOWN
            prev_ready = False
            continue

        current = next_state(state, short, long)
        if prev_ready and current is not state:
            if current is CrossState.SHORT_ABOVE:
                amount = (capital * buy_fraction) / price.close
                capital -= amount * price.close
                position += amount
                trades.append(Trade(date=price.date, type="BUY", price=price.close, amount=amount))
            else:
                amount = position
                capital += amount * price.close
                position = 0.0
                trades.append(Trade(date=price.date, type="SELL", price=price.close, amount=amount))
            logger.debug(
                "%s %s %.6f @ %.2f (capital=%.2f position=%.6f)",
                price.date, trades[-1].type, amount, price.close, capital, position,
            )

        state = current
        prev_ready = True

    logger.info(
        f"[simulate] {len(prices)} prices, {len(trades)} trades, "
        f"capital {initial_capital:.2f} -> {capital:.2f}, position {initial_position:.6f} -> {position:.6f}"
    )
    return SimulationResult(
        trades=tuple(trades),
        final_capital=capital,
        final_position=position,
        initial_capital=initial_capital,
        initial_position=initial_position,
    )


def summarize(result: SimulationResult, prices: Sequence[PricePoint]) -> PortfolioSummary:
    """Value the final holdings at the last close and compare with the starting holdings."""
    if not prices:
        raise InvalidInputError("price series is empty")
    first, last = prices[0].close, prices[-1].close
    start_value = result.initial_capital + result.initial_position * first
    final_value = result.final_state.portfolio_value(last)
    profit_loss = final_value - start_value
    return PortfolioSummary(
        final_value=final_value,
        profit_loss=profit_loss,
        return_pct=(profit_loss / start_value * 100.0) if start_value else 0.0,
        buy_count=len(result.buys),
        sell_count=len(result.sells),
    )

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from ..errors import InvalidInputError
from ..models.trade import PricePoint
from ..utils.logger import get_logger

logger = get_logger(__name__)


def synthetic_price_series(
    n: int = 365,
    start: date = date(2023, 1, 1),
    base: float = 5000.0,
    drift: float = 2.0,
    noise: float = 50.0,
    seed: int | None = None,
) -> list[PricePoint]:
    """Generate a fake daily price series for demonstration.

    Day ``i`` closes at ``base + i * drift`` plus uniform noise in ``[0, noise)``.
    The same seed always gives the same series.
    """
    if n < 1:
        raise InvalidInputError(f"series length must be at least 1, got {n}")
    if noise < 0:
        raise InvalidInputError(f"noise must be non-negative, got {noise}")

    rng = np.random.default_rng(seed)
    steps = np.arange(n)
    values = base + steps * drift + rng.random(n) * noise
    if (values <= 0).any():
        raise InvalidInputError("generated prices must stay positive; check base and drift")

    logger.debug("Generated %d synthetic prices from %s (seed=%s)", n, start.isoformat(), seed)
    return [
        PricePoint(date=(start + timedelta(days=int(i))).isoformat(), close=float(v))
        for i, v in zip(steps, values)
    ]


def closes(prices: Sequence[PricePoint]) -> list[float]:
    return [p.close for p in prices]


def to_frame(prices: Sequence[PricePoint], **series: Sequence[Optional[float]]) -> pd.DataFrame:
    """Tabulate closes plus any aligned extra series, indexed by date.

    Absent values become NaN so plotting libraries leave gaps.
    """
    index = pd.to_datetime([p.date for p in prices])
    df = pd.DataFrame({"Close": closes(prices)}, index=index)
    for name, values in series.items():
        if len(values) != len(prices):
            raise InvalidInputError(f"series {name!r} has {len(values)} values for {len(prices)} prices")
        df[name] = pd.Series([np.nan if v is None else v for v in values], index=index, dtype=float)
    df.index.name = "Date"
    return df

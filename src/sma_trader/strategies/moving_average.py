from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Iterable, Optional

from ..errors import InvalidInputError


def validate_window(window) -> int:
    if isinstance(window, bool) or not isinstance(window, Integral):
        raise InvalidInputError(f"window must be an integer, got {window!r}")
    if window <= 0:
        raise InvalidInputError(f"window must be positive, got {window}")
    return int(window)


def compute_sma(series: Iterable[float], window: int) -> list[Optional[float]]:
    """Simple moving average aligned to ``series``.

    Index ``i`` holds the mean of ``series[i - window + 1 .. i]`` once there is
    enough history, ``None`` before that. A window longer than the series gives
    an all-``None`` result.
    """
    window = validate_window(window)
    values = []
    for value in series:
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise InvalidInputError(f"series values must be finite numbers, got {value!r}")
        values.append(float(value))

    return [
        sum(values[i - window + 1 : i + 1]) / window if i >= window - 1 else None
        for i in range(len(values))
    ]

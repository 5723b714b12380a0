import math

from ..models.trade import Trade


def _missing(val) -> bool:
    return val is None or (isinstance(val, float) and math.isnan(val))


def format_currency(val):
    """
    Format a capital balance or close price as $X,XXX.XX.
    - Handles None and NaN gracefully.
    - Adds commas for thousands and fixes to 2 decimal places.
    """
    if _missing(val):
        return ""
    try:
        return f"${val:,.2f}"
    except (TypeError, ValueError):
        return str(val)


def format_percentage(val):
    """
    Format a run return as XX.XX%.
    - Handles None/NaN safely.
    """
    if _missing(val):
        return ""
    try:
        return f"{val:.2f}%"
    except (TypeError, ValueError):
        return str(val)


def format_pnl(val):
    """
    Format a run's profit/loss as signed currency.
    - Positive → $X.XX
    - Negative → -$X.XX
    - None/NaN → blank
    """
    if _missing(val):
        return ""
    try:
        return f"${val:,.2f}" if val >= 0 else f"-${abs(val):,.2f}"
    except (TypeError, ValueError):
        return str(val)


def format_amount(val, decimals: int = 4):
    if _missing(val):
        return ""
    return f"{val:.{decimals}f}"


def format_trade(trade: Trade, symbol: str = "BTC") -> str:
    """Trade log line, e.g. ``2023-01-05: BUY 0.0001 BTC at $5,012.34``."""
    return f"{trade.date}: {trade.type} {format_amount(trade.amount)} {symbol} at {format_currency(trade.price)}"


def pnl_color(val):
    if _missing(val):
        return ""
    if val < 0:
        return "color: red;"
    elif val > 0:
        return "color: green;"
    return ""

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from ..models.trade import Trade

MARKER_COLORS = {"BUY": "green", "SELL": "red"}


def add_trade_markers(fig, trades: Sequence[Trade]):
    """One marker trace per trade side, placed at the trade date and price."""
    for side, color in MARKER_COLORS.items():
        side_trades = [t for t in trades if t.type == side]
        if not side_trades:
            continue
        fig.add_trace(go.Scatter(
            x=pd.to_datetime([t.date for t in side_trades]),
            y=[t.price for t in side_trades],
            name=side,
            mode="markers",
            marker=dict(color=color, size=10, symbol="triangle-up" if side == "BUY" else "triangle-down"),
            text=[f"{t.type} {t.amount:.4f}" for t in side_trades],
        ))
    return fig

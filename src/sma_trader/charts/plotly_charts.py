import pandas as pd
import plotly.graph_objects as go

LINE_COLORS = ("#1f77b4", "#7f7f7f", "#9467bd")  # price, short SMA, long SMA


def price_chart(df: pd.DataFrame, layout_cfg: dict, title: str = "SMA Crossover Simulation"):
    """Line chart of the Close column plus every other column (the SMAs) in ``df``."""
    fig = go.Figure()
    for i, column in enumerate(df.columns):
        color = LINE_COLORS[i % len(LINE_COLORS)]
        fig.add_trace(go.Scatter(
            x=df.index, y=df[column], name="Price" if column == "Close" else column,
            mode="lines", line=dict(color=color, width=2 if column == "Close" else 1.5),
        ))
    fig.update_layout(
        title=title,
        xaxis_title="Date",
        yaxis_title="Price",
        template="plotly_white" if layout_cfg.get("theme", "light") == "light" else "plotly_dark",
        height=layout_cfg.get("height", 700),
        width=layout_cfg.get("width", 1200),
        margin=dict(l=40, r=40, t=60, b=40),
    )
    return fig

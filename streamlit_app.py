import streamlit as st
from pydantic import ValidationError

from sma_trader.charts.overlays import add_trade_markers
from sma_trader.charts.plotly_charts import price_chart
from sma_trader.config import load_config
from sma_trader.data.provider import synthetic_price_series
from sma_trader.errors import ConfigError, InvalidInputError
from sma_trader.execution.simulator import summarize
from sma_trader.models.trade import SimulationState
from sma_trader.strategies.sma_crossover import SMACrossover
from sma_trader.utils.formatters import format_currency, format_pnl, format_trade, pnl_color
from sma_trader.utils.logger import get_logger

logger = get_logger(__name__)

st.set_page_config(page_title="SMA Crossover Bot", layout="wide")
st.title("Simulated Trading Bot (SMA Crossover Strategy)")


@st.cache_data(ttl=3)
def cached_config():
    return load_config()


@st.cache_data
def cached_prices(days, start_date, base_price, drift, noise, seed):
    # Cached so button reruns keep the same synthetic history
    return synthetic_price_series(n=days, start=start_date, base=base_price, drift=drift, noise=noise, seed=seed)


try:
    app_cfg = cached_config()
except ConfigError as exc:
    st.error(str(exc))
    st.stop()
cfg = app_cfg.simulation

if "start_state" not in st.session_state:
    st.session_state.start_state = SimulationState(capital=cfg.initial_capital, position=cfg.initial_position)

col1, col2, _ = st.columns([1, 1, 4])
with col1:
    if st.button(f"Increase Capital by {format_currency(cfg.capital_step)}"):
        st.session_state.start_state = st.session_state.start_state.increase_capital(cfg.capital_step)
with col2:
    if st.button(f"Decrease Capital by {format_currency(cfg.capital_step)}"):
        st.session_state.start_state = st.session_state.start_state.decrease_capital(cfg.capital_step)

start_state = st.session_state.start_state
st.caption(f"Starting capital: {format_currency(start_state.capital)} | Starting position: {start_state.position:.4f} {cfg.symbol}")

try:
    prices = cached_prices(cfg.days, cfg.start_date, cfg.base_price, cfg.drift, cfg.noise, cfg.seed)
    strat = SMACrossover(short_window=cfg.short_window, long_window=cfg.long_window, buy_fraction=cfg.buy_fraction)
    result = strat.run(prices, start_state)
except (InvalidInputError, ValidationError) as exc:
    logger.error(f"[streamlit_app] simulation failed: {exc}")
    st.error(str(exc))
    st.stop()

summary = summarize(result, prices)

fig = price_chart(strat.frame(prices), app_cfg.chart.model_dump(), title=f"{cfg.symbol} price with {' / '.join(strat.labels)}")
add_trade_markers(fig, result.trades)
st.plotly_chart(fig, width="stretch")

st.subheader(f"Final Portfolio Value: {format_currency(summary.final_value)}")
st.markdown(
    f"### Total Profit/Loss: <span style='{pnl_color(summary.profit_loss)}'>{format_pnl(summary.profit_loss)}</span>",
    unsafe_allow_html=True,
)

st.subheader("Trade Log:")
if not result.trades:
    st.info("No crossovers in this price history.")
for trade in result.trades:
    st.markdown(f"- {format_trade(trade, cfg.symbol)}")

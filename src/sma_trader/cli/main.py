from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from ..config import SimulationConfig, load_config
from ..data.provider import synthetic_price_series
from ..errors import ConfigError, InvalidInputError
from ..execution.simulator import summarize
from ..models.trade import SimulationResult, SimulationState
from ..strategies.sma_crossover import SMACrossover
from ..utils.formatters import format_currency, format_percentage, format_pnl, format_trade
from ..utils.logger import get_logger

logger = get_logger(__name__)


def run(cfg: SimulationConfig, quiet: bool = False) -> SimulationResult:
    prices = synthetic_price_series(
        n=cfg.days, start=cfg.start_date, base=cfg.base_price,
        drift=cfg.drift, noise=cfg.noise, seed=cfg.seed,
    )
    strat = SMACrossover(short_window=cfg.short_window, long_window=cfg.long_window, buy_fraction=cfg.buy_fraction)
    result = strat.run(prices, SimulationState(capital=cfg.initial_capital, position=cfg.initial_position))
    summary = summarize(result, prices)

    if not quiet:
        print("Trade Log:")
        for trade in result.trades:
            print(f"  {format_trade(trade, cfg.symbol)}")
    print(f"Last price: {format_currency(prices[-1].close)}")
    print(f"Final Portfolio Value: {format_currency(summary.final_value)}")
    print(f"Total Profit/Loss: {format_pnl(summary.profit_loss)} ({format_percentage(summary.return_pct)})")
    print(f"Trades: {summary.buy_count} BUY / {summary.sell_count} SELL")
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate an SMA crossover strategy on synthetic prices.")
    parser.add_argument("--config", default=None, help="path to preferences YAML")
    parser.add_argument("--symbol")
    parser.add_argument("--short", type=int)
    parser.add_argument("--long", type=int)
    parser.add_argument("--days", type=int)
    parser.add_argument("--capital", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--quiet", action="store_true", help="skip the trade log, print the summary only")
    args = parser.parse_args(argv)

    overrides = {
        "symbol": args.symbol,
        "short_window": args.short,
        "long_window": args.long,
        "days": args.days,
        "initial_capital": args.capital,
        "seed": args.seed,
    }
    try:
        cfg = load_config(args.config).simulation
        cfg = SimulationConfig(**{**cfg.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})
        run(cfg, quiet=args.quiet)
    except (InvalidInputError, ConfigError, ValidationError) as exc:
        logger.error(f"[main] {exc}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

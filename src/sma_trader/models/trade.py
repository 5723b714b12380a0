from __future__ import annotations

from datetime import date as Date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PricePoint(BaseModel):
    """One daily close of the simulated asset."""

    model_config = ConfigDict(frozen=True)

    date: str
    close: float = Field(gt=0)

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: str) -> str:
        try:
            parsed = Date.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"date must be an ISO calendar date (YYYY-MM-DD), got {value!r}") from exc
        return parsed.isoformat()


class Trade(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    type: Literal["BUY", "SELL"]
    price: float = Field(gt=0)
    amount: float = Field(ge=0)

    @property
    def value(self) -> float:
        return self.amount * self.price


class SimulationState(BaseModel):
    """Starting balances for a simulation run.

    Adjustments return a new state; a run never edits the state it was given.
    """

    model_config = ConfigDict(frozen=True)

    capital: float = Field(ge=0)
    position: float = Field(default=0.0, ge=0)

    def increase_capital(self, step: float = 100.0) -> "SimulationState":
        return self.model_copy(update={"capital": self.capital + step})

    def decrease_capital(self, step: float = 100.0) -> "SimulationState":
        # Floor at zero, never a negative balance
        return self.model_copy(update={"capital": max(0.0, self.capital - step)})

    def portfolio_value(self, price: float) -> float:
        return self.capital + self.position * price


class SimulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    trades: tuple[Trade, ...] = ()
    final_capital: float
    final_position: float = Field(ge=0)
    initial_capital: float
    initial_position: float = Field(ge=0)

    @property
    def final_state(self) -> SimulationState:
        return SimulationState(capital=self.final_capital, position=self.final_position)

    @property
    def buys(self) -> list[Trade]:
        return [t for t in self.trades if t.type == "BUY"]

    @property
    def sells(self) -> list[Trade]:
        return [t for t in self.trades if t.type == "SELL"]


class PortfolioSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    final_value: float
    profit_loss: float
    return_pct: float
    buy_count: int
    sell_count: int

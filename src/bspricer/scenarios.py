"""Moneyness scenario analysis.

Builds independent engines for the same market at three strikes: at the
money, an in-the-money call and an out-of-the-money call.
"""

from __future__ import annotations
from dataclasses import dataclass

from .black_scholes import PricingEngine
from .config import DisplayConfig

__all__ = ["Scenario", "moneyness_scenarios"]


@dataclass(frozen=True)
class Scenario:
    label: str
    engine: PricingEngine

    @property
    def strike(self) -> float:
        return self.engine.K


def moneyness_scenarios(
    S: float, T: float, r: float, sigma: float,
    display: DisplayConfig = DisplayConfig(),
) -> list[Scenario]:
    """Return ATM (K = S), ITM call and OTM call scenarios, in that order."""
    return [
        Scenario("At-the-Money", PricingEngine(S, S, T, r, sigma)),
        Scenario("In-the-Money Call",
                 PricingEngine(S, S * display.itm_strike_ratio, T, r, sigma)),
        Scenario("Out-of-the-Money Call",
                 PricingEngine(S, S * display.otm_strike_ratio, T, r, sigma)),
    ]

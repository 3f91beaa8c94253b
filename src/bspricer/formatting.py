"""Plain-text rendering of engine results.

Every function here is pure: it takes values and a precision and returns a
string.  Nothing prints.
"""

from __future__ import annotations
from typing import Iterable

from .black_scholes import PricingEngine
from .config import GreeksConvention
from .core import CALL, PUT
from .scenarios import Scenario

__all__ = ["format_value", "format_report", "format_scenarios"]


def format_value(x: float, precision: int = 4) -> str:
    """Fixed-point string with ``precision`` decimals."""
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return f"{x:.{precision}f}"


def _unit_labels(conv: GreeksConvention) -> tuple[str, str, str]:
    if conv.days_per_year == 365.0:
        theta = "per day"
    elif conv.days_per_year == 1.0:
        theta = "per year"
    else:
        theta = f"per 1/{conv.days_per_year:g} year"
    vega = "per 1% vol change" if conv.vol_unit == 100.0 else f"per {1 / conv.vol_unit:g} vol"
    rho = "per 1% rate change" if conv.rate_unit == 100.0 else f"per {1 / conv.rate_unit:g} rate"
    return theta, vega, rho


def format_report(engine: PricingEngine, precision: int = 4) -> str:
    """Parameters, prices and Greeks of one engine, one item per line."""
    def f(x):
        return format_value(x, precision)

    theta_u, vega_u, rho_u = _unit_labels(engine.convention)
    lines = [
        "=== Black-Scholes Option Pricing Results ===",
        "Parameters:",
        f"  Stock Price (S): ${f(engine.S)}",
        f"  Strike Price (K): ${f(engine.K)}",
        f"  Time to Expiry (T): {f(engine.T)} years",
        f"  Risk-free Rate (r): {f(engine.r * 100)}%",
        f"  Volatility (sigma): {f(engine.sigma * 100)}%",
        "",
        "Option Prices:",
        f"  Call Price: ${f(engine.call_price())}",
        f"  Put Price: ${f(engine.put_price())}",
        "",
        "Greeks:",
        f"  Call Delta: {f(engine.delta(CALL))}",
        f"  Put Delta: {f(engine.delta(PUT))}",
        f"  Gamma: {f(engine.gamma())}",
        f"  Call Theta: {f(engine.theta(CALL))} ({theta_u})",
        f"  Put Theta: {f(engine.theta(PUT))} ({theta_u})",
        f"  Vega: {f(engine.vega())} ({vega_u})",
        f"  Call Rho: {f(engine.rho(CALL))} ({rho_u})",
        f"  Put Rho: {f(engine.rho(PUT))} ({rho_u})",
    ]
    return "\n".join(lines)


def format_scenarios(scenarios: Iterable[Scenario], precision: int = 4) -> str:
    """Scenario analysis block: put price shown for the ATM case only."""
    def f(x):
        return format_value(x, precision)

    lines = ["=== Scenario Analysis ==="]
    for sc in scenarios:
        eng = sc.engine
        lines.append(f"{sc.label} (K = ${f(sc.strike)}):")
        lines.append(f"  Call Price: ${f(eng.call_price())}")
        if eng.K == eng.S:
            lines.append(f"  Put Price: ${f(eng.put_price())}")
    return "\n".join(lines)

"""Model validation checks for the closed-form engine.

Put-call parity residuals, analytic-versus-bump-and-reprice Greeks, and
price stress-testing over a grid of market shocks.
"""

from __future__ import annotations

import math
import numpy as np

from .black_scholes import PricingEngine
from .config import BumpConfig
from .core import OptionKind, CALL
from .risk import numerical_greeks, scenario_grid

__all__ = [
    "parity_residual",
    "check_greeks",
    "stress_test",
]


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------

def parity_residual(engine: PricingEngine) -> float:
    """``C - P - (S - K e^{-rT})``; zero up to rounding for a live option.

    At expiry the forward term uses ``T = 0``, so the residual is also zero
    there (``max(S-K,0) - max(K-S,0) == S - K``).
    """
    T = max(engine.T, 0.0)
    forward = engine.S - engine.K * math.exp(-engine.r * T)
    return engine.call_price() - engine.put_price() - forward


# ---------------------------------------------------------------------------
# Analytic vs numerical Greeks
# ---------------------------------------------------------------------------

def check_greeks(
    engine: PricingEngine,
    kind: OptionKind | str = CALL,
    *,
    bumps: BumpConfig = BumpConfig(),
) -> dict:
    """Compare the engine's closed-form Greeks with finite differences.

    The numerical Greeks reprice fresh engines built from bumped inputs,
    in the engine's own unit convention.

    Returns
    -------
    dict
        One entry per Greek, ``{"analytic", "numerical", "abs_error"}``,
        plus ``"max_error"``.
    """
    kind = OptionKind.coerce(kind)
    convention = engine.convention

    def _pricer(S, K, T, r, sigma, k):
        return PricingEngine(S, K, T, r, sigma, convention=convention).price(k)

    analytic = engine.greeks(kind)
    numerical = numerical_greeks(
        _pricer, engine.S, engine.K, engine.T, engine.r, engine.sigma, kind,
        bumps=bumps, convention=convention,
    )

    results: dict = {}
    for name, value in analytic.items():
        results[name] = {
            "analytic": value,
            "numerical": numerical[name],
            "abs_error": abs(value - numerical[name]),
        }
    results["max_error"] = max(v["abs_error"] for v in results.values())
    return results


# ---------------------------------------------------------------------------
# Stress testing
# ---------------------------------------------------------------------------

def stress_test(
    engine: PricingEngine,
    kind: OptionKind | str,
    spot_shocks: np.ndarray,
    vol_shocks: np.ndarray,
    rate_shocks: np.ndarray,
) -> np.ndarray:
    """Evaluate option price across a 3-D grid of market shocks.

    Parameters
    ----------
    spot_shocks : array, shape (n_spot,)
        Multiplicative shocks to S (e.g. [0.8, 1.0, 1.2]).
    vol_shocks : array, shape (n_vol,)
        Additive shocks to sigma (e.g. [-0.05, 0, 0.05]).
    rate_shocks : array, shape (n_rate,)
        Additive shocks to r.

    Returns
    -------
    ndarray, shape (n_spot, n_vol, n_rate)
    """
    kind = OptionKind.coerce(kind)
    spot_shocks = np.asarray(spot_shocks, dtype=float)
    vol_shocks = np.asarray(vol_shocks, dtype=float)
    rate_shocks = np.asarray(rate_shocks, dtype=float)

    spots = engine.S * spot_shocks
    vols = np.maximum(engine.sigma + vol_shocks, 1e-6)

    layers = [
        scenario_grid(engine.K, engine.T, engine.r + dr, kind, spots, vols)["prices"]
        for dr in rate_shocks
    ]
    return np.stack(layers, axis=-1)

"""Bump-and-reprice risk.

Numerical Greeks via central finite differences that work with **any**
pricer callable, reported in the same units as the analytic Greeks, plus
vectorised spot x vol scenario grids.
"""

from __future__ import annotations

import numpy as np
from typing import Callable

from .black_scholes_vec import bs_price_vec, bs_greeks_vec
from .config import BumpConfig, GreeksConvention, DEFAULT_CONVENTION
from .core import OptionKind

__all__ = [
    "numerical_greeks",
    "scenario_grid",
]

PricerFunc = Callable[..., float]


# ---------------------------------------------------------------------------
# Numerical Greeks
# ---------------------------------------------------------------------------

def numerical_greeks(
    pricer_func: PricerFunc,
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    kind: str,
    *,
    bumps: BumpConfig = BumpConfig(),
    convention: GreeksConvention = DEFAULT_CONVENTION,
) -> dict[str, float]:
    """Compute Greeks via central finite differences on an arbitrary pricer.

    Parameters
    ----------
    pricer_func : callable
        ``pricer_func(S, K, T, r, sigma, kind) -> float``.
    S, K, T, r, sigma : float
        Market and instrument parameters.
    kind : str
        ``"call"`` or ``"put"``.
    bumps : BumpConfig
        Spot bump is relative; vol, rate and time bumps are absolute.
    convention : GreeksConvention
        Units of the returned theta, vega and rho.

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``.
        Theta is zero when ``T`` is within one time bump of expiry.
    """
    P0 = pricer_func(S, K, T, r, sigma, kind)

    # --- Delta & Gamma (spot bump) ---
    eps_S = bumps.spot_rel * S
    P_up = pricer_func(S + eps_S, K, T, r, sigma, kind)
    P_dn = pricer_func(S - eps_S, K, T, r, sigma, kind)
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump) ---
    eps_v = bumps.vol_abs
    P_vup = pricer_func(S, K, T, r, sigma + eps_v, kind)
    sig_dn = max(sigma - eps_v, 1e-6)
    P_vdn = pricer_func(S, K, T, r, sig_dn, kind)
    vega = (P_vup - P_vdn) / ((sigma + eps_v) - sig_dn)

    # --- Theta (price change as calendar time passes) ---
    dt = bumps.time_abs
    if T > dt:
        P_later = pricer_func(S, K, T - dt, r, sigma, kind)
        P_earlier = pricer_func(S, K, T + dt, r, sigma, kind)
        theta_val = (P_later - P_earlier) / (2.0 * dt)
    else:
        theta_val = 0.0

    # --- Rho (rate bump) ---
    eps_r = bumps.rate_abs
    P_rup = pricer_func(S, K, T, r + eps_r, sigma, kind)
    P_rdn = pricer_func(S, K, T, r - eps_r, sigma, kind)
    rho = (P_rup - P_rdn) / (2.0 * eps_r)

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega / convention.vol_unit),
        "theta": float(theta_val / convention.days_per_year),
        "rho": float(rho / convention.rate_unit),
    }


# ---------------------------------------------------------------------------
# Scenario grid
# ---------------------------------------------------------------------------

def scenario_grid(
    K: float,
    T: float,
    r: float,
    kind: OptionKind | str,
    spot_range: np.ndarray,
    vol_range: np.ndarray,
    *,
    convention: GreeksConvention = DEFAULT_CONVENTION,
) -> dict:
    """Price and delta over a spot x vol grid in one vectorised call.

    Spots run down the rows and vols across the columns.  Expired options
    (``T <= 0``) give intrinsic value and the expiry delta everywhere.

    Returns
    -------
    dict
        ``"spot_values"``, ``"vol_values"``, ``"prices"`` and ``"delta"``
        (both shape n_spot x n_vol).
    """
    spots = np.asarray(spot_range, dtype=float).ravel()
    vols = np.asarray(vol_range, dtype=float).ravel()
    S_grid, sig_grid = spots[:, None], vols[None, :]

    prices = bs_price_vec(S_grid, K, T, r, sig_grid, kind)
    greeks = bs_greeks_vec(S_grid, K, T, r, sig_grid, kind, convention=convention)

    return {
        "spot_values": spots,
        "vol_values": vols,
        "prices": prices,
        "delta": greeks["delta"],
    }

# black_scholes_vec.py
# Vectorised Black-Scholes prices and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Expired entries (T <= 0) follow the same boundary values as PricingEngine.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

from .config import GreeksConvention, DEFAULT_CONVENTION
from .core import OptionKind, CALL

_N = norm.cdf   # vectorised standard-normal CDF
_n = norm.pdf   # vectorised standard-normal PDF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _broadcast(S, K, T, r, sigma):
    arrays = [np.asarray(x, dtype=float) for x in (S, K, T, r, sigma)]
    return np.broadcast_arrays(*arrays)


def _d1_d2(S, K, T, r, sigma):
    """Compute d1, d2 arrays on the live entries; expired entries get 0."""
    live = T > 0
    T_safe = np.where(live, T, 1.0)
    sig_safe = np.where(live, sigma, 1.0)
    sig_sqrt_T = sig_safe * np.sqrt(T_safe)
    with np.errstate(divide="ignore", invalid="ignore"):
        d1 = (np.log(S / K) + (r + 0.5 * sig_safe * sig_safe) * T_safe) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return np.where(live, d1, 0.0), np.where(live, d2, 0.0), live


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind is a call."""
    kind = np.asarray(kind, dtype=object)
    if kind.ndim == 0:
        return np.bool_(OptionKind.coerce(kind.item()) is CALL)
    return np.array(
        [OptionKind.coerce(k) is CALL for k in kind.flat], dtype=bool
    ).reshape(kind.shape)


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, T, r, sigma, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    ``kind`` is a tag or an array of tags (``"call"`` / ``"put"``).

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    S, K, T, r, sigma = _broadcast(S, K, T, r, sigma)
    d1, d2, live = _d1_d2(S, K, T, r, sigma)
    disc_r = np.exp(-r * np.where(live, T, 0.0))

    call_px = np.where(live, S * _N(d1) - disc_r * K * _N(d2), np.maximum(S - K, 0.0))
    put_px  = np.where(live, disc_r * K * _N(-d2) - S * _N(-d1), np.maximum(K - S, 0.0))

    return np.where(_is_call(kind), call_px, put_px)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def bs_greeks_vec(
    S, K, T, r, sigma, kind,
    *, convention: GreeksConvention = DEFAULT_CONVENTION,
) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes Greeks.

    Returns dict with keys: delta, gamma, vega, theta, rho, in the units
    of ``convention`` (daily theta, per-1% vega and rho by default).
    """
    S, K, T, r, sigma = _broadcast(S, K, T, r, sigma)
    d1, d2, live = _d1_d2(S, K, T, r, sigma)
    T_safe = np.where(live, T, 1.0)
    sig_safe = np.where(live, sigma, 1.0)
    sqrt_T = np.sqrt(T_safe)
    disc_r = np.exp(-r * T_safe)
    n_d1 = _n(d1)
    is_call = _is_call(kind)

    # Common
    gamma = np.where(live, n_d1 / (S * sig_safe * sqrt_T), 0.0)
    vega  = np.where(live, S * n_d1 * sqrt_T / convention.vol_unit, 0.0)

    decay = -S * n_d1 * sig_safe / (2 * sqrt_T)

    # Call-specific
    delta_c = np.where(live, _N(d1), np.where(S > K, 1.0, 0.0))
    theta_c = decay - r * K * disc_r * _N(d2)
    rho_c   = K * T_safe * disc_r * _N(d2)

    # Put-specific
    delta_p = np.where(live, _N(d1) - 1.0, np.where(S < K, -1.0, 0.0))
    theta_p = decay + r * K * disc_r * _N(-d2)
    rho_p   = -K * T_safe * disc_r * _N(-d2)

    delta = np.where(is_call, delta_c, delta_p)
    theta = np.where(live, np.where(is_call, theta_c, theta_p) / convention.days_per_year, 0.0)
    rho   = np.where(live, np.where(is_call, rho_c, rho_p) / convention.rate_unit, 0.0)

    return {"delta": delta, "gamma": gamma, "vega": vega, "theta": theta, "rho": rho}

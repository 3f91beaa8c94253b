"""Closed-form Black-Scholes pricing engine for European calls and puts.

The engine holds five scalars (spot, strike, time to expiry in years,
continuously-compounded rate, volatility) and evaluates prices and Greeks
on demand.  Every query branches only on whether the option has expired
(``T <= 0``); on that branch prices collapse to intrinsic value and the
Greeks to their limiting values.

Theta is reported per calendar day and vega / rho per one percentage
point by default; see :class:`~bspricer.config.GreeksConvention`.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

from .config import GreeksConvention, DEFAULT_CONVENTION
from .core import OptionKind, CALL, validate_inputs
from .distributions import norm_cdf as _N, norm_pdf as _n

__all__ = ["compute_d1", "compute_d2", "PricingEngine"]


def compute_d1(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """``(ln(S/K) + (r + sigma^2/2) T) / (sigma sqrt T)``.  Requires T > 0."""
    return (math.log(S / K) + (r + 0.5 * sigma * sigma) * T) / (sigma * math.sqrt(T))


def compute_d2(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """``d1 - sigma sqrt T``.  Requires T > 0."""
    return compute_d1(S, K, T, r, sigma) - sigma * math.sqrt(T)


@dataclass(frozen=True)
class PricingEngine:
    """Black-Scholes price and Greeks for one parameter set.

    Construction does not validate.  Inputs outside the domain fail only
    when a live option is queried: ``math.log`` raises ``ValueError`` for
    ``S/K <= 0`` and ``sigma == 0`` raises ``ZeroDivisionError``.  Use
    :meth:`validated` to reject them up front with ``InvalidParameterError``.

    Parameters
    ----------
    S : float
        Spot price of the underlying.
    K : float
        Strike price.
    T : float
        Time to expiry in years; ``T <= 0`` means expired.
    r : float
        Continuously-compounded risk-free rate.
    sigma : float
        Annualised volatility.
    convention : GreeksConvention
        Units for theta, vega and rho (keyword only).
    """
    S: float
    K: float
    T: float
    r: float
    sigma: float
    convention: GreeksConvention = field(default=DEFAULT_CONVENTION, kw_only=True)

    @classmethod
    def validated(
        cls, S: float, K: float, T: float, r: float, sigma: float,
        *, convention: GreeksConvention = DEFAULT_CONVENTION,
    ) -> PricingEngine:
        """Build an engine, raising ``InvalidParameterError`` on bad inputs."""
        validate_inputs(S, K, T, r, sigma)
        return cls(S, K, T, r, sigma, convention=convention)

    # ------------------------------------------------------------------
    # Derived quantities (recomputed on every access)
    # ------------------------------------------------------------------
    @property
    def expired(self) -> bool:
        return self.T <= 0

    @property
    def d1(self) -> float:
        return compute_d1(self.S, self.K, self.T, self.r, self.sigma)

    @property
    def d2(self) -> float:
        return compute_d2(self.S, self.K, self.T, self.r, self.sigma)

    def _d1_d2(self) -> tuple[float, float]:
        d1 = self.d1
        return d1, d1 - self.sigma * math.sqrt(self.T)

    # ------------------------------------------------------------------
    # Prices
    # ------------------------------------------------------------------
    def call_price(self) -> float:
        if self.expired:
            return max(self.S - self.K, 0.0)
        d1, d2 = self._d1_d2()
        return self.S * _N(d1) - self.K * math.exp(-self.r * self.T) * _N(d2)

    def put_price(self) -> float:
        if self.expired:
            return max(self.K - self.S, 0.0)
        d1, d2 = self._d1_d2()
        return self.K * math.exp(-self.r * self.T) * _N(-d2) - self.S * _N(-d1)

    def price(self, kind: OptionKind | str) -> float:
        if OptionKind.coerce(kind) is CALL:
            return self.call_price()
        return self.put_price()

    # ------------------------------------------------------------------
    # Greeks
    # ------------------------------------------------------------------
    def delta(self, kind: OptionKind | str) -> float:
        is_call = OptionKind.coerce(kind) is CALL
        if self.expired:
            if is_call:
                return 1.0 if self.S > self.K else 0.0
            return -1.0 if self.S < self.K else 0.0
        N_d1 = _N(self.d1)
        return N_d1 if is_call else N_d1 - 1.0

    def gamma(self) -> float:
        """Same for calls and puts."""
        if self.expired:
            return 0.0
        return _n(self.d1) / (self.S * self.sigma * math.sqrt(self.T))

    def theta(self, kind: OptionKind | str) -> float:
        """Time decay, per calendar day under the default convention."""
        is_call = OptionKind.coerce(kind) is CALL
        if self.expired:
            return 0.0
        d1, d2 = self._d1_d2()
        sqrt_T = math.sqrt(self.T)
        disc_r = math.exp(-self.r * self.T)
        decay = -self.S * _n(d1) * self.sigma / (2.0 * sqrt_T)
        if is_call:
            theta = decay - self.r * self.K * disc_r * _N(d2)
        else:
            theta = decay + self.r * self.K * disc_r * _N(-d2)
        return theta / self.convention.days_per_year

    def vega(self) -> float:
        """Sensitivity to volatility, per 1% vol under the default convention."""
        if self.expired:
            return 0.0
        return self.S * _n(self.d1) * math.sqrt(self.T) / self.convention.vol_unit

    def rho(self, kind: OptionKind | str) -> float:
        """Sensitivity to the rate, per 1% rate under the default convention."""
        is_call = OptionKind.coerce(kind) is CALL
        if self.expired:
            return 0.0
        _, d2 = self._d1_d2()
        KT_disc = self.K * self.T * math.exp(-self.r * self.T)
        if is_call:
            rho = KT_disc * _N(d2)
        else:
            rho = -KT_disc * _N(-d2)
        return rho / self.convention.rate_unit

    def greeks(self, kind: OptionKind | str) -> dict[str, float]:
        return {
            "delta": self.delta(kind),
            "gamma": self.gamma(),
            "vega": self.vega(),
            "theta": self.theta(kind),
            "rho": self.rho(kind),
        }

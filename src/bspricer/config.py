"""Unit conventions, finite-difference bumps and display settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GreeksConvention:
    """Scaling applied to theta, vega and rho.

    Parameters
    ----------
    days_per_year : float
        Theta is divided by this (365 gives decay per calendar day,
        1 gives per-year theta).
    vol_unit : float
        Vega is divided by this (100 gives the change per one
        volatility point).
    rate_unit : float
        Rho is divided by this (100 gives the change per one
        percentage point of rate).
    """
    days_per_year: float = 365.0
    vol_unit: float = 100.0
    rate_unit: float = 100.0

    def __post_init__(self):
        for name in ("days_per_year", "vol_unit", "rate_unit"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


DEFAULT_CONVENTION = GreeksConvention()
ANNUAL = GreeksConvention(days_per_year=1.0, vol_unit=1.0, rate_unit=1.0)


@dataclass(frozen=True)
class BumpConfig:
    """Bump sizes for bump-and-reprice Greeks.

    ``spot_rel`` is relative to S; the others are absolute.  ``time_abs``
    is one calendar day so numerical theta lines up with the daily
    analytic theta.
    """
    spot_rel: float = 0.01
    vol_abs: float = 1e-4
    rate_abs: float = 1e-4
    time_abs: float = 1.0 / 365.0

    def __post_init__(self):
        for name in ("spot_rel", "vol_abs", "rate_abs", "time_abs"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class DisplayConfig:
    precision: int = 4
    itm_strike_ratio: float = 0.9    # K / S for the in-the-money call
    otm_strike_ratio: float = 1.1    # K / S for the out-of-the-money call

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if not 0 < self.itm_strike_ratio < 1:
            raise ValueError(
                f"itm_strike_ratio must be in (0, 1), got {self.itm_strike_ratio}"
            )
        if self.otm_strike_ratio <= 1:
            raise ValueError(
                f"otm_strike_ratio must be > 1, got {self.otm_strike_ratio}"
            )

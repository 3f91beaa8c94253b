# bspricer — Black-Scholes European option pricing and Greeks
# Public API

# Core types
from .core import OptionKind, CALL, PUT, InvalidParameterError, validate_inputs
from .config import (
    GreeksConvention, DEFAULT_CONVENTION, ANNUAL, BumpConfig, DisplayConfig,
)

# Closed-form engine
from .distributions import norm_cdf, norm_pdf
from .black_scholes import PricingEngine, compute_d1, compute_d2

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_greeks_vec

# Risk & validation
from .risk import numerical_greeks, scenario_grid
from .validation import parity_residual, check_greeks, stress_test

# Scenario analysis & display
from .scenarios import Scenario, moneyness_scenarios
from .formatting import format_value, format_report, format_scenarios

__all__ = [
    # Core
    "OptionKind", "CALL", "PUT", "InvalidParameterError", "validate_inputs",
    "GreeksConvention", "DEFAULT_CONVENTION", "ANNUAL", "BumpConfig",
    "DisplayConfig",
    # Engine
    "norm_cdf", "norm_pdf", "PricingEngine", "compute_d1", "compute_d2",
    # Vectorised
    "bs_price_vec", "bs_greeks_vec",
    # Risk & validation
    "numerical_greeks", "scenario_grid",
    "parity_residual", "check_greeks", "stress_test",
    # Scenarios & display
    "Scenario", "moneyness_scenarios",
    "format_value", "format_report", "format_scenarios",
]

__version__ = "0.1.0"

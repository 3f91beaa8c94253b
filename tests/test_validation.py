"""Tests for the model validation checks."""

import numpy as np
import pytest
from bspricer import PricingEngine, CALL, PUT, ANNUAL
from bspricer.validation import parity_residual, check_greeks, stress_test

OPT = PricingEngine(S=100, K=100, T=1.0, r=0.05, sigma=0.2)


class TestParityResidual:
    def test_live_option(self):
        assert abs(parity_residual(OPT)) < 1e-10

    @pytest.mark.parametrize("S", [80.0, 100.0, 120.0])
    def test_expired_option(self, S):
        eng = PricingEngine(S=S, K=100, T=0.0, r=0.05, sigma=0.2)
        assert parity_residual(eng) == 0.0


class TestCheckGreeks:
    @pytest.mark.parametrize("kind", [CALL, PUT])
    def test_analytic_matches_numerical(self, kind):
        result = check_greeks(OPT, kind)
        assert result["max_error"] < 1e-3
        assert set(result) == {"delta", "gamma", "vega", "theta", "rho", "max_error"}

    def test_short_dated_otm(self):
        eng = PricingEngine(S=100, K=105, T=0.25, r=0.05, sigma=0.2)
        result = check_greeks(eng, "put")
        assert result["max_error"] < 1e-3
        assert result["delta"]["analytic"] == eng.delta(PUT)

    def test_uses_engine_convention(self):
        eng = PricingEngine(100, 100, 1.0, 0.05, 0.2, convention=ANNUAL)
        result = check_greeks(eng, CALL)
        assert abs(result["vega"]["numerical"] - 37.524) < 1e-2
        assert result["vega"]["abs_error"] < 1e-3


class TestStressTest:
    def test_output_shape(self):
        spots = np.array([0.9, 1.0, 1.1])
        vols = np.array([-0.05, 0.0, 0.05])
        rates = np.array([-0.01, 0.0, 0.01])
        result = stress_test(OPT, CALL, spots, vols, rates)
        assert result.shape == (3, 3, 3)

    def test_unshocked_centre(self):
        result = stress_test(OPT, PUT, [1.0], [0.0], [0.0])
        assert abs(result[0, 0, 0] - OPT.put_price()) < 1e-10

    def test_call_monotone_in_spot(self):
        spots = np.array([0.8, 0.9, 1.0, 1.1, 1.2])
        vols = np.array([0.0])
        rates = np.array([0.0])
        result = stress_test(OPT, CALL, spots, vols, rates)
        prices = result[:, 0, 0]
        assert np.all(np.diff(prices) > 0)

    def test_vol_floor(self):
        result = stress_test(OPT, CALL, [1.0], [-1.0], [0.0])
        assert np.isfinite(result[0, 0, 0])

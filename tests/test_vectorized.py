"""Tests for vectorised Black-Scholes pricing."""

import numpy as np
import pytest
from bspricer import PricingEngine, CALL, PUT, ANNUAL
from bspricer.black_scholes_vec import bs_price_vec, bs_greeks_vec


# ---------------------------------------------------------------------------
# bs_price_vec matches the scalar engine
# ---------------------------------------------------------------------------
class TestBSPriceVec:
    def test_single_call_matches_scalar(self):
        expected = PricingEngine(100, 100, 1.0, 0.05, 0.2).call_price()
        got = bs_price_vec(100, 100, 1.0, 0.05, 0.2, "call")
        assert abs(float(got) - expected) < 1e-10

    def test_single_put_matches_scalar(self):
        expected = PricingEngine(100, 105, 0.25, 0.05, 0.2).put_price()
        got = bs_price_vec(100, 105, 0.25, 0.05, 0.2, PUT)
        assert abs(float(got) - expected) < 1e-10

    def test_array_of_spots(self):
        spots = np.array([90.0, 100.0, 110.0])
        prices = bs_price_vec(spots, 100, 1.0, 0.05, 0.2, "call")
        assert prices.shape == (3,)
        for i, S in enumerate(spots):
            assert abs(prices[i] - PricingEngine(S, 100, 1.0, 0.05, 0.2).call_price()) < 1e-10

    def test_array_of_strikes(self):
        strikes = np.linspace(80, 120, 50)
        prices = bs_price_vec(100, strikes, 1.0, 0.05, 0.2, "call")
        assert prices.shape == (50,)
        # Prices should be monotonically decreasing for calls
        assert np.all(np.diff(prices) < 0)

    def test_mixed_kinds(self):
        prices = bs_price_vec(100, 100, 1.0, 0.05, 0.2, ["call", "put"])
        eng = PricingEngine(100, 100, 1.0, 0.05, 0.2)
        np.testing.assert_allclose(prices, [eng.call_price(), eng.put_price()], atol=1e-10)

    def test_expired_entries_are_intrinsic(self):
        T = np.array([0.0, 0.5, 0.0])
        S = np.array([100.0, 100.0, 80.0])
        calls = bs_price_vec(S, 90, T, 0.05, 0.2, "call")
        puts = bs_price_vec(S, 90, T, 0.05, 0.2, "put")
        assert calls[0] == 10.0
        assert calls[2] == 0.0
        assert puts[2] == 10.0
        assert abs(calls[1] - PricingEngine(100, 90, 0.5, 0.05, 0.2).call_price()) < 1e-10

    def test_bad_kind(self):
        with pytest.raises(ValueError):
            bs_price_vec(100, 100, 1.0, 0.05, 0.2, "digital")


# ---------------------------------------------------------------------------
# bs_greeks_vec matches the scalar engine
# ---------------------------------------------------------------------------
class TestBSGreeksVec:
    @pytest.mark.parametrize("kind", [CALL, PUT])
    def test_scalar_greeks_match(self, kind):
        expected = PricingEngine(100, 105, 0.25, 0.05, 0.2).greeks(kind)
        got = bs_greeks_vec(100, 105, 0.25, 0.05, 0.2, kind)
        for key in ("delta", "gamma", "vega", "theta", "rho"):
            assert abs(float(got[key]) - expected[key]) < 1e-10, f"{key} mismatch"

    def test_annual_convention(self):
        expected = PricingEngine(100, 100, 1.0, 0.05, 0.2, convention=ANNUAL).greeks(CALL)
        got = bs_greeks_vec(100, 100, 1.0, 0.05, 0.2, "call", convention=ANNUAL)
        for key in ("vega", "theta", "rho"):
            assert abs(float(got[key]) - expected[key]) < 1e-10, f"{key} mismatch"

    def test_vectorized_greeks(self):
        spots = np.array([90.0, 100.0, 110.0])
        got = bs_greeks_vec(spots, 100, 1.0, 0.05, 0.2, "call")
        assert got["delta"].shape == (3,)
        # Call delta should increase with spot
        assert np.all(np.diff(got["delta"]) > 0)

    def test_expired_boundary(self):
        S = np.array([100.0, 80.0])
        calls = bs_greeks_vec(S, 90, 0.0, 0.05, 0.2, "call")
        puts = bs_greeks_vec(S, 90, 0.0, 0.05, 0.2, "put")
        np.testing.assert_array_equal(calls["delta"], [1.0, 0.0])
        np.testing.assert_array_equal(puts["delta"], [0.0, -1.0])
        for key in ("gamma", "vega", "theta", "rho"):
            np.testing.assert_array_equal(calls[key], [0.0, 0.0])
            np.testing.assert_array_equal(puts[key], [0.0, 0.0])

    def test_delta_spread(self):
        spots = np.linspace(60, 140, 17)
        c = bs_greeks_vec(spots, 100, 0.75, 0.03, 0.25, "call")["delta"]
        p = bs_greeks_vec(spots, 100, 0.75, 0.03, 0.25, "put")["delta"]
        np.testing.assert_allclose(c - p, 1.0, atol=1e-10)

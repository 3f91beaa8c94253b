"""Tests for plain-text rendering."""

import pytest
from bspricer import PricingEngine, ANNUAL
from bspricer.formatting import format_value, format_report, format_scenarios
from bspricer.scenarios import moneyness_scenarios

OPT = PricingEngine(S=100, K=105, T=0.25, r=0.05, sigma=0.2)


class TestFormatValue:
    def test_default_four_places(self):
        assert format_value(2.477901874) == "2.4779"

    def test_precision(self):
        assert format_value(1.0, 2) == "1.00"
        assert format_value(-0.0256428801, 6) == "-0.025643"
        assert format_value(10.4, 0) == "10"

    def test_negative_precision(self):
        with pytest.raises(ValueError):
            format_value(1.0, -1)


class TestFormatReport:
    def test_contents(self):
        text = format_report(OPT)
        assert "Stock Price (S): $100.0000" in text
        assert "Risk-free Rate (r): 5.0000%" in text
        assert "Volatility (sigma): 20.0000%" in text
        assert "Call Price: $2.4779" in text
        assert "Put Price: $6.1736" in text
        assert "Call Delta: 0.3772" in text
        assert "Put Delta: -0.6228" in text
        assert "Gamma: 0.0380" in text
        assert "Call Theta: -0.0256 (per day)" in text
        assert "Vega: 0.1899 (per 1% vol change)" in text
        assert "Put Rho: -0.1711 (per 1% rate change)" in text

    def test_expired(self):
        text = format_report(PricingEngine(100, 90, 0.0, 0.05, 0.2), precision=2)
        assert "Call Price: $10.00" in text
        assert "Put Price: $0.00" in text
        assert "Call Delta: 1.00" in text

    def test_annual_unit_labels(self):
        eng = PricingEngine(100, 105, 0.25, 0.05, 0.2, convention=ANNUAL)
        text = format_report(eng)
        assert "(per year)" in text
        assert "(per day)" not in text
        assert "per 1% vol change" not in text


class TestFormatScenarios:
    def test_block(self):
        text = format_scenarios(moneyness_scenarios(100.0, 1.0, 0.05, 0.2))
        lines = text.splitlines()
        assert lines[0] == "=== Scenario Analysis ==="
        assert "At-the-Money (K = $100.0000):" in lines
        assert "  Call Price: $10.4506" in lines
        assert "  Put Price: $5.5735" in lines
        assert "In-the-Money Call (K = $90.0000):" in lines
        assert "Out-of-the-Money Call (K = $110.0000):" in lines
        # put price only shown for the ATM case
        assert sum(line.startswith("  Put Price") for line in lines) == 1

    def test_precision_applies_to_every_line(self):
        text = format_scenarios(moneyness_scenarios(100.0, 1.0, 0.05, 0.2), precision=2)
        lines = text.splitlines()
        assert "At-the-Money (K = $100.00):" in lines
        assert "  Call Price: $10.45" in lines
        assert "  Put Price: $5.57" in lines

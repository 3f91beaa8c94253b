#!/usr/bin/env python3
"""Batch-price a book of European options with the closed-form engine.

Usage
-----
    python scripts/price_book.py --input book.csv --output prices.csv
    python scripts/price_book.py --input book.csv --output prices.json --greeks

Input CSV format
----------------
    id,S,K,T,r,sigma,kind
    1,100,105,0.25,0.05,0.20,call
    2,100,95,1.0,0.05,0.25,put
    3,100,90,0.0,0.05,0.20,call

Output
------
    CSV or JSON with columns: id, price, and with --greeks
    delta, gamma, vega, theta, rho (daily theta, per-1% vega and rho).
    Rows that fail validation get ``price`` empty and an ``error`` column.
"""

from __future__ import annotations
import argparse
import csv
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from bspricer.black_scholes import PricingEngine
from bspricer.core import OptionKind

logger = logging.getLogger("price_book")


def _number(row: dict, name: str) -> float:
    """Read a numeric column; short rows leave trailing columns as None."""
    raw = row.get(name)
    if raw is None or not raw.strip():
        raise ValueError(f"missing value for column {name!r}")
    return float(raw)


def _price_row(row: dict, compute_greeks: bool) -> dict:
    """Price a single book row and return result dict."""
    rid = row.get("id") or ""
    S, K, T, r, sigma = (_number(row, name) for name in ("S", "K", "T", "r", "sigma"))
    kind = OptionKind.coerce(row.get("kind") or "call")

    engine = PricingEngine.validated(S, K, T, r, sigma)
    result = {"id": rid, "price": engine.price(kind)}
    if compute_greeks:
        result.update(engine.greeks(kind))
    return result


def main():
    parser = argparse.ArgumentParser(
        description="Batch-price a book of European options."
    )
    parser.add_argument("--input", required=True, help="Path to book CSV")
    parser.add_argument("--output", required=True, help="Output path (.csv or .json)")
    parser.add_argument("--greeks", action="store_true", help="Compute Greeks")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    with open(args.input, newline="") as f:
        rows = list(csv.DictReader(f))

    logger.info("Pricing %d positions...", len(rows))

    results = []
    for i, row in enumerate(rows):
        try:
            results.append(_price_row(row, args.greeks))
        except (KeyError, ValueError) as e:
            logger.warning("Row %d (id=%s): %s", i, row.get("id", "?"), e)
            results.append({"id": row.get("id", ""), "price": None, "error": str(e)})

    output_path = Path(args.output)
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2, default=str)
    else:
        if not results:
            logger.info("No results to write.")
            return
        fieldnames = list(results[0].keys())
        for r in results:
            for k in r:
                if k not in fieldnames:
                    fieldnames.append(k)
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(results)

    priced = sum(1 for r in results if r.get("price") is not None)
    logger.info("Results written to %s  |  Priced: %d  |  Failed: %d",
                args.output, priced, len(results) - priced)


if __name__ == "__main__":
    main()

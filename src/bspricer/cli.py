import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from .black_scholes import PricingEngine
from .config import DisplayConfig
from .core import InvalidParameterError
from .formatting import format_report, format_scenarios
from .scenarios import moneyness_scenarios

logger = logging.getLogger(__name__)

_PROMPTS = (
    ("S", "Current Stock Price: $"),
    ("K", "Strike Price: $"),
    ("T", "Time to Expiration (years): "),
    ("r", "Risk-free Rate (as decimal, e.g., 0.05 for 5%): "),
    ("sigma", "Volatility (as decimal, e.g., 0.20 for 20%): "),
)


def _precision(s: str) -> int:
    value = int(s)
    if value < 0:
        raise argparse.ArgumentTypeError("precision must be non-negative")
    return value


def _render(engine: PricingEngine, display: DisplayConfig, scenarios: bool) -> str:
    out = [format_report(engine, display.precision)]
    if scenarios:
        scs = moneyness_scenarios(engine.S, engine.T, engine.r, engine.sigma, display)
        out.append(format_scenarios(scs, display.precision))
    return "\n\n".join(out)


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S", type=float, required=True, help="spot price")
    parser.add_argument("--K", type=float, required=True, help="strike")
    parser.add_argument("--T", type=float, required=True, help="years")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--sigma", type=float, required=True)


def cmd_price(args) -> int:
    try:
        engine = PricingEngine.validated(args.S, args.K, args.T, args.r, args.sigma)
    except InvalidParameterError as e:
        logger.debug("rejected inputs: %s", e)
        print(f"Error: invalid input parameters: {e}", file=sys.stderr)
        return 2
    display = DisplayConfig(precision=args.precision)
    print(_render(engine, display, scenarios=not args.no_scenarios))
    return 0


# ---------------------------------------------------------------------------
# Interactive loop
# ---------------------------------------------------------------------------
def _read_float(prompt: str, read: Callable[[str], str]) -> float:
    """Prompt until the answer parses as a float."""
    while True:
        raw = read(prompt)
        try:
            return float(raw)
        except ValueError:
            print(f"Error: {raw.strip()!r} is not a number, please try again.")


def cmd_interactive(args, read: Optional[Callable[[str], str]] = None) -> int:
    read = read or input
    display = DisplayConfig(precision=args.precision)
    try:
        while True:
            print("=== Black-Scholes Option Pricing Calculator ===")
            print("Enter the following parameters:")
            values = {name: _read_float(prompt, read) for name, prompt in _PROMPTS}
            try:
                engine = PricingEngine.validated(**values)
            except InvalidParameterError as e:
                logger.debug("rejected inputs: %s", e)
                print("Error: Invalid input parameters. Please ensure all values "
                      f"are positive (T can be zero). [{e}]")
                continue

            print()
            print(_render(engine, display, scenarios=not args.no_scenarios))
            print()
            choice = read("Do you want to calculate another option? (y/n): ")
            if choice.strip().lower() not in {"y", "yes"}:
                break
    except EOFError:
        logger.debug("input closed, leaving interactive loop")
    print("Thank you for using the Black-Scholes Calculator!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="bspricer",
                                description="Black-Scholes European option pricer")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # One-shot pricing
    p_price = sub.add_parser("price", help="price one parameter set")
    add_common(p_price)
    p_price.set_defaults(func=cmd_price)

    # Prompt loop
    p_int = sub.add_parser("interactive", help="prompt for inputs repeatedly")
    p_int.set_defaults(func=cmd_interactive)

    for sp in (p_price, p_int):
        sp.add_argument("--precision", type=_precision, default=4, help="decimal places")
        sp.add_argument("--no-scenarios", action="store_true",
                        help="skip the moneyness scenario analysis")

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

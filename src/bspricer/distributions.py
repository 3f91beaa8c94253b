# distributions.py
# Standard-normal CDF / PDF for the scalar engine.
# The vectorised module uses scipy.stats.norm for the same quantities.

from __future__ import annotations
import math

_SQRT_2 = math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """Standard-normal cumulative distribution, ``0.5 * (1 + erf(x / sqrt 2))``."""
    return 0.5 * (1.0 + math.erf(x / _SQRT_2))


def norm_pdf(x: float) -> float:
    """Standard-normal density.  Underflows to 0.0 for large ``|x|``."""
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)

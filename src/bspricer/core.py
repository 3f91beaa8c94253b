from __future__ import annotations
import math
from enum import Enum


class OptionKind(str, Enum):
    """Call / put tag passed explicitly to every kind-dependent query."""
    CALL = "call"
    PUT = "put"

    @classmethod
    def coerce(cls, kind: OptionKind | str) -> OptionKind:
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).strip().lower())
        except ValueError:
            raise ValueError(f"kind must be 'call' or 'put', got {kind!r}") from None


CALL = OptionKind.CALL
PUT  = OptionKind.PUT


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------
class InvalidParameterError(ValueError):
    """Raised when a pricing input violates its domain.

    Parameters
    ----------
    parameter : str
        Name of the offending input (``"S"``, ``"K"``, ``"T"``, ``"r"``
        or ``"sigma"``).
    reason : str
        Which precondition failed, e.g. ``"non-positive price"``.
    value : float
        The rejected value.
    """

    def __init__(self, parameter: str, reason: str, value: float):
        self.parameter = parameter
        self.reason = reason
        self.value = value
        super().__init__(f"{parameter}: {reason} (got {value!r})")


def validate_inputs(S: float, K: float, T: float, r: float, sigma: float) -> None:
    """Check the engine preconditions, raising on the first violation.

    ``S > 0``, ``K > 0``, ``T >= 0``, ``sigma > 0`` and every value finite.
    """
    for name, value in (("S", S), ("K", K), ("T", T), ("r", r), ("sigma", sigma)):
        if not math.isfinite(value):
            raise InvalidParameterError(name, "non-finite value", value)
    if S <= 0:
        raise InvalidParameterError("S", "non-positive price", S)
    if K <= 0:
        raise InvalidParameterError("K", "non-positive strike", K)
    if T < 0:
        raise InvalidParameterError("T", "negative time", T)
    if sigma <= 0:
        raise InvalidParameterError("sigma", "non-positive volatility", sigma)

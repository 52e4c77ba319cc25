"""Validation of the nbf and exp time claims."""

import math
from datetime import timedelta
from typing import Any

from jwtcore.core.errors import MalformedTokenError, NotYetValidError, TokenExpiredError


def _numeric_claim(claims: dict[str, Any], name: str) -> float | None:
    value = claims.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise MalformedTokenError(f"{name} must be a number")
    try:
        number = float(value)
    except OverflowError as exc:
        raise MalformedTokenError(f"{name} is out of range") from exc
    if not math.isfinite(number):
        raise MalformedTokenError(f"{name} must be finite")
    return number


def validate_time_claims(
    claims: Any, now: float, leeway: float | timedelta = 0
) -> None:
    """Enforce nbf and exp against a single sample of the current time.

    Claims that are not a JSON object carry no time claims and pass.
    """
    if not isinstance(claims, dict):
        return
    if isinstance(leeway, timedelta):
        leeway = leeway.total_seconds()

    nbf = _numeric_claim(claims, "nbf")
    exp = _numeric_claim(claims, "exp")
    if nbf is not None and now < nbf - leeway:
        raise NotYetValidError(nbf)
    if exp is not None and now >= exp + leeway:
        raise TokenExpiredError(exp)

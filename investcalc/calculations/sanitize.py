"""
Input and Result Guards

The engine performs no validation. Callers run inputs through these helpers
first so that corrupted or non-finite values never reach it, and force the
displayed result fields to finite numbers.
"""

import math
from dataclasses import fields, replace
from typing import Optional

from investcalc.calculations.engine import InputParameters, ValuationResult, evaluate


def safe(value: float, fallback: float = 0.0) -> float:
    """Return value if finite, otherwise fallback."""
    return value if math.isfinite(value) else fallback


def safe_or_none(value: Optional[float]) -> Optional[float]:
    """Return value if finite, otherwise None."""
    if value is None or not math.isfinite(value):
        return None
    return value


def clamp(
    value: float, minimum: Optional[float] = None, maximum: Optional[float] = None
) -> float:
    """
    Clamp value into [minimum, maximum].

    Non-finite values fall back to minimum (or 0 when no minimum is given).
    """
    if not math.isfinite(value):
        return minimum if minimum is not None else 0.0
    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


def sanitize_inputs(params: InputParameters) -> InputParameters:
    """Replace every non-finite input field with 0."""
    changes = {
        f.name: 0.0
        for f in fields(params)
        if not math.isfinite(getattr(params, f.name))
    }
    if not changes:
        return params
    return replace(params, **changes)


def safe_evaluate(params: InputParameters) -> ValuationResult:
    """Evaluate sanitized inputs and force every result field to be finite."""
    result = evaluate(sanitize_inputs(params))
    return replace(
        result,
        **{f.name: safe(getattr(result, f.name)) for f in fields(result)},
    )

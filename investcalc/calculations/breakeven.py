"""
Break-even Calculations

Inverts the valuation engine along a single axis (monthly rent or annual
interest rate) with a bounded binary search to find the threshold where a
target condition starts (or stops) holding.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from investcalc.calculations.engine import InputParameters, ValuationResult, evaluate
from investcalc.calculations.sanitize import safe_or_none

SEARCH_ITERATIONS = 40

MIN_RENT_CEILING = 5000.0
RENT_CEILING_FACTOR = 4
MAX_INTEREST_PCT = 15.0

DSCR_TARGET = 1.10
CASH_ON_CASH_TARGET = 0.06


class Target(str, Enum):
    """Break-even target conditions."""

    CASHFLOW0 = "cashflow0"  # net cashflow >= 0
    DSCR110 = "dscr110"  # DSCR >= 1.10
    COC6 = "coc6"  # cash-on-cash >= 6%


RENT_TARGETS = (Target.CASHFLOW0, Target.DSCR110, Target.COC6)
INTEREST_TARGETS = (Target.DSCR110, Target.CASHFLOW0)


def meets_target(result: ValuationResult, target: Target) -> bool:
    """Check whether a valuation result satisfies a target condition."""
    if target == Target.CASHFLOW0:
        return result.net_cashflow >= 0
    if target == Target.DSCR110:
        return result.dscr >= DSCR_TARGET
    return result.cash_on_cash >= CASH_ON_CASH_TARGET


def _predicate(
    base: InputParameters, field: str, target: Target
) -> Callable[[float], bool]:
    def meets(value: float) -> bool:
        return meets_target(evaluate(replace(base, **{field: value})), target)

    return meets


def breakeven_rent_monthly(base: InputParameters, target: Target) -> Optional[float]:
    """
    Find the lowest monthly cold rent that meets the target.

    All rent targets are monotonic non-decreasing in rent. The search
    bracket is [0, max(5000, 4 x current rent)]; it is a heuristic, so None
    means "not reachable within the bracket" rather than impossible.

    Args:
        base: Inputs held fixed apart from cold_rent_monthly
        target: One of cashflow0, dscr110, coc6

    Returns:
        Break-even monthly rent, or None if unreachable
    """
    target = Target(target)
    meets = _predicate(base, "cold_rent_monthly", target)

    lo = 0.0
    hi = max(MIN_RENT_CEILING, base.cold_rent_monthly * RENT_CEILING_FACTOR)

    if not meets(hi):
        return None

    for _ in range(SEARCH_ITERATIONS):
        mid = (lo + hi) / 2
        if meets(mid):
            hi = mid
        else:
            lo = mid

    return hi


def breakeven_interest_pct(base: InputParameters, target: Target) -> Optional[float]:
    """
    Find the highest annual interest rate (in percent) that still meets the target.

    Targets are monotonic non-increasing in the interest rate. Searches the
    bracket [0, 15]. If the target still holds at 15%, 15 is returned
    without narrowing.

    Args:
        base: Inputs held fixed apart from interest_rate_pct
        target: One of dscr110, cashflow0

    Returns:
        Maximum interest rate in percent, or None if even 0% misses the target

    Raises:
        ValueError: If target is not an interest-rate target
    """
    target = Target(target)
    if target not in INTEREST_TARGETS:
        raise ValueError(f"Unsupported interest break-even target: {target.value}")

    meets = _predicate(base, "interest_rate_pct", target)

    lo = 0.0
    hi = MAX_INTEREST_PCT

    if not meets(lo):
        return None
    if meets(hi):
        return hi

    for _ in range(SEARCH_ITERATIONS):
        mid = (lo + hi) / 2
        if meets(mid):
            lo = mid
        else:
            hi = mid

    return lo


@dataclass(frozen=True)
class BreakEven:
    """All break-even thresholds for one input set."""

    cashflow0: Optional[float]
    dscr110: Optional[float]
    coc6: Optional[float]
    max_interest_dscr110: Optional[float]
    max_interest_cashflow0: Optional[float]


def breakeven_table(base: InputParameters) -> BreakEven:
    """Calculate rent and interest break-evens for every target."""
    return BreakEven(
        cashflow0=safe_or_none(breakeven_rent_monthly(base, Target.CASHFLOW0)),
        dscr110=safe_or_none(breakeven_rent_monthly(base, Target.DSCR110)),
        coc6=safe_or_none(breakeven_rent_monthly(base, Target.COC6)),
        max_interest_dscr110=safe_or_none(
            breakeven_interest_pct(base, Target.DSCR110)
        ),
        max_interest_cashflow0=safe_or_none(
            breakeven_interest_pct(base, Target.CASHFLOW0)
        ),
    )

"""
Deal Assessment

Traffic-light rating and short decision summary built on top of the
valuation result and break-even thresholds.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from investcalc.calculations.breakeven import (
    CASH_ON_CASH_TARGET,
    DSCR_TARGET,
    BreakEven,
)
from investcalc.calculations.engine import InputParameters, ValuationResult

GREEN = "green"
YELLOW = "yellow"
RED = "red"

# Rent gap (EUR/month) up to which a missed rent target counts as close
RENT_GAP_TOLERANCE = 150
# Interest headroom (percentage points) considered comfortable
INTEREST_HEADROOM_COMFORT = 1.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves round up (1100.5 -> 1101)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class TrafficLight:
    """Overall rating of an investment."""

    label: str
    tone: str
    hint: str
    reasons: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Gap:
    """Distance between a break-even threshold and the current value."""

    value: float
    diff: float
    tone: str


def traffic_light(result: ValuationResult) -> TrafficLight:
    """
    Rate an investment green, yellow or red.

    One point is lost for each of: negative cashflow, DSCR below 1.10,
    cash-on-cash below 6%.
    """
    reasons = []

    if result.net_cashflow < 0:
        reasons.append("Cashflow negative")
    if result.dscr < DSCR_TARGET:
        reasons.append("DSCR < 1.10")
    if result.cash_on_cash < CASH_ON_CASH_TARGET:
        reasons.append("Cash-on-Cash < 6%")

    score = 3 - len(reasons)

    if score == 3:
        return TrafficLight(
            label="Green",
            tone=GREEN,
            hint="Solid basis: cashflow, DSCR and return are all in the green.",
        )

    if score == 2:
        return TrafficLight(
            label="Yellow",
            tone=YELLOW,
            hint="Almost there: one metric is critical. Adjust interest, rent or vacancy.",
            reasons=reasons,
        )

    return TrafficLight(
        label="Red",
        tone=RED,
        hint="Risky: at least two metrics are weak.",
        reasons=reasons,
    )


def decision_summary(
    light: TrafficLight, inputs: InputParameters, breakeven: BreakEven
) -> List[str]:
    """
    Build the short summary lines shown next to the rating.

    Args:
        light: Traffic light for the current inputs
        inputs: Current (unsimulated) inputs
        breakeven: Break-even table for the same inputs

    Returns:
        One or more summary lines, most important first
    """
    if light.tone == GREEN:
        return ["Looks solid: cashflow, DSCR and return are all in the green."]

    lines = []

    if breakeven.cashflow0 is not None and breakeven.cashflow0 > inputs.cold_rent_monthly:
        diff = round_half_up(breakeven.cashflow0 - inputs.cold_rent_monthly)
        lines.append(
            f"Cashflow >= 0 needs a cold rent of about {round_half_up(breakeven.cashflow0)} "
            f"per month (+{diff})."
        )

    max_interest = breakeven.max_interest_dscr110
    if max_interest is not None and max_interest < inputs.interest_rate_pct:
        diff = inputs.interest_rate_pct - max_interest
        lines.append(
            f"DSCR >= 1.10 needs an interest rate <= {max_interest:.2f}% (-{diff:.2f}%)."
        )

    if not lines:
        lines.append(
            "Adjust interest, rent or vacancy: at least one metric is currently critical."
        )

    return lines


def rent_gap(value: Optional[float], current_rent: float) -> Optional[Gap]:
    """Compare a break-even rent with the current rent, rounded to whole units."""
    if value is None:
        return None

    diff = round_half_up(value) - round_half_up(current_rent)

    if diff <= 0:
        tone = GREEN
    elif diff <= RENT_GAP_TOLERANCE:
        tone = YELLOW
    else:
        tone = RED

    return Gap(value=round_half_up(value), diff=diff, tone=tone)


def interest_headroom(value: Optional[float], current: float) -> Optional[Gap]:
    """Compare a maximum interest rate with the current one, at 2 decimals."""
    if value is None:
        return None

    max_interest = round(value, 2)
    # Rounded so 4.80 - 3.80 counts as a full point of headroom
    headroom = round(max_interest - round(current, 2), 2)

    if headroom >= INTEREST_HEADROOM_COMFORT:
        tone = GREEN
    elif headroom >= 0:
        tone = YELLOW
    else:
        tone = RED

    return Gap(value=max_interest, diff=headroom, tone=tone)

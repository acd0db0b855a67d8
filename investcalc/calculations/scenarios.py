"""
Scenario Tools

Sensitivity simulation, cashflow waterfall and A/B comparison rows.
"""

from dataclasses import replace
from typing import Dict, List

from investcalc.calculations.engine import InputParameters, ValuationResult
from investcalc.calculations.sanitize import clamp, safe

INTEREST_DELTA_RANGE = (-2.0, 2.0)
RENT_DELTA_RANGE = (-20.0, 20.0)


def apply_sensitivity(
    inputs: InputParameters,
    interest_delta_pct: float = 0.0,
    rent_delta_pct: float = 0.0,
) -> InputParameters:
    """
    Shift the interest rate and scale the rent for a what-if simulation.

    Args:
        inputs: Base inputs (left unchanged)
        interest_delta_pct: Percentage points added to the interest rate, clamped to [-2, 2]
        rent_delta_pct: Relative rent change in percent, clamped to [-20, 20]

    Returns:
        New inputs with the simulated interest rate and rent
    """
    interest_delta = clamp(interest_delta_pct, *INTEREST_DELTA_RANGE)
    rent_delta = clamp(rent_delta_pct, *RENT_DELTA_RANGE)

    rent_factor = 1 + rent_delta / 100
    return replace(
        inputs,
        interest_rate_pct=inputs.interest_rate_pct + interest_delta,
        cold_rent_monthly=max(0.0, inputs.cold_rent_monthly * rent_factor),
    )


def _operating_costs(inputs: InputParameters) -> float:
    return safe(inputs.non_alloc_costs_monthly + inputs.reserves_monthly)


def cashflow_waterfall(inputs: InputParameters, result: ValuationResult) -> List[Dict]:
    """Monthly cashflow steps; costs and financing stay negative."""
    return [
        {"name": "effective_rent", "value": safe(result.effective_rent)},
        {"name": "costs", "value": -_operating_costs(inputs)},
        {"name": "financing", "value": -safe(result.debt_service)},
        {"name": "cashflow", "value": safe(result.net_cashflow)},
    ]


def compare_rows(
    inputs_a: InputParameters,
    result_a: ValuationResult,
    inputs_b: InputParameters,
    result_b: ValuationResult,
) -> List[Dict]:
    """Waterfall steps for two investments side by side."""
    waterfall_a = cashflow_waterfall(inputs_a, result_a)
    waterfall_b = cashflow_waterfall(inputs_b, result_b)
    return [
        {"name": a["name"], "a": a["value"], "b": b["value"]}
        for a, b in zip(waterfall_a, waterfall_b)
    ]

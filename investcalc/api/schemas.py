"""
Shared request and response schemas for the calculation API.

Inputs default to the calculator's default values, so payloads with
missing fields still evaluate. Unknown fields are ignored.
"""

from dataclasses import asdict
from typing import Dict, List, Optional

from pydantic import BaseModel

from investcalc.calculations.breakeven import BreakEven
from investcalc.calculations.engine import InputParameters, ValuationResult
from investcalc.calculations.presets import DEFAULT_INPUTS
from investcalc.calculations.sanitize import sanitize_inputs
from investcalc.calculations.scoring import (
    Gap,
    TrafficLight,
    interest_headroom,
    rent_gap,
)


class InvestmentInput(BaseModel):
    """Property and financing inputs."""

    purchase_price: float = DEFAULT_INPUTS.purchase_price
    cold_rent_monthly: float = DEFAULT_INPUTS.cold_rent_monthly
    non_alloc_costs_monthly: float = DEFAULT_INPUTS.non_alloc_costs_monthly
    equity: float = DEFAULT_INPUTS.equity
    interest_rate_pct: float = DEFAULT_INPUTS.interest_rate_pct
    initial_repayment_pct: float = DEFAULT_INPUTS.initial_repayment_pct
    vacancy_pct: float = DEFAULT_INPUTS.vacancy_pct
    closing_costs_pct: float = DEFAULT_INPUTS.closing_costs_pct
    capex: float = DEFAULT_INPUTS.capex
    reserves_monthly: float = DEFAULT_INPUTS.reserves_monthly

    def to_params(self) -> InputParameters:
        """Convert to engine inputs, replacing non-finite values with 0."""
        return sanitize_inputs(InputParameters(**self.model_dump()))

    @classmethod
    def from_params(cls, params: InputParameters) -> "InvestmentInput":
        return cls(**asdict(params))


class SensitivityInput(BaseModel):
    """What-if adjustments applied on top of the inputs."""

    interest_delta_pct: float = 0.0
    rent_delta_pct: float = 0.0


class ValuationResponse(BaseModel):
    """Calculated investment metrics."""

    total_cost: float
    loan: float
    effective_rent: float
    debt_service: float
    net_cashflow: float
    annual_net_cashflow: float
    cash_on_cash: float
    dscr: float

    @classmethod
    def from_result(cls, result: ValuationResult) -> "ValuationResponse":
        return cls(**asdict(result))


class TrafficLightResponse(BaseModel):
    """Traffic-light rating."""

    label: str
    tone: str
    hint: str
    reasons: List[str] = []

    @classmethod
    def from_light(cls, light: TrafficLight) -> "TrafficLightResponse":
        return cls(**asdict(light))


class GapResponse(BaseModel):
    """Break-even threshold compared with the current value."""

    value: float
    diff: float
    tone: str


def _gap(gap: Optional[Gap]) -> Optional[GapResponse]:
    return GapResponse(**asdict(gap)) if gap is not None else None


class BreakEvenResponse(BaseModel):
    """Break-even thresholds; null means not reachable within the search bracket."""

    cashflow0: Optional[float] = None
    dscr110: Optional[float] = None
    coc6: Optional[float] = None
    max_interest_dscr110: Optional[float] = None
    max_interest_cashflow0: Optional[float] = None

    rent_gaps: Dict[str, Optional[GapResponse]] = {}
    interest_headroom: Dict[str, Optional[GapResponse]] = {}

    @classmethod
    def from_breakeven(
        cls, breakeven: BreakEven, inputs: InputParameters
    ) -> "BreakEvenResponse":
        rent = inputs.cold_rent_monthly
        interest = inputs.interest_rate_pct
        return cls(
            **asdict(breakeven),
            rent_gaps={
                "cashflow0": _gap(rent_gap(breakeven.cashflow0, rent)),
                "dscr110": _gap(rent_gap(breakeven.dscr110, rent)),
                "coc6": _gap(rent_gap(breakeven.coc6, rent)),
            },
            interest_headroom={
                "dscr110": _gap(interest_headroom(breakeven.max_interest_dscr110, interest)),
                "cashflow0": _gap(
                    interest_headroom(breakeven.max_interest_cashflow0, interest)
                ),
            },
        )

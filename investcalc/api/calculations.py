"""
Investment calculation API endpoints.

These endpoints accept inputs and return calculated results.
Inputs are sanitized here before they reach the engine.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from investcalc.calculations import breakeven, scenarios, scoring
from investcalc.calculations.sanitize import safe_evaluate, safe_or_none
from investcalc.api.schemas import (
    BreakEvenResponse,
    InvestmentInput,
    SensitivityInput,
    TrafficLightResponse,
    ValuationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class ValuationOutput(BaseModel):
    """Response with metrics and rating for one investment."""

    inputs: InvestmentInput
    results: ValuationResponse
    traffic_light: TrafficLightResponse


@router.post("/valuation", response_model=ValuationOutput)
async def calculate_valuation(inputs: InvestmentInput):
    """Calculate cashflow, DSCR and cash-on-cash for the given inputs."""
    params = inputs.to_params()
    result = safe_evaluate(params)

    return ValuationOutput(
        inputs=InvestmentInput.from_params(params),
        results=ValuationResponse.from_result(result),
        traffic_light=TrafficLightResponse.from_light(scoring.traffic_light(result)),
    )


@router.post("/breakeven", response_model=BreakEvenResponse)
async def calculate_breakeven(inputs: InvestmentInput):
    """Calculate rent and interest break-evens for every target."""
    params = inputs.to_params()
    table = breakeven.breakeven_table(params)
    return BreakEvenResponse.from_breakeven(table, params)


class TargetInput(BaseModel):
    """Input for a single break-even search."""

    inputs: InvestmentInput = InvestmentInput()
    target: str


class TargetResponse(BaseModel):
    """Single break-even value; null when not reachable."""

    target: str
    value: Optional[float] = None


@router.post("/breakeven/rent", response_model=TargetResponse)
async def calculate_breakeven_rent(body: TargetInput):
    """Find the lowest monthly cold rent meeting the target."""
    try:
        target = breakeven.Target(body.target)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    value = breakeven.breakeven_rent_monthly(body.inputs.to_params(), target)
    logger.debug(f"Rent break-even for {target.value}: {value}")

    return TargetResponse(target=target.value, value=safe_or_none(value))


@router.post("/breakeven/interest", response_model=TargetResponse)
async def calculate_breakeven_interest(body: TargetInput):
    """Find the highest interest rate still meeting the target."""
    try:
        target = breakeven.Target(body.target)
        value = breakeven.breakeven_interest_pct(body.inputs.to_params(), target)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug(f"Interest break-even for {target.value}: {value}")

    return TargetResponse(target=target.value, value=safe_or_none(value))


class AnalysisInput(BaseModel):
    """Input for the full analysis of one investment."""

    inputs: InvestmentInput = InvestmentInput()
    sensitivity: SensitivityInput = SensitivityInput()


class WaterfallStep(BaseModel):
    """One bar of the monthly cashflow waterfall."""

    name: str
    value: float


class AnalysisResponse(BaseModel):
    """Simulated metrics, rating, break-evens and summary."""

    inputs: InvestmentInput
    simulated_inputs: InvestmentInput
    results: ValuationResponse
    traffic_light: TrafficLightResponse
    breakeven: BreakEvenResponse
    summary: List[str]
    waterfall: List[WaterfallStep]


@router.post("/analysis", response_model=AnalysisResponse)
async def calculate_analysis(body: AnalysisInput):
    """
    Full analysis of one investment.

    Metrics and rating use the sensitivity-adjusted inputs; break-evens and
    the summary use the inputs as entered.
    """
    params = body.inputs.to_params()
    simulated = scenarios.apply_sensitivity(
        params,
        interest_delta_pct=body.sensitivity.interest_delta_pct,
        rent_delta_pct=body.sensitivity.rent_delta_pct,
    )

    result = safe_evaluate(simulated)
    light = scoring.traffic_light(result)
    table = breakeven.breakeven_table(params)

    return AnalysisResponse(
        inputs=InvestmentInput.from_params(params),
        simulated_inputs=InvestmentInput.from_params(simulated),
        results=ValuationResponse.from_result(result),
        traffic_light=TrafficLightResponse.from_light(light),
        breakeven=BreakEvenResponse.from_breakeven(table, params),
        summary=scoring.decision_summary(light, params, table),
        waterfall=[
            WaterfallStep(**step)
            for step in scenarios.cashflow_waterfall(simulated, result)
        ],
    )


class CompareInput(BaseModel):
    """Input for comparing two investments."""

    a: InvestmentInput = InvestmentInput()
    b: InvestmentInput = InvestmentInput()
    sensitivity: SensitivityInput = SensitivityInput()


class CompareRow(BaseModel):
    """Waterfall step for investments A and B."""

    name: str
    a: float
    b: float


class CompareResponse(BaseModel):
    """Side-by-side metrics for investments A and B."""

    results_a: ValuationResponse
    results_b: ValuationResponse
    traffic_light_a: TrafficLightResponse
    traffic_light_b: TrafficLightResponse
    rows: List[CompareRow]


@router.post("/compare", response_model=CompareResponse)
async def calculate_compare(body: CompareInput):
    """Compare two investments. Sensitivity applies to A only."""
    params_a = scenarios.apply_sensitivity(
        body.a.to_params(),
        interest_delta_pct=body.sensitivity.interest_delta_pct,
        rent_delta_pct=body.sensitivity.rent_delta_pct,
    )
    params_b = body.b.to_params()

    result_a = safe_evaluate(params_a)
    result_b = safe_evaluate(params_b)

    return CompareResponse(
        results_a=ValuationResponse.from_result(result_a),
        results_b=ValuationResponse.from_result(result_b),
        traffic_light_a=TrafficLightResponse.from_light(scoring.traffic_light(result_a)),
        traffic_light_b=TrafficLightResponse.from_light(scoring.traffic_light(result_b)),
        rows=[
            CompareRow(**row)
            for row in scenarios.compare_rows(params_a, result_a, params_b, result_b)
        ],
    )

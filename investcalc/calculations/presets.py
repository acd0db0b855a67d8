"""
Default inputs and starter presets.
"""

from dataclasses import dataclass, replace
from typing import List

from investcalc.calculations.engine import InputParameters

DEFAULT_INPUTS = InputParameters(
    purchase_price=320000,
    cold_rent_monthly=1100,
    non_alloc_costs_monthly=120,
    equity=60000,
    interest_rate_pct=3.8,
    initial_repayment_pct=2.0,
    vacancy_pct=4,
    closing_costs_pct=10,
    capex=0,
    reserves_monthly=0,
)


@dataclass(frozen=True)
class Preset:
    """Named starter scenario."""

    id: str
    label: str
    inputs: InputParameters


PRESETS: List[Preset] = [
    Preset(
        id="berlin-etw-starter",
        label="Berlin condo (starter)",
        inputs=replace(
            DEFAULT_INPUTS,
            purchase_price=380000,
            cold_rent_monthly=1350,
            non_alloc_costs_monthly=160,
            equity=80000,
            interest_rate_pct=3.9,
            initial_repayment_pct=2.0,
            vacancy_pct=3,
            closing_costs_pct=10,
            capex=8000,
            reserves_monthly=60,
        ),
    ),
    Preset(
        id="leipzig-etw-yield",
        label="Leipzig condo (yield)",
        inputs=replace(
            DEFAULT_INPUTS,
            purchase_price=220000,
            cold_rent_monthly=950,
            non_alloc_costs_monthly=140,
            equity=50000,
            interest_rate_pct=3.8,
            initial_repayment_pct=2.2,
            vacancy_pct=5,
            closing_costs_pct=10,
            capex=5000,
            reserves_monthly=70,
        ),
    ),
    Preset(
        id="mfh-semi-pro",
        label="Multi-family house (semi-pro)",
        inputs=replace(
            DEFAULT_INPUTS,
            purchase_price=950000,
            cold_rent_monthly=5200,
            non_alloc_costs_monthly=650,
            equity=220000,
            interest_rate_pct=4.0,
            initial_repayment_pct=2.0,
            vacancy_pct=6,
            closing_costs_pct=10,
            capex=35000,
            reserves_monthly=220,
        ),
    ),
]


def get_preset(preset_id: str) -> Preset:
    """
    Look up a preset by id.

    Raises:
        KeyError: If no preset has this id
    """
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    raise KeyError(preset_id)

"""
Preset API endpoints.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List

from investcalc.calculations.presets import DEFAULT_INPUTS, PRESETS, Preset, get_preset
from investcalc.api.schemas import InvestmentInput

router = APIRouter()


class PresetResponse(BaseModel):
    """Schema for preset response."""

    id: str
    label: str
    inputs: InvestmentInput


class PresetListResponse(BaseModel):
    """Schema for preset list response."""

    presets: List[PresetResponse]
    defaults: InvestmentInput


def _to_response(preset: Preset) -> PresetResponse:
    return PresetResponse(
        id=preset.id,
        label=preset.label,
        inputs=InvestmentInput.from_params(preset.inputs),
    )


@router.get("", response_model=PresetListResponse)
async def list_presets():
    """List all presets together with the default inputs."""
    return PresetListResponse(
        presets=[_to_response(p) for p in PRESETS],
        defaults=InvestmentInput.from_params(DEFAULT_INPUTS),
    )


@router.get("/{preset_id}", response_model=PresetResponse)
async def get_preset_by_id(preset_id: str):
    """Get a preset by ID."""
    try:
        return _to_response(get_preset(preset_id))
    except KeyError:
        raise HTTPException(status_code=404, detail="Preset not found")

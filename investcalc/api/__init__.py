"""
API routes for the investment calculator.
"""

from fastapi import APIRouter

from investcalc.api import calculations, presets, events

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(presets.router, prefix="/presets", tags=["presets"])
router.include_router(events.router, prefix="/events", tags=["events"])

"""
Analytics event endpoint.

Records user actions (preset applied, compare toggled, feedback clicked).
Independent from the calculation engine.
"""

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from investcalc.services.analytics import AnalyticsService, get_analytics_service

router = APIRouter()


class EventInput(BaseModel):
    """Analytics event."""

    name: str = Field(min_length=1, max_length=64)
    props: Optional[Dict[str, Any]] = None
    url: str = "/"


class EventResponse(BaseModel):
    """Whether the event was recorded."""

    recorded: bool


@router.post("", response_model=EventResponse, status_code=status.HTTP_202_ACCEPTED)
def track_event(
    event: EventInput,
    request: Request,
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    """
    Track a named event.

    The Plausible request blocks, so this handler must stay sync (threadpool).
    """
    recorded = analytics.track(
        event.name,
        props=event.props,
        url=event.url,
        user_agent=request.headers.get("user-agent", ""),
    )
    return EventResponse(recorded=recorded)

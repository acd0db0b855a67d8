"""
Analytics service using the Plausible events API.

Falls back to console logging if Plausible is not configured.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from investcalc.config import get_settings

logger = logging.getLogger(__name__)

KNOWN_EVENTS = {"pageview", "preset_used", "compare_toggled", "feedback_clicked"}


class AnalyticsService:
    """Fire-and-forget event tracking, decoupled from the calculation engine."""

    def __init__(self, client: Optional[httpx.Client] = None):
        settings = get_settings()
        self.enabled = settings.analytics_enabled
        self.domain = settings.plausible_domain
        self.api_url = settings.plausible_api_url
        self.timeout = settings.analytics_timeout_s
        self.client = client

        if self.client is None and self.enabled and self.domain:
            self.client = httpx.Client(timeout=self.timeout)

    def track(
        self,
        event_name: str,
        props: Optional[Dict[str, Any]] = None,
        url: str = "/",
        user_agent: str = "",
    ) -> bool:
        """
        Record a named event.

        Args:
            event_name: Event name, e.g. "preset_used"
            props: Optional custom properties
            url: Page the event happened on
            user_agent: Client user agent, forwarded to Plausible

        Returns:
            True if the event was recorded, False otherwise
        """
        if not self.enabled:
            return False

        if event_name not in KNOWN_EVENTS:
            logger.debug(f"Tracking custom event: {event_name}")

        if not self.client:
            logger.info(f"[ANALYTICS - Console Mode] {event_name} {props or {}}")
            return True

        payload = {"name": event_name, "domain": self.domain, "url": url}
        if props:
            payload["props"] = props

        try:
            response = self.client.post(
                self.api_url,
                json=payload,
                headers={"User-Agent": user_agent or "investcalc"},
            )

            if 200 <= response.status_code < 300:
                logger.debug(f"Event sent: {event_name}")
                return True

            logger.error(
                f"Failed to send event: {response.status_code} - {response.text}"
            )
            return False

        except httpx.HTTPError as e:
            logger.error(f"Error sending event: {str(e)}")
            return False


# Singleton instance
_analytics_service: Optional[AnalyticsService] = None


def get_analytics_service() -> AnalyticsService:
    """Get the analytics service singleton."""
    global _analytics_service
    if _analytics_service is None:
        _analytics_service = AnalyticsService()
    return _analytics_service

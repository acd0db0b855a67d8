"""
Application services module.
"""

from investcalc.services.analytics import AnalyticsService, get_analytics_service

__all__ = ["AnalyticsService", "get_analytics_service"]

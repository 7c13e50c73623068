"""
Analytics Package - Fleet figures for dashboards and AI insights.

Example:
    >>> from src.analytics import summarize_fleet
    >>> summary = summarize_fleet(vehicles, trips)
    >>> summary["insightsInput"]["ongoingTrips"]
    2
"""
from src.analytics.fleet_summary import summarize_fleet

__all__ = [
    "summarize_fleet",
]

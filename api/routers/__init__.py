"""
Router package for the Overload Tracker API.

This package contains all API routers organized by domain:
- health: Liveness and readiness checks
- sessions: Session resolution and commit
- calendar: Two-week date strip and week picker
- stats: Home summary and progress charts
"""

from api.routers.health import router as health_router
from api.routers.sessions import router as sessions_router
from api.routers.calendar import router as calendar_router
from api.routers.stats import router as stats_router

__all__ = [
    "health_router",
    "sessions_router",
    "calendar_router",
    "stats_router",
]

"""Pydantic schemas for API responses and check results."""

from deploy_dashboard.schemas.common import HealthResponse
from deploy_dashboard.schemas.dashboard import DashboardState, Empty, Loaded
from deploy_dashboard.schemas.health_check import CheckResult

__all__ = [
    # Common
    "HealthResponse",
    # Dashboard
    "DashboardState",
    "Empty",
    "Loaded",
    # Smoke test
    "CheckResult",
]

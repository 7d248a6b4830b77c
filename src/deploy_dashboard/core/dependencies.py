from fastapi import Request

from deploy_dashboard.services.dashboard_service import DashboardView


def get_dashboard_view(request: Request) -> DashboardView:
    return request.app.state.dashboard

from fastapi import APIRouter, Depends

from deploy_dashboard.core.dependencies import get_dashboard_view
from deploy_dashboard.core.responses import AsciiJSONResponse
from deploy_dashboard.schemas.dashboard import DashboardState
from deploy_dashboard.services.dashboard_service import DashboardView

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/state",
    response_model=DashboardState,
    response_class=AsciiJSONResponse,
    summary="Dashboard State",
    description="Current view state: 'empty' until the metrics snapshot has loaded, then 'loaded' with the payload.",
)
def get_dashboard_state(view: DashboardView = Depends(get_dashboard_view)):
    return view.state

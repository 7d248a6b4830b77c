from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from deploy_dashboard.api.v1.api import api_router
from deploy_dashboard.core.client import MetricsClient
from deploy_dashboard.core.dependencies import get_dashboard_view
from deploy_dashboard.core.exceptions import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from deploy_dashboard.core.logging import setup_logging
from deploy_dashboard.schemas.common import HealthResponse
from deploy_dashboard.services.dashboard_service import DashboardView


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting Deployment Dashboard")

    client = MetricsClient()
    view = DashboardView(client)
    app.state.dashboard = view
    logger.info(f"Mounting dashboard, metrics source: {client.base_url}{client.path}")
    view.mount()

    yield

    logger.info("Shutting down Deployment Dashboard")
    await view.unmount()
    await client.close()


APP_DESCRIPTION = "Deployment dashboard showing the latest snapshot of the metrics service."

app = FastAPI(
    title="Deployment Dashboard",
    version="1.0.0",
    description=APP_DESCRIPTION,
    lifespan=lifespan,
)

# Global Error Handling
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router, prefix="/api/v1")


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def read_dashboard(view: DashboardView = Depends(get_dashboard_view)):
    return view.render()


@app.get("/health", response_model=HealthResponse, tags=["System"])
def health_check():
    return {"status": "ok", "app": "up"}

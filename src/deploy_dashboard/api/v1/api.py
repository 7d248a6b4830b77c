from fastapi import APIRouter

from deploy_dashboard.api.v1.endpoints import dashboard

api_router = APIRouter()
api_router.include_router(dashboard.router)

"""
Health check endpoint.
Liveness status with the current UTC time and the deployment region.
"""
from fastapi import APIRouter
from app.config import get_app_config
from app.models import HealthResponse
from app.utils import iso_timestamp, utc_now

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=iso_timestamp(utc_now()),
        region=get_app_config().region,
    )

"""Core routes for the fitshot API (root and health check)."""

from api.dependencies import get_openrouter_service
from api.schemas import HealthResponse, RootResponse
from fastapi import APIRouter, Depends
from services.openrouter_service import OpenRouterService

router = APIRouter(tags=["Core"])

API_VERSION = "1.0.0"


@router.get(
    "/",
    response_model=RootResponse,
    summary="API root",
    description="Returns API name and version.",
)
async def root() -> dict[str, str]:
    return {"message": "Fitshot API", "version": API_VERSION}


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns server health status and whether OpenRouter is configured.",
)
async def health(openrouter: OpenRouterService = Depends(get_openrouter_service)) -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "openrouter": await openrouter.check_health()}

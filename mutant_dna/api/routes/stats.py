# mutant_dna/api/routes/stats.py
"""Verification statistics and health endpoints."""

from fastapi import APIRouter, Depends

from mutant_dna.api.dependencies import Services, get_services, get_version
from mutant_dna.api.error_handlers import handle_api_errors
from mutant_dna.api.models.schemas import ErrorResponse, HealthResponse, StatsResponse

router = APIRouter(tags=["stats"])


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses={503: {"model": ErrorResponse, "description": "Record store unavailable"}},
)
@handle_api_errors
def stats(services: Services = Depends(get_services)) -> StatsResponse:
    """Mutant vs human counts and their ratio."""
    result = services.stats_service.get_stats()
    return StatsResponse(
        count_mutant_dna=result.count_mutant_dna,
        count_human_dna=result.count_human_dna,
        ratio=result.ratio,
    )


@router.get("/health", response_model=HealthResponse)
def health(services: Services = Depends(get_services)) -> HealthResponse:
    """Check connectivity to the record store."""
    healthy, message = services.store.is_healthy()
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=get_version(),
        storage=message,
    )

# mutant_dna/api/routes/mutant.py
"""DNA analysis endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mutant_dna.api.dependencies import Services, get_services
from mutant_dna.api.error_handlers import handle_api_errors
from mutant_dna.api.models.schemas import DnaRequest, ErrorResponse, MutantResponse
from mutant_dna.core.dna import validate_dna
from mutant_dna.logging.tags import API

logger = logging.getLogger(__name__)

router = APIRouter(tags=["mutant"])


@router.post(
    "/mutant",
    response_model=MutantResponse,
    responses={
        200: {"description": "DNA belongs to a mutant"},
        403: {"model": MutantResponse, "description": "DNA belongs to a human"},
        400: {"model": ErrorResponse, "description": "Malformed DNA"},
        503: {"model": ErrorResponse, "description": "Record store unavailable"},
    },
)
@handle_api_errors
def is_mutant(request: DnaRequest, services: Services = Depends(get_services)) -> JSONResponse:
    """
    Detect whether a DNA sample belongs to a mutant.

    Returns 200 for a mutant, 403 for a human and 400 for malformed DNA.
    """
    validated = validate_dna(request.dna, services.mutant_service.detector.alphabet)
    dna = validated.unwrap()

    mutant = services.mutant_service.analyze_dna(dna)
    logger.info(f"{API} POST /mutant {len(dna)}x{len(dna)} -> {'mutant' if mutant else 'human'}")

    return JSONResponse(
        status_code=200 if mutant else 403,
        content=MutantResponse(is_mutant=mutant).model_dump(),
    )

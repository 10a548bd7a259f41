# mutant_dna/api/models/schemas.py
"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class DnaRequest(BaseModel):
    """Request to analyze one DNA sample."""

    dna: List[str] = Field(
        ...,
        description="NxN DNA matrix as N strings, each containing only A, T, C, G",
        json_schema_extra={"example": ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]},
    )


class MutantResponse(BaseModel):
    """Classification result. Sent with 200 for mutants and 403 for humans."""

    is_mutant: bool = Field(..., description="True if the DNA belongs to a mutant")


class StatsResponse(BaseModel):
    """Aggregate verification statistics."""

    count_mutant_dna: int = Field(..., description="Number of mutant DNA samples verified")
    count_human_dna: int = Field(..., description="Number of human DNA samples verified")
    ratio: float = Field(..., description="count_mutant_dna / count_human_dna (0.0 if no humans)")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status: healthy or unhealthy")
    version: str = Field(..., description="mutant-dna version")
    storage: str = Field(..., description="Record store status message")


class ErrorResponse(BaseModel):
    """Error body produced by HTTPException."""

    detail: str = Field(..., description="What went wrong")

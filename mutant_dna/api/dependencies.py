# mutant_dna/api/dependencies.py
"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Request

from mutant_dna.services.container import Services


def get_services(request: Request) -> Services:
    """FastAPI dependency: the services attached to the running app."""
    return request.app.state.services


def get_version() -> str:
    """Get the current mutant-dna version."""
    from mutant_dna import __version__

    return __version__


__all__ = ["Services", "get_services", "get_version"]

# mutant_dna/api/error_handlers.py
"""
API error handling utilities.

Provides a decorator to standardize exception handling across all API
routes, plus the app-level handler that turns request body validation
failures into 400 responses.
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Callable, TypeVar

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mutant_dna.core.exceptions import StoreUnavailableError
from mutant_dna.logging.tags import API

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _translate(fn_name: str, e: Exception) -> HTTPException:
    if isinstance(e, StoreUnavailableError):
        # Server side, nothing was committed; the client may retry
        logger.error(f"{API} Store unavailable in {fn_name}: {e}")
        return HTTPException(status_code=503, detail="Error accessing the database")
    if isinstance(e, ValueError):
        # Client error - bad input
        return HTTPException(status_code=400, detail=str(e))
    logger.exception(f"{API} Unexpected error in {fn_name}: {e}")
    return HTTPException(status_code=500, detail="Internal server error")


def handle_api_errors(fn: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for standardized API error handling.

    Maps exceptions to HTTP status codes:
    - HTTPException -> Re-raised as-is
    - StoreUnavailableError -> 503 Service Unavailable
    - ValueError (includes DnaValidationError) -> 400 Bad Request
    - Exception -> 500 Internal Server Error

    Works on both sync and async routes. Sync routes are run by FastAPI
    in its worker thread pool.

    Usage:
        @router.get("/stats")
        @handle_api_errors
        def stats():
            return service.get_stats()
    """
    if inspect.iscoroutinefunction(fn):

        @wraps(fn)
        async def async_wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _translate(fn.__name__, e) from e

        return async_wrapper

    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            raise _translate(fn.__name__, e) from e

    return wrapper


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors (400), not 422."""
    errors = {
        ".".join(str(part) for part in err.get("loc", ()) if part != "body"): err.get("msg", "")
        for err in exc.errors()
    }
    return JSONResponse(
        status_code=400,
        content={"detail": "Request validation failed", "errors": errors},
    )


__all__ = ["handle_api_errors", "request_validation_handler"]

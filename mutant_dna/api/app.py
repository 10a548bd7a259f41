# mutant_dna/api/app.py
"""
FastAPI application factory.

Usage:
    from mutant_dna.api.app import create_app

    app = create_app()  # config from defaults + {workspace}/config.yaml

Run with `mutant-dna serve` or `uvicorn mutant_dna.api.app:app --factory`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from mutant_dna.api.dependencies import get_version
from mutant_dna.api.error_handlers import request_validation_handler
from mutant_dna.api.routes import mutant, stats
from mutant_dna.config.loader import load_app_config
from mutant_dna.config.schema import AppConfig
from mutant_dna.logging.logger import configure_logging, get_logger
from mutant_dna.logging.tags import API
from mutant_dna.services.container import build_services
from mutant_dna.storage.base import RecordStore

logger = get_logger(__name__)


def create_app(config: Optional[AppConfig] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """
    Build the API app.

    Args:
        config: Application config. None = load_app_config().
        store: Pre-built record store (tests). None = create from config.
    """
    config = config or load_app_config()
    configure_logging(config.logging.level)

    services = build_services(config, store=store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{API} mutant-dna API starting (storage={config.storage.mode.value})")
        yield
        services.close()
        logger.info(f"{API} mutant-dna API stopped")

    app = FastAPI(
        title="mutant-dna",
        description="Detects mutants from DNA sequences and reports verification statistics",
        version=get_version(),
        lifespan=lifespan,
    )
    app.state.services = services
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(mutant.router)
    app.include_router(stats.router)
    return app


def app() -> FastAPI:
    """Factory entry point for `uvicorn --factory`."""
    return create_app()


__all__ = ["create_app", "app"]

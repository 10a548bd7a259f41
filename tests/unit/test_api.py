# tests/unit/test_api.py
"""
Tests for the REST API.

Uses FastAPI's TestClient against an app backed by a temp SQLite store.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from mutant_dna import __version__
from mutant_dna.api.app import create_app
from mutant_dna.api.error_handlers import handle_api_errors
from mutant_dna.config.schema import AppConfig
from mutant_dna.core.exceptions import StoreUnavailableError


@pytest.fixture
def client(sqlite_store):
    app = create_app(AppConfig(), store=sqlite_store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_client():
    store = MagicMock()
    store.find_by_hash.side_effect = StoreUnavailableError("connection refused")
    store.count_by_mutant.side_effect = StoreUnavailableError("connection refused")
    store.is_healthy.return_value = (False, "connection refused")

    app = create_app(AppConfig(), store=store)
    with TestClient(app) as c:
        yield c


# =============================================================================
# POST /mutant
# =============================================================================


class TestMutantEndpoint:
    def test_mutant_returns_200(self, client, mutant_dna):
        response = client.post("/mutant", json={"dna": mutant_dna})

        assert response.status_code == 200
        assert response.json() == {"is_mutant": True}

    def test_human_returns_403(self, client, human_dna):
        response = client.post("/mutant", json={"dna": human_dna})

        assert response.status_code == 403
        assert response.json() == {"is_mutant": False}

    def test_repeat_request_same_answer(self, client, mutant_dna):
        first = client.post("/mutant", json={"dna": mutant_dna})
        second = client.post("/mutant", json={"dna": mutant_dna})

        assert first.status_code == second.status_code == 200

    @pytest.mark.parametrize(
        "dna",
        [
            ["atgcga", "cagtgc", "ttatgt", "agaagg", "ccccta", "tcactg"],
            ["ATGCGA", "CAGTGC", "TTAT"],
            ["ATGX", "CAGT", "TTAT", "AGAA"],
            [],
        ],
    )
    def test_invalid_dna_returns_400(self, client, sqlite_store, dna):
        response = client.post("/mutant", json={"dna": dna})

        assert response.status_code == 400
        assert response.json()["detail"]
        assert sqlite_store.count() == 0

    def test_null_dna_returns_400(self, client):
        response = client.post("/mutant", json={"dna": None})

        assert response.status_code == 400

    def test_missing_body_returns_400(self, client):
        response = client.post("/mutant")

        assert response.status_code == 400
        assert response.json()["detail"] == "Request validation failed"

    def test_wrong_type_returns_400(self, client):
        response = client.post("/mutant", json={"dna": "ATGC"})

        assert response.status_code == 400

    def test_error_message_names_position(self, client):
        response = client.post("/mutant", json={"dna": ["ATGC", "CAGT", "TTaT", "AGAA"]})

        assert "[2][2]" in response.json()["detail"]

    def test_store_failure_returns_503(self, failing_client, mutant_dna):
        response = failing_client.post("/mutant", json={"dna": mutant_dna})

        assert response.status_code == 503
        assert response.json() == {"detail": "Error accessing the database"}


# =============================================================================
# GET /stats and /health
# =============================================================================


class TestStatsEndpoint:
    def test_empty_stats(self, client):
        response = client.get("/stats")

        assert response.status_code == 200
        assert response.json() == {"count_mutant_dna": 0, "count_human_dna": 0, "ratio": 0.0}

    def test_stats_after_analyses(self, client, mutant_dna, human_dna):
        client.post("/mutant", json={"dna": mutant_dna})
        client.post("/mutant", json={"dna": human_dna})
        client.post("/mutant", json={"dna": ["AAAA", "AAAA", "TGCA", "CGTA"]})

        body = client.get("/stats").json()

        assert body["count_mutant_dna"] == 2
        assert body["count_human_dna"] == 1
        assert body["ratio"] == 2.0

    def test_invalid_requests_not_counted(self, client):
        client.post("/mutant", json={"dna": ["atgc"]})

        assert client.get("/stats").json()["count_human_dna"] == 0

    def test_stats_store_failure_returns_503(self, failing_client):
        assert failing_client.get("/stats").status_code == 503


class TestHealthEndpoint:
    def test_healthy(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["version"] == __version__

    def test_unhealthy(self, failing_client):
        body = failing_client.get("/health").json()

        assert body["status"] == "unhealthy"
        assert body["storage"] == "connection refused"


# =============================================================================
# Error translation
# =============================================================================


class TestHandleApiErrors:
    def test_unexpected_error_returns_500(self):
        @handle_api_errors
        def broken():
            raise NotImplementedError("not wired")

        with pytest.raises(HTTPException) as exc_info:
            broken()

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Internal server error"

    def test_http_exception_passes_through(self):
        @handle_api_errors
        def forbidden():
            raise HTTPException(status_code=418, detail="teapot")

        with pytest.raises(HTTPException) as exc_info:
            forbidden()

        assert exc_info.value.status_code == 418

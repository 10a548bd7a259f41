# tests/conftest.py
"""
Root conftest - shared fixtures and tier markers.

Test Tiers:
- tier1: Pure logic, no I/O (detector, validation, fingerprint, ratio)
         Run: pytest -m tier1
- tier2: SQLite files, threads, HTTP app, CLI
         Run: pytest -m "tier1 or tier2"
- postgres: Real PostgreSQL, skipped unless MUTANT_DNA_TEST_POSTGRES_URL is set
"""

from __future__ import annotations

import pytest

from mutant_dna.core.paths import MutantPaths
from mutant_dna.logging.logger import configure_logging
from mutant_dna.services.mutant_service import MutantService
from mutant_dna.storage.sqlite import SqliteRecordStore

# =============================================================================
# Tier Markers
# =============================================================================

TIER1_PATTERNS = [
    "test_detector",
    "test_dna_validation",
    "test_fingerprint",
    "test_stats_service",
    "test_locks",
]


def pytest_collection_modifyitems(items):
    """Mark pure-logic files tier1 and everything else tier2."""
    for item in items:
        path = str(item.fspath).replace("\\", "/")
        if "postgres" in item.keywords:
            continue
        if any(pattern in path for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)


# =============================================================================
# Sample DNA
# =============================================================================

# Horizontal CCCC, vertical GGGG and diagonal AAAA
MUTANT_DNA = ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]

# No sequence in any direction
HUMAN_DNA = ["ATGCGA", "CAGTGC", "TTATTT", "AGACGG", "GCGTCA", "TCACTG"]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def workspace(tmp_path):
    """Isolated workspace directory; reset afterwards."""
    MutantPaths.set_workspace(tmp_path / ".mutant_dna")
    yield MutantPaths.workspace()
    MutantPaths.reset()


@pytest.fixture
def sqlite_store(tmp_path):
    """SQLite store on a temp file."""
    store = SqliteRecordStore(tmp_path / "records.db")
    yield store
    store.close()


@pytest.fixture
def service(sqlite_store):
    """MutantService over the temp SQLite store."""
    return MutantService(store=sqlite_store)


@pytest.fixture
def mutant_dna():
    return list(MUTANT_DNA)


@pytest.fixture
def human_dna():
    return list(HUMAN_DNA)


@pytest.fixture(scope="session", autouse=True)
def _package_logging():
    """Attach the package log handler once, outside any CliRunner stream."""
    configure_logging("WARNING")

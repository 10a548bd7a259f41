# mutant_dna/services/stats_service.py
"""Aggregate counts over stored classifications."""

from __future__ import annotations

from dataclasses import dataclass

from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import STATS
from mutant_dna.storage.base import RecordStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class Stats:
    """Mutant and human counts with their ratio."""

    count_mutant_dna: int
    count_human_dna: int
    ratio: float


def calculate_ratio(mutant_count: int, human_count: int) -> float:
    """
    Mutants per human.

    0.0 when there are no humans, including when both counts are zero.
    May exceed 1.0.
    """
    if human_count == 0:
        return 0.0
    return mutant_count / human_count


class StatsService:
    """Reads counts from the record store. Never writes."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_stats(self) -> Stats:
        mutant_count = self.get_mutant_count()
        human_count = self.get_human_count()
        ratio = calculate_ratio(mutant_count, human_count)

        logger.debug(f"{STATS} mutants={mutant_count} humans={human_count} ratio={ratio}")
        return Stats(count_mutant_dna=mutant_count, count_human_dna=human_count, ratio=ratio)

    def get_mutant_count(self) -> int:
        return self.store.count_by_mutant(True)

    def get_human_count(self) -> int:
        return self.store.count_by_mutant(False)

    def get_total_analysis_count(self) -> int:
        return self.store.count()


__all__ = ["Stats", "StatsService", "calculate_ratio"]

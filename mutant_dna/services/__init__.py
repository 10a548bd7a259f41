# mutant_dna/services/__init__.py
from mutant_dna.services.locks import FingerprintLocks
from mutant_dna.services.mutant_service import MutantService
from mutant_dna.services.stats_service import Stats, StatsService, calculate_ratio

__all__ = ["FingerprintLocks", "MutantService", "Stats", "StatsService", "calculate_ratio"]

# mutant_dna/core/__init__.py
"""
Pure DNA logic: alphabet, validation, detection and fingerprinting.

Nothing in this package touches storage or the network.
"""

from mutant_dna.core.detector import MUTANT_THRESHOLD, SEQUENCE_LENGTH, MutantDetector
from mutant_dna.core.dna import DNA_BASES, DnaAlphabet, ValidationResult, validate_dna
from mutant_dna.core.fingerprint import DnaFingerprinter, compute_dna_hash

__all__ = [
    "DNA_BASES",
    "DnaAlphabet",
    "DnaFingerprinter",
    "MUTANT_THRESHOLD",
    "MutantDetector",
    "SEQUENCE_LENGTH",
    "ValidationResult",
    "compute_dna_hash",
    "validate_dna",
]

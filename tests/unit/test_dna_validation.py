# tests/unit/test_dna_validation.py
"""Tests for validate_dna() and the DNA alphabet."""

from __future__ import annotations

import pytest

from mutant_dna.core.dna import DNA_BASES, DnaAlphabet, ValidationResult, validate_dna
from mutant_dna.core.exceptions import (
    DnaValidationError,
    EmptyDnaError,
    InvalidShapeError,
    InvalidSymbolError,
)


class TestAlphabet:
    def test_default_bases(self):
        assert all(base in DNA_BASES for base in "ATCG")

    def test_lowercase_not_in_alphabet(self):
        assert "a" not in DNA_BASES

    def test_describe_is_sorted(self):
        assert DNA_BASES.describe() == "A, C, G, T"

    def test_custom_alphabet(self):
        alphabet = DnaAlphabet.of("ATCGU")
        assert validate_dna(["AU", "GC"], alphabet).is_ok


class TestValidateDna:
    """validate_dna() returns a tagged result instead of raising."""

    def test_valid_matrix(self, mutant_dna):
        result = validate_dna(mutant_dna)

        assert result.is_ok
        assert result.value == tuple(mutant_dna)
        assert result.error is None

    @pytest.mark.parametrize("dna", [None, []])
    def test_empty_rejected(self, dna):
        result = validate_dna(dna)

        assert not result.is_ok
        assert isinstance(result.error, EmptyDnaError)

    def test_non_square(self):
        result = validate_dna(["ATG", "CAGT", "TTAT", "AGAA"])

        assert isinstance(result.error, InvalidShapeError)
        assert result.error.row == 0
        assert "4x4" in str(result.error)

    def test_null_row_is_shape_error(self):
        result = validate_dna(["ATGC", None, "TTAT", "AGAA"])

        assert isinstance(result.error, InvalidShapeError)
        assert result.error.row == 1

    def test_lowercase(self):
        result = validate_dna(["ATGC", "CAGT", "TTaT", "AGAA"])

        assert isinstance(result.error, InvalidSymbolError)
        assert result.error.symbol == "a"
        assert "Only A, C, G, T are allowed" in str(result.error)

    def test_first_bad_symbol_in_row_major_order(self):
        result = validate_dna(["ATGC", "CAXT", "TZAT", "AGAA"])

        assert (result.error.row, result.error.column) == (1, 2)


class TestValidationResult:
    def test_unwrap_ok(self):
        assert ValidationResult.ok(("A",)).unwrap() == ("A",)

    def test_unwrap_raises_stored_error(self):
        error = EmptyDnaError("empty")
        with pytest.raises(EmptyDnaError):
            ValidationResult.err(error).unwrap()

    def test_errors_are_value_errors(self):
        assert issubclass(DnaValidationError, ValueError)

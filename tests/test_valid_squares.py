"""Tests for osgbtools.valid_squares module."""

import pytest

from osgbtools.valid_squares import SQUARES_BY_LETTER, VALID_SQUARES, is_valid_square


class TestTable:
    def test_grouped_by_first_letter(self):
        for first, squares in SQUARES_BY_LETTER.items():
            assert all(sq.startswith(first) for sq in squares)

    def test_no_duplicates(self):
        flat = [sq for squares in SQUARES_BY_LETTER.values() for sq in squares]
        assert len(flat) == len(VALID_SQUARES)


class TestIsValidSquare:
    @pytest.mark.parametrize("letters", ["TQ", "tq", "NN", "HP", "SV", "OV"])
    def test_known_squares(self, letters: str):
        assert is_valid_square(letters) is True

    @pytest.mark.parametrize("letters", ["VV", "ZZ", "TZ", "HA"])
    def test_unknown_squares(self, letters: str):
        assert is_valid_square(letters) is False

    def test_single_letter(self):
        assert is_valid_square("S") is True
        assert is_valid_square("V") is False

    def test_no_letters(self):
        assert is_valid_square("") is True

    def test_custom_table(self):
        assert is_valid_square("VV", frozenset({"VV"})) is True
        assert is_valid_square("TQ", frozenset({"VV"})) is False

"""Tests for osgbtools.lattice module."""

import pytest

from osgbtools.exceptions import InvalidGridLetter
from osgbtools.lattice import (
    LETTERS,
    is_grid_letter,
    letter_at,
    letter_east_position,
    letter_index,
    letter_north_position,
)


class TestLetters:
    def test_twenty_five_distinct_letters(self):
        assert len(LETTERS) == 25
        assert len(set(LETTERS)) == 25

    def test_no_letter_i(self):
        assert "I" not in LETTERS


class TestPositions:
    @pytest.mark.parametrize(
        ("letter", "east", "north"),
        [
            ("V", 0, 0),
            ("Z", 4, 0),
            ("S", 2, 1),
            ("T", 3, 1),
            ("Q", 0, 1),
            ("H", 2, 3),
            ("A", 0, 4),
            ("E", 4, 4),
        ],
    )
    def test_positions(self, letter: str, east: int, north: int):
        assert letter_east_position(letter) == east
        assert letter_north_position(letter) == north

    def test_case_insensitive(self):
        assert letter_index("t") == letter_index("T") == 8

    @pytest.mark.parametrize("bad", ["I", "i", "1", "", "TQ", "#"])
    def test_invalid_letter_raises(self, bad: str):
        with pytest.raises(InvalidGridLetter) as exc_info:
            letter_east_position(bad)
        assert exc_info.value.letter == bad

    def test_non_string_raises(self):
        with pytest.raises(InvalidGridLetter):
            letter_north_position(None)


class TestLetterAt:
    def test_inverse_of_positions(self):
        for letter in LETTERS:
            assert letter_at(letter_east_position(letter), letter_north_position(letter)) == letter

    @pytest.mark.parametrize(("east", "north"), [(5, 0), (0, 5), (-1, 2)])
    def test_outside_lattice(self, east: int, north: int):
        with pytest.raises(IndexError):
            letter_at(east, north)


class TestIsGridLetter:
    def test_members(self):
        assert is_grid_letter("A")
        assert is_grid_letter("Z")

    def test_non_members(self):
        assert not is_grid_letter("I")
        assert not is_grid_letter("a")
        assert not is_grid_letter("AB")
        assert not is_grid_letter("")

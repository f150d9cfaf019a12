"""
GridSquare: an OSGB National Grid Reference (NGR) as a square.

The model represents the South-West corner of a square, anything from
1m up to 500km across (or bigger with no letters at all). The corner is
held as absolute metres from square VV at full 1m resolution; the
number of letters and digits only decide how it is read back out, so
changing them never loses position.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Optional

from osgbtools import conversion, parser
from osgbtools.exceptions import InvalidGridLetter, TooManyLetters, UnknownGridSquare
from osgbtools.lattice import MAX_LETTERS, ORIGIN_EAST, ORIGIN_NORTH, is_grid_letter
from osgbtools.models import GridReferenceParts
from osgbtools.precision import clamp_digits, clamp_letters, square_size
from osgbtools.valid_squares import is_valid_square

logger = logging.getLogger(__name__)

_DEFAULT_LETTERS = 2
_DEFAULT_DIGITS = 5


class GridSquare:
    """
    A square on the National Grid.

    Pass a reference string in at construction, or use from_parts().
    With *valid_squares*, letters must also name a square in that table.
    """

    def __init__(
        self,
        reference: Optional[str] = None,
        valid_squares: Optional[AbstractSet[str]] = None,
    ):
        self._valid_squares = valid_squares
        self._abs_easting = ORIGIN_EAST
        self._abs_northing = ORIGIN_NORTH
        self._number_of_letters = _DEFAULT_LETTERS
        self._number_of_digits = _DEFAULT_DIGITS
        if reference is not None and reference != "":
            self.set_reference(reference)

    @classmethod
    def from_parts(
        cls,
        letters: str,
        easting: str,
        northing: str,
        valid_squares: Optional[AbstractSet[str]] = None,
    ) -> GridSquare:
        square = cls(valid_squares=valid_squares)
        square.set_parts(letters, easting, northing)
        return square

    # ── Setting the value ─────────────────────────────────────────

    def set_reference(self, reference: str) -> None:
        """
        Set the square from a single string such as "TQ 12345 67890".

        Raises one of the parser errors, or UnknownGridSquare in strict
        mode. Nothing is changed if it raises.
        """
        parsed = parser.parse(reference)
        self._check_square(parsed.letters)
        self._commit(
            parsed.letters,
            conversion.to_abs_east(parsed.letters, parsed.easting),
            conversion.to_abs_north(parsed.letters, parsed.northing),
            parsed.number_of_digits,
        )

    def set_parts(self, letters: str, easting: str, northing: str) -> None:
        """
        Set the square from separate letters, easting and northing digits.

        Digits longer than the box allows are truncated from the right.
        The digit precision becomes that of the longer of the two strings.
        """
        letters = letters.upper()
        if len(letters) > MAX_LETTERS:
            raise TooManyLetters(letters, MAX_LETTERS)
        for letter in letters:
            if not is_grid_letter(letter):
                raise InvalidGridLetter(letter)
        self._check_square(letters)

        abs_easting = conversion.to_abs_east(letters, easting)
        abs_northing = conversion.to_abs_north(letters, northing)
        number_of_digits = min(
            max(len(easting), len(northing)), conversion.box_width(len(letters))
        )
        self._commit(letters, abs_easting, abs_northing, number_of_digits)

    def _check_square(self, letters: str) -> None:
        if self._valid_squares is not None and not is_valid_square(
            letters, self._valid_squares
        ):
            raise UnknownGridSquare(letters)

    def _commit(
        self, letters: str, abs_easting: int, abs_northing: int, number_of_digits: int
    ) -> None:
        self._abs_easting = abs_easting
        self._abs_northing = abs_northing
        self._number_of_letters = len(letters)
        self._number_of_digits = clamp_digits(number_of_digits)
        logger.debug(
            "Set square %r: abs=(%d, %d), %d letters, %d digits",
            letters,
            abs_easting,
            abs_northing,
            self._number_of_letters,
            self._number_of_digits,
        )

    # ── Precision ─────────────────────────────────────────────────

    def set_number_of_letters(self, number_of_letters: int) -> None:
        """
        Set the number of letters used by default when reading.

        The number of digits moves the other way by the same amount, so
        the square size stays the same where the digit bounds allow.
        """
        number_of_letters = clamp_letters(number_of_letters)
        letter_increase = number_of_letters - self._number_of_letters
        if letter_increase:
            self.set_number_of_digits(self._number_of_digits - letter_increase)
        self._number_of_letters = number_of_letters

    def get_number_of_letters(self) -> int:
        return self._number_of_letters

    def set_number_of_digits(self, number_of_digits: int) -> None:
        """Set the number of digits per axis used by default when reading."""
        self._number_of_digits = clamp_digits(number_of_digits)

    def get_number_of_digits(self) -> int:
        return self._number_of_digits

    def _precision(
        self, number_of_letters: Optional[int], number_of_digits: Optional[int]
    ) -> tuple[int, int]:
        if number_of_letters is None:
            number_of_letters = self._number_of_letters
        if number_of_digits is None:
            number_of_digits = self._number_of_digits
        return clamp_letters(number_of_letters), clamp_digits(number_of_digits)

    # ── Reading ───────────────────────────────────────────────────

    @property
    def abs_easting(self) -> int:
        """Metres East of the West edge of square VV."""
        return self._abs_easting

    @property
    def abs_northing(self) -> int:
        """Metres North of the South edge of square VV."""
        return self._abs_northing

    def get_letters(self, number_of_letters: Optional[int] = None) -> str:
        number_of_letters, _ = self._precision(number_of_letters, None)
        return conversion.abs_to_letters(
            self._abs_easting, self._abs_northing, number_of_letters
        )

    def get_easting(
        self,
        number_of_letters: Optional[int] = None,
        number_of_digits: Optional[int] = None,
    ) -> str:
        return conversion.abs_east_to_digits(
            self._abs_easting, *self._precision(number_of_letters, number_of_digits)
        )

    def get_northing(
        self,
        number_of_letters: Optional[int] = None,
        number_of_digits: Optional[int] = None,
    ) -> str:
        return conversion.abs_north_to_digits(
            self._abs_northing, *self._precision(number_of_letters, number_of_digits)
        )

    def get_size(
        self,
        number_of_letters: Optional[int] = None,
        number_of_digits: Optional[int] = None,
    ) -> int:
        """
        Size of the square in metres, i.e. the accuracy of the reference.

        Ranges from 1m (two letters, five digits) to 500km (one letter).
        """
        return square_size(*self._precision(number_of_letters, number_of_digits))

    def as_parts(
        self,
        number_of_letters: Optional[int] = None,
        number_of_digits: Optional[int] = None,
    ) -> GridReferenceParts:
        precision = self._precision(number_of_letters, number_of_digits)
        return GridReferenceParts(
            letters=self.get_letters(precision[0]),
            easting=self.get_easting(*precision),
            northing=self.get_northing(*precision),
            size=self.get_size(*precision),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridSquare):
            return NotImplemented
        return self._key() == other._key()

    def _key(self) -> tuple[int, int, int, int]:
        return (
            self._abs_easting,
            self._abs_northing,
            self._number_of_letters,
            self._number_of_digits,
        )

    def __repr__(self) -> str:
        return (
            f"GridSquare(abs_easting={self._abs_easting}, "
            f"abs_northing={self._abs_northing}, "
            f"number_of_letters={self._number_of_letters}, "
            f"number_of_digits={self._number_of_digits})"
        )

"""
Conversion between letters + digit strings and absolute offsets.

An absolute offset is a whole number of metres East or North of the
South-West corner of square V. Everything a grid reference can say is
stored that way; letters and digits are recomputed on the way out.

Digit strings are handled with integer arithmetic on powers of ten.
Reading digits back truncates to the most significant digits, it never
rounds, so the digits always name the square containing the point.
"""

from __future__ import annotations

import logging
import re

from osgbtools.exceptions import (
    GridOffsetOutOfRange,
    InvalidDigitCharacters,
    TooManyLetters,
)
from osgbtools.lattice import (
    KM100,
    KM500,
    LATTICE_SIZE,
    MAX_DIGITS,
    MAX_LETTERS,
    ORIGIN_EAST,
    ORIGIN_LETTER,
    ORIGIN_NORTH,
    letter_at,
    letter_east_position,
    letter_north_position,
)

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]*")

# Box size for the metres carried by the letters, by letter position.
_LETTER_BOX = (KM500, KM100)


def box_width(number_of_letters: int) -> int:
    """Number of digits that address a 1m point inside the lettered box."""
    return MAX_DIGITS - min(max(number_of_letters, 0), MAX_LETTERS)


def _check_letters(letters: str) -> str:
    if len(letters) > MAX_LETTERS:
        raise TooManyLetters(letters, MAX_LETTERS)
    # With no letters, the reference is relative to 500km square S.
    return letters or ORIGIN_LETTER


def letters_to_abs_east(letters: str) -> int:
    """Metres East of square V for zero, one or two letters."""
    letters = _check_letters(letters)
    return sum(
        box * letter_east_position(letter)
        for box, letter in zip(_LETTER_BOX, letters)
    )


def letters_to_abs_north(letters: str) -> int:
    """Metres North of square V for zero, one or two letters."""
    letters = _check_letters(letters)
    return sum(
        box * letter_north_position(letter)
        for box, letter in zip(_LETTER_BOX, letters)
    )


def digits_to_distance(digits: str, number_of_letters: int = 2) -> int:
    """
    Convert a digit string to an offset in metres inside its box.

    e.g. "NE 01230 14500" is 1230m East of the West edge of 100km square NE.

    Leading zeroes are significant. The digits are the most significant
    end of a 7, 6 or 5 digit number (no, one or two letters), so a short
    string is scaled up as if right-padded with zeroes. A string longer
    than the box is cut down from the right.
    """
    if not _DIGITS_RE.fullmatch(digits):
        raise InvalidDigitCharacters(digits)

    width = box_width(number_of_letters)
    if not digits:
        return 0

    value = int(digits)
    shift = width - len(digits)
    if shift >= 0:
        return value * 10**shift

    logger.warning(
        "Truncating digits '%s' to %d significant digits for %d letters",
        digits,
        width,
        number_of_letters,
    )
    return value // 10**-shift


def to_abs_east(letters: str, digits: str) -> int:
    return letters_to_abs_east(letters) + digits_to_distance(digits, len(letters))


def to_abs_north(letters: str, digits: str) -> int:
    return letters_to_abs_north(letters) + digits_to_distance(digits, len(letters))


def abs_to_letters(abs_east: int, abs_north: int, number_of_letters: int) -> str:
    """
    Convert an absolute East/North pair into 0, 1 or 2 letters.

    Raises GridOffsetOutOfRange if the point lies outside the lattice.
    """
    if number_of_letters <= 0:
        return ""

    east_500, east_rest = divmod(abs_east, KM500)
    north_500, north_rest = divmod(abs_north, KM500)
    for value, position in ((abs_east, east_500), (abs_north, north_500)):
        if not 0 <= position < LATTICE_SIZE:
            raise GridOffsetOutOfRange(value, "outside the 2500km letter lattice")

    letters = letter_at(east_500, north_500)
    if number_of_letters >= 2:
        letters += letter_at(east_rest // KM100, north_rest // KM100)
    return letters


def _abs_to_digits(
    abs_value: int, origin: int, number_of_letters: int, number_of_digits: int
) -> str:
    number_of_letters = min(max(number_of_letters, 0), MAX_LETTERS)
    width = box_width(number_of_letters)

    if number_of_letters == 0:
        # No letters, so an actual number of metres from square S.
        offset = abs_value - origin
        if not 0 <= offset < 10**width:
            raise GridOffsetOutOfRange(
                abs_value, f"not expressible as {width} digits from square {ORIGIN_LETTER}"
            )
    else:
        offset = abs_value % _LETTER_BOX[number_of_letters - 1]

    number_of_digits = min(max(number_of_digits, 0), width)
    if number_of_digits == 0:
        return ""

    leading = offset // 10 ** (width - number_of_digits)
    return str(leading).zfill(number_of_digits)


def abs_east_to_digits(abs_east: int, number_of_letters: int, number_of_digits: int) -> str:
    """
    Convert an absolute easting to digits.

    Letters and digits together never exceed MAX_DIGITS; extra digits
    are dropped. With no letters the origin is 500km square S.
    """
    return _abs_to_digits(abs_east, ORIGIN_EAST, number_of_letters, number_of_digits)


def abs_north_to_digits(abs_north: int, number_of_letters: int, number_of_digits: int) -> str:
    return _abs_to_digits(abs_north, ORIGIN_NORTH, number_of_letters, number_of_digits)

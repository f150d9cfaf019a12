"""Grid reference string validation and splitting."""

from __future__ import annotations

import re

from osgbtools.exceptions import (
    InvalidDigitCharacters,
    InvalidInputType,
    OsgbToolsError,
    TooManyDigits,
    TooManyLetters,
    UnbalancedDigits,
)
from osgbtools.lattice import MAX_DIGITS, MAX_LETTERS, is_grid_letter
from osgbtools.models import ParsedReference

_SEPARATORS_RE = re.compile(r"[^A-Za-z0-9]")
_DIGITS_RE = re.compile(r"[0-9]*")


def normalise(raw: str) -> str:
    """Drop everything but ASCII letters and digits, then upper-case, e.g. 'tq 123/456' -> 'TQ123456'."""
    if not isinstance(raw, str):
        raise InvalidInputType(raw)
    return _SEPARATORS_RE.sub("", raw).upper()


def split_letters(ngr: str) -> tuple[str, str]:
    """Split a normalised reference into its leading grid letters and the rest."""
    i = 0
    while i < len(ngr) and is_grid_letter(ngr[i]):
        i += 1
    return ngr[:i], ngr[i:]


def parse(raw: str) -> ParsedReference:
    """
    Validate a grid reference in any of the usual layouts.

    All take the order [letters] [easting northing]:
    - whitespace and separating characters are disregarded
    - letters and digits are both optional
    - easting and northing must use the same number of digits
    - letters are case-insensitive

    Raises InvalidInputType, TooManyLetters, InvalidDigitCharacters,
    UnbalancedDigits or TooManyDigits, checked in that order.
    """
    letters, digits = split_letters(normalise(raw))

    if len(letters) > MAX_LETTERS:
        raise TooManyLetters(letters, MAX_LETTERS)

    # An 'I', or a letter after the first digit, lands here.
    if not _DIGITS_RE.fullmatch(digits):
        raise InvalidDigitCharacters(digits)

    if len(digits) % 2:
        raise UnbalancedDigits(digits)

    half = len(digits) // 2
    if len(letters) + half > MAX_DIGITS:
        raise TooManyDigits(len(letters), half, MAX_DIGITS)

    return ParsedReference(letters=letters, easting=digits[:half], northing=digits[half:])


def validate(raw: str) -> bool:
    """Return True if *raw* would parse."""
    try:
        parse(raw)
    except OsgbToolsError:
        return False
    return True

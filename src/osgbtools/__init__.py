"""osgbtools: parse, re-precision and read OSGB National Grid References."""

from osgbtools.coordinate import Coordinate
from osgbtools.exceptions import (
    GridOffsetOutOfRange,
    InvalidCoordinate,
    InvalidDigitCharacters,
    InvalidGridLetter,
    InvalidInputType,
    OsgbToolsError,
    TooManyDigits,
    TooManyLetters,
    UnbalancedDigits,
    UnknownGridSquare,
)
from osgbtools.models import GridReferenceParts, ParsedReference
from osgbtools.square import GridSquare
from osgbtools.valid_squares import VALID_SQUARES, is_valid_square

__all__ = [
    "GridSquare",
    "GridReferenceParts",
    "ParsedReference",
    "Coordinate",
    "VALID_SQUARES",
    "is_valid_square",
    "OsgbToolsError",
    "InvalidInputType",
    "TooManyLetters",
    "InvalidDigitCharacters",
    "UnbalancedDigits",
    "TooManyDigits",
    "InvalidGridLetter",
    "GridOffsetOutOfRange",
    "UnknownGridSquare",
    "InvalidCoordinate",
]

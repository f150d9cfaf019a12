"""
The 5x5 letter lattice and the fixed constants of the OSGB National Grid.

Letters are laid out row-major from the South-West corner, so 'V' is
the absolute origin and 'E' the North-East corner:

    A B C D E
    F G H J K
    L M N O P
    Q R S T U
    V W X Y Z

'I' is not used. The first letter of a reference picks a 500km box in
this lattice, the optional second letter a 100km box inside it.
"""

from osgbtools.exceptions import InvalidGridLetter

LETTERS = "VWXYZQRSTULMNOPFGHJKABCDE"
LATTICE_SIZE = 5

# Square sizes, in metres.
KM500 = 500_000
KM100 = 100_000

MAX_LETTERS = 2
MAX_DIGITS = 7

# Metres from the South-West corner of square V to the corner of
# 500km square S, the origin used when a reference has no letters.
ORIGIN_LETTER = "S"
ORIGIN_EAST = 1_000_000
ORIGIN_NORTH = 500_000

_INDEX = {letter: i for i, letter in enumerate(LETTERS)}


def letter_index(letter: str) -> int:
    """Return the zero-based lattice index of a single letter (any case)."""
    try:
        return _INDEX[letter.upper()]
    except (KeyError, AttributeError):
        raise InvalidGridLetter(str(letter)) from None


def letter_east_position(letter: str) -> int:
    """Column of *letter* in the lattice, 0 (West) to 4 (East)."""
    return letter_index(letter) % LATTICE_SIZE


def letter_north_position(letter: str) -> int:
    """Row of *letter* in the lattice, 0 (South) to 4 (North)."""
    return letter_index(letter) // LATTICE_SIZE


def letter_at(east_position: int, north_position: int) -> str:
    """Inverse of the position lookups."""
    if not (0 <= east_position < LATTICE_SIZE and 0 <= north_position < LATTICE_SIZE):
        raise IndexError(
            f"lattice position ({east_position}, {north_position}) is outside the 5x5 grid"
        )
    return LETTERS[north_position * LATTICE_SIZE + east_position]


def is_grid_letter(char: str) -> bool:
    return len(char) == 1 and char in _INDEX

"""
100km squares the Ordnance Survey actually uses over land in GB.

Squares outside this set are still well formed, just far off the coast,
so checking against it is optional (see GridSquare's valid_squares).
"""

from __future__ import annotations

from typing import AbstractSet

SQUARES_BY_LETTER = {
    "H": ("HP", "HT", "HU", "HW", "HX", "HY", "HZ"),
    "N": (
        "NA", "NB", "NC", "ND", "NF", "NG", "NH", "NJ", "NK", "NL", "NM",
        "NN", "NO", "NR", "NS", "NT", "NU", "NW", "NX", "NY", "NZ",
    ),
    "O": ("OV",),
    "S": (
        "SC", "SD", "SE", "SH", "SJ", "SK", "SM", "SN", "SO", "SP",
        "SR", "SS", "ST", "SU", "SV", "SW", "SX", "SY", "SZ",
    ),
    "T": ("TA", "TF", "TG", "TL", "TM", "TQ", "TR", "TV"),
}

VALID_SQUARES = frozenset(sq for group in SQUARES_BY_LETTER.values() for sq in group)


def is_valid_square(letters: str, squares: AbstractSet[str] = VALID_SQUARES) -> bool:
    """
    Return True if *letters* names a square in *squares*.

    One letter passes if any square starts with it; no letters always passes.
    """
    letters = letters.upper()
    if not letters:
        return True
    if len(letters) == 1:
        return any(sq.startswith(letters) for sq in squares)
    return letters in squares

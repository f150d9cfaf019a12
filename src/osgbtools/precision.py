"""Precision bounds and the square size they imply."""

from osgbtools.lattice import MAX_DIGITS, MAX_LETTERS


def clamp_letters(number_of_letters: int) -> int:
    """Pull a letter count into 0..MAX_LETTERS."""
    return min(max(int(number_of_letters), 0), MAX_LETTERS)


def clamp_digits(number_of_digits: int) -> int:
    """Pull a digit count into 0..MAX_DIGITS."""
    return min(max(int(number_of_digits), 0), MAX_DIGITS)


def square_size(number_of_letters: int, number_of_digits: int) -> int:
    """
    Size in metres of the square named by this many letters and digits.

    Each character short of MAX_DIGITS makes the square ten times
    bigger, from 1m (two letters, five digits) upwards. A lone letter is
    the exception: the first lattice step is 500km, not 1000km.
    Nothing at all is a 10,000km square.
    """
    total = min(number_of_letters + number_of_digits, MAX_DIGITS)
    missing = MAX_DIGITS - total

    if total == 1 and number_of_letters == 1:
        return 5 * 10 ** (missing - 1)

    return 10**missing

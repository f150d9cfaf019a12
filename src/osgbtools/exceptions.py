"""Custom exception hierarchy for osgbtools."""


class OsgbToolsError(Exception):
    """Base exception for all osgbtools errors."""


class InvalidInputType(OsgbToolsError, TypeError):
    """A grid reference was passed in as something other than a string."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            "National Grid Reference (NGR) must be a string; "
            f"{type(value).__name__} passed in"
        )


class TooManyLetters(OsgbToolsError):
    """The letter prefix is longer than the grid allows."""

    def __init__(self, letters: str, max_letters: int):
        self.letters = letters
        self.max_letters = max_letters
        super().__init__(
            f"An NGR cannot have more than {max_letters} letters; "
            f"{len(letters)} passed in ('{letters}')"
        )


class InvalidDigitCharacters(OsgbToolsError):
    """Something other than 0-9 was found where digits were expected."""

    def __init__(self, digits: str):
        self.digits = digits
        super().__init__(
            f"Invalid (non-numeric) characters found in easting or northing digits: '{digits}'"
        )


class UnbalancedDigits(OsgbToolsError):
    """The digit run cannot be split evenly into easting and northing."""

    def __init__(self, digits: str):
        self.digits = digits
        super().__init__(
            "Eastings and northings must contain the same number of digits; "
            f"a combined total of {len(digits)} digits found"
        )


class TooManyDigits(OsgbToolsError):
    """Letters plus digits per axis exceed the maximum resolution."""

    def __init__(self, number_of_letters: int, number_of_digits: int, max_digits: int):
        self.number_of_letters = number_of_letters
        self.number_of_digits = number_of_digits
        super().__init__(
            f"Too many digits; a maximum of {max_digits - number_of_letters} digits "
            f"for an easting or northing is allowed with {number_of_letters} letters; "
            f"{number_of_digits} digits supplied"
        )


class InvalidGridLetter(OsgbToolsError):
    """A character is not one of the 25 grid letters."""

    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"'{letter}' is not a National Grid letter")


class GridOffsetOutOfRange(OsgbToolsError):
    """An absolute offset cannot be expressed at the requested precision."""

    def __init__(self, abs_offset: int, detail: str):
        self.abs_offset = abs_offset
        super().__init__(f"Offset {abs_offset}m is out of range: {detail}")


class UnknownGridSquare(OsgbToolsError):
    """Strict mode: the letters do not name a square in the whitelist."""

    def __init__(self, letters: str):
        self.letters = letters
        super().__init__(f"'{letters}' is not a recognised National Grid square")


class InvalidCoordinate(OsgbToolsError, ValueError):
    """A coordinate was not given as a (latitude, longitude) pair."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"A coordinate must be a (latitude, longitude) pair; {value!r} passed in"
        )

"""Typed value models for osgbtools."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedReference:
    """A grid reference string that has passed validation, not yet committed."""

    letters: str
    easting: str
    northing: str

    @property
    def number_of_letters(self) -> int:
        return len(self.letters)

    @property
    def number_of_digits(self) -> int:
        return len(self.easting)


@dataclass(frozen=True)
class GridReferenceParts:
    """The four readable pieces of a square at one precision."""

    letters: str
    easting: str     # most significant digits first
    northing: str
    size: int        # metres along one side

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "letters": self.letters,
            "easting": self.easting,
            "northing": self.northing,
            "size": self.size,
        }

"""
A latitude/longitude pair, normalised into valid ranges.

This is a different coordinate space from the grid and nothing here
converts between the two; that needs a projection onto the Airy 1830
ellipsoid, which this package does not do.
"""

from __future__ import annotations

import math
from typing import Sequence

from osgbtools.exceptions import InvalidCoordinate


class Coordinate:
    """Latitude clamped to [-90, 90], longitude wrapped into (-180, 180]."""

    def __init__(self, coordinates: Sequence[float]):
        if isinstance(coordinates, (str, bytes)):
            raise InvalidCoordinate(coordinates)
        try:
            latitude, longitude = coordinates
        except (TypeError, ValueError):
            raise InvalidCoordinate(coordinates) from None
        self.set_latitude(latitude)
        self.set_longitude(longitude)

    @staticmethod
    def normalize_latitude(latitude: float) -> float:
        return float(max(-90.0, min(90.0, latitude)))

    @staticmethod
    def normalize_longitude(longitude: float) -> float:
        mod = math.fmod(longitude, 360.0)
        if mod <= -180.0:
            mod += 360.0
        elif mod > 180.0:
            mod -= 360.0
        return float(mod)

    def set_latitude(self, latitude: float) -> None:
        self._latitude = self.normalize_latitude(latitude)

    def get_latitude(self) -> float:
        return self._latitude

    def set_longitude(self, longitude: float) -> None:
        self._longitude = self.normalize_longitude(longitude)

    def get_longitude(self) -> float:
        return self._longitude

    latitude = property(get_latitude)
    longitude = property(get_longitude)

    def __repr__(self) -> str:
        return f"Coordinate(({self._latitude!r}, {self._longitude!r}))"

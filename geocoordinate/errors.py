"""Exceptions raised by the geocoordinate package."""


class GeoCoordinateError(Exception):
    """Base class for all geocoordinate errors."""


class OutOfRangeError(GeoCoordinateError, ValueError):
    """A longitude, latitude, precision or geohash length is outside its domain."""

    def __init__(self, name: str, value, low, high):
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{name} must be between {low} and {high}, got {value!r}")


class InvalidGeohashError(GeoCoordinateError, ValueError):
    """A geohash string is empty, too long or contains a character outside the alphabet."""


class UnexpectedFormatError(GeoCoordinateError, ValueError):
    """A JSON value has a shape that cannot be read as a coordinate."""

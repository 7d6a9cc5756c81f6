"""Immutable longitude/latitude value.

Usage:
    from geocoordinate import GeoCoordinate

    coord = GeoCoordinate(106.709437, -6.329094)
    lon, lat = coord
    print(coord)                 # (106.7094370, -6.3290940)
    coord.to_geohash()           # 'qqggupz6q57'
    coord.get_hash()             # 3195111357704980 (52 bits)
"""

from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .config import (
    DEFAULT_GEOHASH_LENGTH,
    DEFAULT_HASH_PRECISION,
    EAST,
    NORTH,
    SOUTH,
    WEST,
)
from .errors import OutOfRangeError


def validate_longitude(longitude: float) -> None:
    # Written so that NaN fails the check
    if not WEST <= longitude <= EAST:
        raise OutOfRangeError('longitude', longitude, WEST, EAST)


def validate_latitude(latitude: float) -> None:
    if not SOUTH <= latitude <= NORTH:
        raise OutOfRangeError('latitude', latitude, SOUTH, NORTH)


@dataclass(frozen=True)
class GeoCoordinate:
    """A point on earth in decimal degrees.

    Both bounds are inclusive: longitude in [-180, 180], latitude in [-90, 90].
    Two coordinates with equal fields are equal and hash the same.

    Raises:
        TypeError: If longitude or latitude is not a real number
        OutOfRangeError: If longitude or latitude is outside its range
    """

    longitude: float
    latitude: float

    def __post_init__(self):
        for name in ('longitude', 'latitude'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
        longitude = float(self.longitude)
        latitude = float(self.latitude)
        validate_longitude(longitude)
        validate_latitude(latitude)
        object.__setattr__(self, 'longitude', longitude)
        object.__setattr__(self, 'latitude', latitude)

    @classmethod
    def _trusted(cls, longitude: float, latitude: float) -> "GeoCoordinate":
        """Build a coordinate without validation.

        Only for decoders whose output is in range by construction.
        """
        coord = object.__new__(cls)
        object.__setattr__(coord, 'longitude', longitude)
        object.__setattr__(coord, 'latitude', latitude)
        return coord

    def __iter__(self) -> Iterator[float]:
        yield self.longitude
        yield self.latitude

    def __str__(self) -> str:
        return f"({self.longitude:.7f}, {self.latitude:.7f})"

    def get_hash(self, precision: int = DEFAULT_HASH_PRECISION) -> int:
        """Integer hash keeping the top `precision` bits of the 60-bit hash."""
        from .hashing import get_hash
        return get_hash(self, precision)

    @classmethod
    def from_hash(cls, value: int, precision: int = DEFAULT_HASH_PRECISION) -> "GeoCoordinate":
        """Center of the cell described by a `precision`-bit hash."""
        from .hashing import decode
        return decode(value, precision)

    def to_geohash(self, length: int = DEFAULT_GEOHASH_LENGTH) -> str:
        from .geohash import to_geohash
        return to_geohash(self, length)

    @classmethod
    def from_geohash(cls, geohash: str) -> "GeoCoordinate":
        from .geohash import decode_geohash
        return decode_geohash(geohash)

    def distance_to(self, other: "GeoCoordinate") -> float:
        """Great-circle distance to `other` in meters."""
        from .distance import distance
        return distance(self, other)

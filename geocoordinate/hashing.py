"""Bit-interleaved integer hash of a coordinate.

The hash is built by bisecting the longitude range [-180, 180] and the
latitude range [-90, 90] thirty times each. Every step emits one bit
(1 when the value lies strictly above the midpoint) and the bits are
interleaved longitude first, most significant pair first, giving a 60-bit
integer. The same layout is used by the base-32 geohash.

A `precision` of P bits keeps the top P bits: `hash >> (60 - P)`.

Usage:
    from geocoordinate.hashing import encode, decode

    value = encode(106.709437, -6.329094)          # 52-bit hash
    coord = decode(value)                           # cell center
    full = encode(106.709437, -6.329094, precision=60)
"""

from typing import Tuple

from .config import (
    BASE_PRECISION,
    DEFAULT_HASH_PRECISION,
    EAST,
    NORTH,
    SOUTH,
    WEST,
)
from .coordinate import GeoCoordinate, validate_latitude, validate_longitude
from .errors import OutOfRangeError


def validate_precision(precision: int) -> None:
    if not 0 <= precision <= BASE_PRECISION:
        raise OutOfRangeError('precision', precision, 0, BASE_PRECISION)


def _bisect(bit: int, low: float, high: float) -> Tuple[float, float]:
    mid = (low + high) / 2
    if bit:
        return mid, high
    return low, mid


def calculate_hash(longitude: float, latitude: float) -> int:
    """Compute the full 60-bit hash.

    Values equal to a midpoint fall into the lower half (bit 0).
    Inputs are assumed to be validated.
    """
    west, east = WEST, EAST
    south, north = SOUTH, NORTH
    result = 0

    for shift in range(BASE_PRECISION - 1, 0, -2):
        mid = (west + east) / 2
        if longitude > mid:
            result |= 1 << shift
            west = mid
        else:
            east = mid

        mid = (south + north) / 2
        if latitude > mid:
            result |= 1 << (shift - 1)
            south = mid
        else:
            north = mid

    return result


def encode(longitude: float, latitude: float, precision: int = DEFAULT_HASH_PRECISION) -> int:
    """Encode a longitude/latitude pair to a `precision`-bit hash.

    Args:
        longitude: Longitude (-180 to 180)
        latitude: Latitude (-90 to 90)
        precision: Number of leading hash bits to keep, 0 to 60 (default: 52)

    Returns:
        Non-negative integer of at most `precision` bits

    Raises:
        OutOfRangeError: If any argument is outside its range

    Examples:
        >>> encode(106.709437, -6.329094)
        3195111357704980
    """
    validate_longitude(longitude)
    validate_latitude(latitude)
    validate_precision(precision)
    return calculate_hash(longitude, latitude) >> (BASE_PRECISION - precision)


def get_hash(coord: GeoCoordinate, precision: int = DEFAULT_HASH_PRECISION) -> int:
    """Hash of an existing coordinate, see `encode`."""
    validate_precision(precision)
    return calculate_hash(coord.longitude, coord.latitude) >> (BASE_PRECISION - precision)


def decode(value: int, precision: int = DEFAULT_HASH_PRECISION) -> GeoCoordinate:
    """Decode a `precision`-bit hash to the center of its cell.

    `value` holds the hash in its low `precision` bits, as returned by
    `encode(..., precision)`. Bits are read from position precision-1 down
    to 0, longitude then latitude. With an odd precision the last pair only
    carries a longitude bit and the latitude range keeps its last width.

    Raises:
        OutOfRangeError: If precision is outside 0-60
    """
    validate_precision(precision)
    west, east = WEST, EAST
    south, north = SOUTH, NORTH

    position = precision
    while position > 0:
        position -= 1
        west, east = _bisect((value >> position) & 1, west, east)
        if position == 0:
            break
        position -= 1
        south, north = _bisect((value >> position) & 1, south, north)

    return GeoCoordinate._trusted((west + east) / 2, (south + north) / 2)

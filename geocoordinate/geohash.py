"""Base-32 geohash text encoding.

Each character carries 5 bits of the 60-bit interleaved hash, most
significant group first, so geohashes are 1 to 12 characters long.
Shorter strings drop the low bits of the hash and describe larger cells.

Usage:
    from geocoordinate.geohash import encode_geohash, decode_geohash

    encode_geohash(106.709437, -6.329094)      # 'qqggupz6q57'
    decode_geohash('qqggupz6q57')              # GeoCoordinate near the input
"""

from typing import Dict

from .config import (
    BASE_PRECISION,
    DEFAULT_GEOHASH_LENGTH,
    GEOHASH_BITS_PER_CHAR,
    MAX_GEOHASH_LENGTH,
)
from .coordinate import GeoCoordinate, validate_latitude, validate_longitude
from .errors import InvalidGeohashError, OutOfRangeError
from .hashing import calculate_hash, decode

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

_BASE32_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(BASE32)}
_CHAR_MASK = 0x1F
_FIRST_SHIFT = BASE_PRECISION - GEOHASH_BITS_PER_CHAR


def _validate_length(length: int) -> None:
    if not 1 <= length <= MAX_GEOHASH_LENGTH:
        raise OutOfRangeError('length', length, 1, MAX_GEOHASH_LENGTH)


def _hash_to_geohash(value: int, length: int) -> str:
    chars = []
    shift = _FIRST_SHIFT
    for _ in range(length):
        # length <= 12 keeps every shift non-negative
        assert shift >= 0
        chars.append(BASE32[(value >> shift) & _CHAR_MASK])
        shift -= GEOHASH_BITS_PER_CHAR
    return "".join(chars)


def encode_geohash(longitude: float, latitude: float, length: int = DEFAULT_GEOHASH_LENGTH) -> str:
    """
    Encode coordinates as a geohash string.

    Args:
        longitude: Longitude (-180 to 180)
        latitude: Latitude (-90 to 90)
        length: Number of geohash characters, 1 to 12 (default: 11)

    Returns:
        Geohash string

    Raises:
        OutOfRangeError: If longitude, latitude or length is out of range

    Examples:
        >>> encode_geohash(106.709437, -6.329094)
        'qqggupz6q57'
        >>> encode_geohash(106.709437, -6.329094, length=5)
        'qqggu'
    """
    validate_longitude(longitude)
    validate_latitude(latitude)
    _validate_length(length)
    return _hash_to_geohash(calculate_hash(longitude, latitude), length)


def to_geohash(coord: GeoCoordinate, length: int = DEFAULT_GEOHASH_LENGTH) -> str:
    """Geohash of an existing coordinate."""
    _validate_length(length)
    return _hash_to_geohash(calculate_hash(coord.longitude, coord.latitude), length)


def decode_geohash(geohash: str) -> GeoCoordinate:
    """
    Decode a geohash string to a coordinate.

    The low bits not covered by the string are taken as zero before the
    60-bit hash is decoded, so the result lies inside the geohash cell
    rather than at the original point.

    Raises:
        InvalidGeohashError: If the string is empty, longer than 12
            characters, not a string or contains a character outside the
            geohash alphabet
    """
    if not isinstance(geohash, str):
        raise InvalidGeohashError(f"Geohash must be a string, got {type(geohash).__name__}")
    if not geohash:
        raise InvalidGeohashError("Geohash contains 0 characters")
    if len(geohash) > MAX_GEOHASH_LENGTH:
        raise InvalidGeohashError(
            f"Geohash is {len(geohash)} characters long, at most {MAX_GEOHASH_LENGTH} are supported"
        )

    value = 0
    shift = _FIRST_SHIFT
    for ch in geohash:
        index = _BASE32_INDEX.get(ch)
        if index is None:
            raise InvalidGeohashError(f"Geohash contains invalid character {ch!r}")
        value += index << shift
        shift -= GEOHASH_BITS_PER_CHAR

    return decode(value, BASE_PRECISION)

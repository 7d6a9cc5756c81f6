"""Geographic coordinate value with integer-hash and geohash encodings.

This package provides:
- GeoCoordinate, a validated (longitude, latitude) value
- A 60-bit bit-interleaved integer hash (hashing)
- Base-32 geohash strings (geohash)
- Haversine distance (distance)
- JSON array/object representation (json_codec)
- Batch helpers for pandas DataFrames (frame)
"""

from .coordinate import GeoCoordinate
from .distance import distance, distance_vectorized
from .errors import (
    GeoCoordinateError,
    InvalidGeohashError,
    OutOfRangeError,
    UnexpectedFormatError,
)
from .frame import add_geohash_column, decode_geohash_column, distances_from
from .geohash import decode_geohash, encode_geohash
from .hashing import decode, encode
from .json_codec import GeoCoordinateJSONEncoder, from_json_value, to_json_value

__version__ = "0.1.0"

__all__ = [
    'GeoCoordinate',
    'GeoCoordinateError',
    'InvalidGeohashError',
    'OutOfRangeError',
    'UnexpectedFormatError',
    'decode',
    'decode_geohash',
    'distance',
    'distance_vectorized',
    'encode',
    'encode_geohash',
    'GeoCoordinateJSONEncoder',
    'from_json_value',
    'to_json_value',
    'add_geohash_column',
    'decode_geohash_column',
    'distances_from',
]

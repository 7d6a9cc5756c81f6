"""Constants and environment settings for geocoordinate.

Settings are read from environment variables:

    GEOCOORDINATE_JSON_ARRAY       write coordinates as [lon, lat] (default: true)
    GEOCOORDINATE_GEOHASH_LENGTH   default geohash length, 1-12 (default: 11)
    GEOCOORDINATE_LOG_LEVEL        CLI log level (default: INFO)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Bisection bounds
WEST = -180.0
EAST = 180.0
SOUTH = -90.0
NORTH = 90.0

BASE_PRECISION = 60
DEFAULT_HASH_PRECISION = 52

GEOHASH_BITS_PER_CHAR = 5
DEFAULT_GEOHASH_LENGTH = 11
MAX_GEOHASH_LENGTH = BASE_PRECISION // GEOHASH_BITS_PER_CHAR

EARTH_RADIUS_M = 6371000.0

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass
class Settings:
    json_array: bool = True
    geohash_length: int = DEFAULT_GEOHASH_LENGTH
    log_level: str = "INFO"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring {name}={raw!r}: expected a boolean")
    return default


def _env_geohash_length(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: expected an integer")
        return default
    if not 1 <= value <= MAX_GEOHASH_LENGTH:
        logger.warning(f"Ignoring {name}={raw!r}: must be between 1 and {MAX_GEOHASH_LENGTH}")
        return default
    return value


def load_settings() -> Settings:
    """Build settings from the current environment.

    Invalid values are logged and replaced by their defaults.
    """
    return Settings(
        json_array=_env_bool('GEOCOORDINATE_JSON_ARRAY', True),
        geohash_length=_env_geohash_length('GEOCOORDINATE_GEOHASH_LENGTH', DEFAULT_GEOHASH_LENGTH),
        log_level=os.environ.get('GEOCOORDINATE_LOG_LEVEL', 'INFO').strip().upper() or 'INFO',
    )

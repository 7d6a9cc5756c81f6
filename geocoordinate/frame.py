"""Batch geohash encoding and distances for pandas DataFrames.

Usage:
    import pandas as pd
    from geocoordinate.frame import add_geohash_column, distances_from

    df = pd.DataFrame({"longitude": [106.709437], "latitude": [-6.329094]})
    df = add_geohash_column(df, length=7)
    df["distance_m"] = distances_from(df, GeoCoordinate(106.71, -6.33))
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from .config import DEFAULT_GEOHASH_LENGTH
from .coordinate import GeoCoordinate
from .distance import distance_vectorized
from .errors import InvalidGeohashError, OutOfRangeError
from .geohash import decode_geohash, encode_geohash

logger = logging.getLogger(__name__)

_ERROR_MODES = ('raise', 'coerce')


def _check_errors(errors: str) -> None:
    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")


def add_geohash_column(
    df: pd.DataFrame,
    length: int = DEFAULT_GEOHASH_LENGTH,
    lon_col: str = 'longitude',
    lat_col: str = 'latitude',
    column: str = 'geohash',
    errors: str = 'raise'
) -> pd.DataFrame:
    """Return a copy of `df` with a geohash column.

    Rows with a missing longitude or latitude get None.

    Args:
        df: Input DataFrame
        length: Geohash length, 1 to 12
        lon_col: Name of the longitude column
        lat_col: Name of the latitude column
        column: Name of the column to write
        errors: 'raise' to fail on out-of-range rows, 'coerce' to write None

    Raises:
        OutOfRangeError: For out-of-range rows when errors='raise'
    """
    _check_errors(errors)
    out = df.copy()
    hashes = []
    coerced = 0

    for lon, lat in zip(df[lon_col], df[lat_col]):
        if pd.isna(lon) or pd.isna(lat):
            hashes.append(None)
            continue
        try:
            hashes.append(encode_geohash(float(lon), float(lat), length))
        except OutOfRangeError:
            if errors == 'raise':
                raise
            coerced += 1
            hashes.append(None)

    if coerced:
        logger.info(f"Coerced {coerced} out-of-range rows to None in '{column}'")

    out[column] = pd.Series(hashes, index=df.index, dtype=object)
    return out


def decode_geohash_column(series: pd.Series, errors: str = 'raise') -> pd.DataFrame:
    """Decode a Series of geohashes to cell centers.

    Entries must be strings. All-digit geohashes such as "123" are read as
    integers by pd.read_csv, so load geohash columns with dtype=str;
    non-string entries count as invalid.

    Returns:
        DataFrame with 'longitude' and 'latitude' columns, indexed like
        `series`; NaN for missing (or, with errors='coerce', invalid) entries

    Raises:
        InvalidGeohashError: For malformed geohashes when errors='raise'
    """
    _check_errors(errors)
    lons = []
    lats = []
    coerced = 0

    for value in series:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            lons.append(np.nan)
            lats.append(np.nan)
            continue
        try:
            lon, lat = decode_geohash(value)
        except InvalidGeohashError:
            if errors == 'raise':
                raise
            coerced += 1
            lon, lat = np.nan, np.nan
        lons.append(lon)
        lats.append(lat)

    if coerced:
        logger.info(f"Coerced {coerced} invalid geohashes to NaN")

    return pd.DataFrame({'longitude': lons, 'latitude': lats}, index=series.index)


def distances_from(
    df: pd.DataFrame,
    origin: GeoCoordinate,
    lon_col: str = 'longitude',
    lat_col: str = 'latitude',
    name: Optional[str] = 'distance_m'
) -> pd.Series:
    """Great-circle distance in meters from `origin` to every row."""
    distances = distance_vectorized(
        origin.longitude,
        origin.latitude,
        df[lon_col].to_numpy(dtype=float),
        df[lat_col].to_numpy(dtype=float)
    )
    return pd.Series(distances, index=df.index, name=name)

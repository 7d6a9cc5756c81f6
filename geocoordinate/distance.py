"""Great-circle distance on a spherical earth."""

from math import asin, cos, radians, sin, sqrt

import numpy as np

from .config import EARTH_RADIUS_M


def distance(a, b) -> float:
    """Haversine distance between two coordinates in meters.

    Args:
        a: First coordinate (anything with longitude/latitude attributes)
        b: Second coordinate

    Returns:
        Distance in meters, 0.0 for identical points

    Example:
        >>> from geocoordinate import GeoCoordinate
        >>> distance(GeoCoordinate(-1.7297222, 53.3205555),
        ...          GeoCoordinate(-1.6997222, 53.3186111))  # ~2004.37 m
    """
    lon1 = radians(a.longitude)
    lat1 = radians(a.latitude)
    lon2 = radians(b.longitude)
    lat2 = radians(b.latitude)

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    hav = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * asin(sqrt(min(hav, 1.0)))
    return EARTH_RADIUS_M * c


def distance_vectorized(
    longitude: float,
    latitude: float,
    longitudes: np.ndarray,
    latitudes: np.ndarray
) -> np.ndarray:
    """Haversine distances from one point to many, using NumPy.

    Args:
        longitude: Longitude of the reference point in decimal degrees
        latitude: Latitude of the reference point in decimal degrees
        longitudes: Array of longitudes to measure to
        latitudes: Array of latitudes to measure to

    Returns:
        NumPy array of distances in meters (NaN where an input is NaN)
    """
    lon1 = np.radians(longitude)
    lat1 = np.radians(latitude)
    lon2 = np.radians(np.asarray(longitudes, dtype=float))
    lat2 = np.radians(np.asarray(latitudes, dtype=float))

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    hav = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # Rounding can push hav slightly above 1 for antipodal points (same as the scalar form)
    c = 2 * np.arcsin(np.sqrt(np.clip(hav, 0.0, 1.0)))
    return EARTH_RADIUS_M * c

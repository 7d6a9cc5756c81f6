"""JSON representation of coordinates.

A coordinate is written either as an array `[longitude, latitude]` or as an
object `{"longitude": ..., "latitude": ...}`. Both forms are accepted on read:

- arrays: the first two elements are used, extra elements are ignored
- objects: keys are matched case-insensitively, unknown keys are ignored
  and a missing key reads as 0.0
- numbers given as strings are parsed; a value that cannot be parsed reads
  as 0.0 and a warning is logged

Usage:
    import json
    from geocoordinate.json_codec import GeoCoordinateJSONEncoder, from_json_value

    text = json.dumps({"point": coord}, cls=GeoCoordinateJSONEncoder, use_array=False)
    coord = from_json_value(json.loads(text)["point"])
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from .config import load_settings
from .coordinate import GeoCoordinate
from .errors import UnexpectedFormatError

logger = logging.getLogger(__name__)

JsonCoordinate = Union[List[float], Dict[str, float]]


def _default_use_array(use_array: Optional[bool]) -> bool:
    if use_array is None:
        return load_settings().json_array
    return use_array


def _to_float(value: Any, field: str) -> float:
    # bool is an int subclass but never a coordinate
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    logger.warning(f"Could not read {field} from {value!r}, using 0.0")
    return 0.0


def to_json_value(
    coord: GeoCoordinate,
    use_array: Optional[bool] = None,
    camel_case: bool = True
) -> JsonCoordinate:
    """Convert a coordinate to a JSON-serializable list or dict.

    Args:
        coord: Coordinate to convert
        use_array: Array form if True, object form if False,
            GEOCOORDINATE_JSON_ARRAY if None
        camel_case: Object keys as "longitude"/"latitude" if True,
            "Longitude"/"Latitude" if False
    """
    lon, lat = coord
    if _default_use_array(use_array):
        return [lon, lat]
    if camel_case:
        return {"longitude": lon, "latitude": lat}
    return {"Longitude": lon, "Latitude": lat}


def from_json_value(value: Any) -> GeoCoordinate:
    """Read a coordinate from a decoded JSON value.

    Raises:
        UnexpectedFormatError: If the value is neither an array of at least
            two elements nor an object
        OutOfRangeError: If the values read are out of range
    """
    if isinstance(value, (list, tuple)):
        if len(value) < 2:
            raise UnexpectedFormatError(
                f"Coordinate array needs 2 elements, got {len(value)}"
            )
        lon = _to_float(value[0], "longitude")
        lat = _to_float(value[1], "latitude")
        return GeoCoordinate(lon, lat)

    if isinstance(value, dict):
        lon = 0.0
        lat = 0.0
        for key, item in value.items():
            if not isinstance(key, str):
                continue
            name = key.lower()
            if name == "longitude":
                lon = _to_float(item, "longitude")
            elif name == "latitude":
                lat = _to_float(item, "latitude")
        return GeoCoordinate(lon, lat)

    raise UnexpectedFormatError(f"Unexpected JSON value for coordinate: {type(value).__name__}")


class GeoCoordinateJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes GeoCoordinate values.

    Extra keyword arguments passed to json.dumps reach this class:

        json.dumps(data, cls=GeoCoordinateJSONEncoder, use_array=False)
    """

    def __init__(self, *args, use_array: Optional[bool] = None, camel_case: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_array = _default_use_array(use_array)
        self.camel_case = camel_case

    def default(self, o):
        if isinstance(o, GeoCoordinate):
            return to_json_value(o, use_array=self.use_array, camel_case=self.camel_case)
        return super().default(o)


def dumps(obj: Any, use_array: Optional[bool] = None, camel_case: bool = True, **kwargs) -> str:
    """json.dumps with coordinate support."""
    return json.dumps(
        obj,
        cls=GeoCoordinateJSONEncoder,
        use_array=use_array,
        camel_case=camel_case,
        **kwargs
    )


def loads_coordinate(text: str) -> GeoCoordinate:
    """Parse a JSON document holding a single coordinate."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise UnexpectedFormatError(f"Invalid JSON: {e}") from e
    return from_json_value(value)

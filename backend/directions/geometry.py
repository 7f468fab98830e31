import logging
from numbers import Real
from typing import Any, List, Optional

import polyline

from .config import settings
from .errors import DecodeError
from .models import LatLon

logger = logging.getLogger(__name__)

def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)

def coordinate_from_position(position: Any) -> LatLon:
    """
    GeoJSON position [lon, lat] -> LatLon.
    Extra elements (altitude) are ignored.
    """
    if not isinstance(position, (list, tuple)) or len(position) < 2:
        raise DecodeError(f"Expected a [longitude, latitude] pair, got {position!r}")
    lon, lat = position[0], position[1]
    if not (_is_number(lon) and _is_number(lat)):
        raise DecodeError(f"Non-numeric coordinate pair: {position!r}")
    return LatLon(lat=float(lat), lon=float(lon))

def decode_location(value: Any) -> LatLon:
    """
    Accepts a bare [lon, lat] pair (current responses) or a GeoJSON Point
    object {"type": "Point", "coordinates": [lon, lat]} (legacy responses).
    """
    if isinstance(value, dict):
        return coordinate_from_position(value.get("coordinates"))
    return coordinate_from_position(value)

def decode_polyline(encoded: str, precision: Optional[int] = None) -> List[LatLon]:
    if precision is None:
        precision = settings.polyline_precision
    try:
        points = polyline.decode(encoded, precision)
    except (IndexError, ValueError, TypeError) as exc:
        raise DecodeError(f"Invalid encoded polyline: {exc}") from exc
    return [LatLon(lat=lat, lon=lon) for lat, lon in points]

def decode_line_geometry(geometry: Any, precision: Optional[int] = None) -> Optional[List[LatLon]]:
    """
    Step geometry is either a GeoJSON LineString object or an encoded polyline.
    Anything else means the step has no geometry (None).
    """
    if isinstance(geometry, dict):
        logger.debug("Decoding GeoJSON step geometry")
        positions = geometry.get("coordinates")
        if not isinstance(positions, list):
            raise DecodeError("GeoJSON geometry has no coordinates list")
        return [coordinate_from_position(p) for p in positions]
    if isinstance(geometry, str):
        logger.debug("Decoding polyline step geometry (precision %s)", precision or settings.polyline_precision)
        return decode_polyline(geometry, precision)
    return None

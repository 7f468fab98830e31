"""
Lossless storage form for RouteStep.

A step is stored as a plain dict with camelCase keys. An optional field that
is None is left out of the dict entirely, so an empty list and a missing list
stay distinguishable after a round trip.
"""

import json
import logging
from numbers import Real
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .errors import DecodeError
from .models import INVALID_COORDINATE, Intersection, LatLon, RouteStep
from .vocabulary import ManeuverDirection, ManeuverType, TransportType

logger = logging.getLogger(__name__)

StepRecord = Dict[str, Any]

STRING_LIST_FIELDS = {
    "exitNames": "exit_names",
    "names": "names",
    "codes": "codes",
    "destinationCodes": "destination_codes",
    "destinations": "destinations",
}

def _coordinate_record(coordinate: LatLon) -> Dict[str, float]:
    return {"latitude": coordinate.lat, "longitude": coordinate.lon}

def serialize_step(step: RouteStep) -> StepRecord:
    record: StepRecord = {
        "instructions": step.instructions,
        "maneuverLocation": _coordinate_record(step.maneuver_location),
        "distance": step.distance,
        "expectedTravelTime": step.expected_travel_time,
    }

    if step.coordinates is not None:
        record["coordinates"] = [_coordinate_record(c) for c in step.coordinates]
    if step.initial_heading is not None:
        record["initialHeading"] = step.initial_heading
    if step.final_heading is not None:
        record["finalHeading"] = step.final_heading
    if step.maneuver_type is not None:
        record["maneuverType"] = step.maneuver_type.to_wire()
    if step.maneuver_direction is not None:
        record["maneuverDirection"] = step.maneuver_direction.to_wire()
    if step.exit_index is not None:
        record["exitIndex"] = step.exit_index
    if step.transport_type is not None:
        record["transportType"] = step.transport_type.to_wire()
    for key, attr in STRING_LIST_FIELDS.items():
        value = getattr(step, attr)
        if value is not None:
            record[key] = list(value)
    if step.intersections is not None:
        record["intersections"] = [i.model_dump(mode="json") for i in step.intersections]

    return record

def _number(record: StepRecord, key: str) -> Optional[float]:
    value = record.get(key)
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    return None

def _non_negative(record: StepRecord, key: str) -> float:
    number = _number(record, key)
    return number if number is not None and number >= 0 else 0.0

def _wire_string(record: StepRecord, key: str) -> Optional[str]:
    """
    None when the key is absent or null; DecodeError for any other non-string.
    """
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"{key} must be a string, got {type(value).__name__}")
    return value

def _string_list(record: StepRecord, key: str) -> Optional[List[str]]:
    value = record.get(key)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    return None

def _coordinate(value: Any) -> Optional[LatLon]:
    if not isinstance(value, dict):
        return None
    lat, lon = value.get("latitude"), value.get("longitude")
    if isinstance(lat, Real) and isinstance(lon, Real) and not isinstance(lat, bool) and not isinstance(lon, bool):
        return LatLon(lat=float(lat), lon=float(lon))
    return None

def _coordinates(record: StepRecord) -> Optional[List[LatLon]]:
    value = record.get("coordinates")
    if not isinstance(value, list):
        return None
    # Entries without both latitude and longitude are dropped
    return [c for c in (_coordinate(item) for item in value) if c is not None]

def _maneuver_location(record: StepRecord) -> LatLon:
    location = _coordinate(record.get("maneuverLocation"))
    if location is None:
        logger.warning("Stored step has no readable maneuver location, using invalid coordinate")
        return INVALID_COORDINATE
    return location

def _intersections(record: StepRecord) -> Optional[List[Intersection]]:
    value = record.get("intersections")
    if not isinstance(value, list):
        return None
    try:
        return [Intersection.model_validate(item) for item in value]
    except ValidationError as exc:
        raise DecodeError(f"Invalid stored intersection: {exc}") from exc

def deserialize_step(record: StepRecord) -> RouteStep:
    if not isinstance(record, dict):
        raise DecodeError(f"Stored step must be a mapping, got {type(record).__name__}")

    instructions = record.get("instructions")
    if not isinstance(instructions, str):
        raise DecodeError("Stored step has no instructions string")

    maneuver_type_wire = _wire_string(record, "maneuverType")
    transport_type_wire = _wire_string(record, "transportType")
    direction_wire = record.get("maneuverDirection")
    if direction_wire is not None and not isinstance(direction_wire, str):
        logger.debug("Ignoring non-string maneuverDirection %r", direction_wire)
        direction_wire = None

    exit_index = record.get("exitIndex")
    if not isinstance(exit_index, int) or isinstance(exit_index, bool):
        exit_index = None

    try:
        return RouteStep(
            coordinates=_coordinates(record),
            instructions=instructions,
            initial_heading=_number(record, "initialHeading"),
            final_heading=_number(record, "finalHeading"),
            maneuver_type=ManeuverType.from_wire(maneuver_type_wire),
            maneuver_direction=ManeuverDirection.from_wire(direction_wire),
            maneuver_location=_maneuver_location(record),
            exit_index=exit_index,
            exit_names=_string_list(record, "exitNames"),
            distance=_non_negative(record, "distance"),
            expected_travel_time=_non_negative(record, "expectedTravelTime"),
            names=_string_list(record, "names"),
            codes=_string_list(record, "codes"),
            transport_type=TransportType.from_wire(transport_type_wire),
            destination_codes=_string_list(record, "destinationCodes"),
            destinations=_string_list(record, "destinations"),
            intersections=_intersections(record),
        )
    except ValidationError as exc:
        raise DecodeError(f"Invalid stored step: {exc}") from exc

def dumps_step(step: RouteStep) -> str:
    return json.dumps(serialize_step(step))

def loads_step(text: str) -> RouteStep:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Stored step is not valid JSON: {exc}") from exc
    return deserialize_step(record)

import logging
from numbers import Real
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .errors import DecodeError, MalformedInput
from .geometry import decode_line_geometry, decode_location
from .intersection import decode_intersections
from .legacy import decode_legacy_maneuver
from .models import LatLon, RouteStep
from .road import disambiguate_road
from .vocabulary import (
    ApiGeneration,
    ManeuverDirection,
    ManeuverType,
    ROUNDABOUT_TYPES,
    TransportType,
)

logger = logging.getLogger(__name__)

def _number(value: Any) -> Optional[float]:
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    return None

def _non_negative(value: Any) -> float:
    number = _number(value)
    return number if number is not None and number >= 0 else 0.0

def _integer(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None

def _string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None

def _required_maneuver(step_json: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(step_json, dict):
        raise MalformedInput("step", f"Step must be an object, got {type(step_json).__name__}")
    maneuver = step_json.get("maneuver")
    if not isinstance(maneuver, dict):
        raise MalformedInput("maneuver")
    return maneuver

def _required_string(container: Dict[str, Any], key: str, field: str) -> str:
    value = container.get(key)
    if not isinstance(value, str):
        raise MalformedInput(field)
    return value

def _required_location(maneuver: Dict[str, Any]) -> LatLon:
    try:
        return decode_location(maneuver.get("location"))
    except DecodeError as exc:
        raise MalformedInput("maneuver.location", str(exc)) from exc

def _wire_or_log(enum_cls, raw: Optional[str]):
    value = enum_cls.from_wire(raw) if raw is not None else None
    if raw and value is None:
        logger.debug("Unrecognized %s %r", enum_cls.__name__, raw)
    return value

def synthesize_instructions(
    maneuver_type: Optional[ManeuverType],
    maneuver_direction: Optional[ManeuverDirection],
) -> str:
    """
    Fallback text when the response has no instruction (e.g. plain OSRM):
    "turn left", "depart", "left" or "".
    """
    parts = [str(v) for v in (maneuver_type, maneuver_direction) if v is not None]
    return " ".join(parts)

def _assemble_step(
    step_json: Dict[str, Any],
    maneuver: Dict[str, Any],
    *,
    name: str,
    final_heading: Optional[float],
    maneuver_type: Optional[ManeuverType],
    maneuver_direction: Optional[ManeuverDirection],
    maneuver_location: LatLon,
    coordinates: Optional[List[LatLon]],
    ref: Optional[str] = None,
    destination: Optional[str] = None,
    rotary_name: Optional[str] = None,
) -> RouteStep:
    road = disambiguate_road(name, ref=ref, destination=destination, rotary_name=rotary_name)

    # A rotary is named itself; the road name belongs to the exit taken
    if maneuver_type in ROUNDABOUT_TYPES:
        names = road.rotary_names
        exit_names = road.names
    else:
        names = road.names
        exit_names = None

    instructions = _string(maneuver.get("instruction"))
    if instructions is None:
        instructions = synthesize_instructions(maneuver_type, maneuver_direction)

    intersections_json = step_json.get("intersections")
    intersections = decode_intersections(intersections_json) if isinstance(intersections_json, list) else None

    try:
        return RouteStep(
            coordinates=coordinates,
            instructions=instructions,
            initial_heading=_number(maneuver.get("bearing_before")),
            final_heading=final_heading,
            maneuver_type=maneuver_type,
            maneuver_direction=maneuver_direction,
            maneuver_location=maneuver_location,
            exit_index=_integer(maneuver.get("exit")),
            exit_names=exit_names,
            distance=_non_negative(step_json.get("distance")),
            expected_travel_time=_non_negative(step_json.get("duration")),
            names=names,
            codes=road.codes,
            transport_type=_wire_or_log(TransportType, _string(step_json.get("mode"))),
            destination_codes=road.destination_codes,
            destinations=road.destinations,
            intersections=intersections,
        )
    except ValidationError as exc:
        raise DecodeError(f"Invalid route step: {exc}") from exc

def build_current_step(step_json: Dict[str, Any]) -> RouteStep:
    """
    Build a RouteStep from a current-generation (v5) step object:
    {"name", "ref"?, "destinations"?, "rotary_name"?, "mode", "geometry",
     "maneuver": {"type", "modifier"?, "location": [lon, lat], ...}, ...}
    """
    maneuver = _required_maneuver(step_json)
    maneuver_type = _wire_or_log(ManeuverType, _required_string(maneuver, "type", "maneuver.type"))
    maneuver_direction = _wire_or_log(ManeuverDirection, _string(maneuver.get("modifier")))
    maneuver_location = _required_location(maneuver)
    name = _required_string(step_json, "name", "name")

    return _assemble_step(
        step_json,
        maneuver,
        name=name,
        final_heading=_number(maneuver.get("bearing_after")),
        maneuver_type=maneuver_type,
        maneuver_direction=maneuver_direction,
        maneuver_location=maneuver_location,
        coordinates=decode_line_geometry(step_json.get("geometry")),
        ref=_string(step_json.get("ref")),
        destination=_string(step_json.get("destinations")),
        rotary_name=_string(step_json.get("rotary_name")),
    )

def build_legacy_step(step_json: Dict[str, Any]) -> RouteStep:
    """
    Build a RouteStep from a legacy-generation (v4) step object:
    {"way_name", "mode", "maneuver": {"type", "heading"?, "location": GeoJSON Point}}

    Legacy steps carry no per-step geometry, refs, destinations or rotary names.
    """
    maneuver = _required_maneuver(step_json)
    legacy_type = _required_string(maneuver, "type", "maneuver.type")
    maneuver_type, maneuver_direction = decode_legacy_maneuver(legacy_type)
    if maneuver_type is None:
        logger.debug("Unrecognized legacy maneuver type %r", legacy_type)
    maneuver_location = _required_location(maneuver)
    name = _required_string(step_json, "way_name", "way_name")

    return _assemble_step(
        step_json,
        maneuver,
        name=name,
        final_heading=_number(maneuver.get("heading")),
        maneuver_type=maneuver_type,
        maneuver_direction=maneuver_direction,
        maneuver_location=maneuver_location,
        coordinates=None,
    )

STEP_BUILDERS = {
    ApiGeneration.CURRENT: build_current_step,
    ApiGeneration.LEGACY: build_legacy_step,
}

def resolve_generation(generation: Union[ApiGeneration, str]) -> ApiGeneration:
    try:
        return ApiGeneration(generation)
    except ValueError:
        raise DecodeError(f"Unknown API generation: {generation!r}") from None

def build_step(step_json: Dict[str, Any], generation: Union[ApiGeneration, str] = ApiGeneration.CURRENT) -> RouteStep:
    return STEP_BUILDERS[resolve_generation(generation)](step_json)

def build_leg_steps(steps_json: List[Dict[str, Any]], generation: Union[ApiGeneration, str] = ApiGeneration.CURRENT) -> List[RouteStep]:
    builder = STEP_BUILDERS[resolve_generation(generation)]
    return [builder(s) for s in steps_json]

def parse_route_legs(route_json: Dict[str, Any], generation: Union[ApiGeneration, str] = ApiGeneration.CURRENT) -> List[List[RouteStep]]:
    """
    Returns one list of steps per leg.

    Current routes nest steps under legs[]; legacy routes have a single
    flat steps[] list, returned here as one leg.
    """
    generation = resolve_generation(generation)
    if not isinstance(route_json, dict):
        raise DecodeError(f"Route must be an object, got {type(route_json).__name__}")
    if generation is ApiGeneration.LEGACY:
        legs = [{"steps": route_json.get("steps") or []}]
    else:
        legs = route_json.get("legs") or []

    out: List[List[RouteStep]] = []
    for leg in legs:
        if not isinstance(leg, dict):
            raise DecodeError("Route leg must be an object")
        out.append(build_leg_steps(leg.get("steps") or [], generation))
    logger.debug("Decoded %d legs, %d steps", len(out), sum(len(s) for s in out))
    return out

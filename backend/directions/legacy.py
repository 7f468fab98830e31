"""
Translate legacy (v4) maneuver strings into the current (v5) vocabulary.

Legacy responses fold the direction into the maneuver type ("bear right"),
so both the type and the direction are derived from the same string.
"""

from typing import Optional, Tuple

from .vocabulary import ManeuverDirection, ManeuverType

LEGACY_TURN_TYPES = frozenset({
    "bear right", "turn right", "sharp right",
    "sharp left", "turn left", "bear left",
    "u-turn",
})

def legacy_maneuver_type(legacy_type: str) -> str:
    if legacy_type in LEGACY_TURN_TYPES:
        return "turn"
    if legacy_type == "enter roundabout":
        return "roundabout"
    return legacy_type

def legacy_maneuver_direction(legacy_type: str) -> str:
    if legacy_type in ("bear right", "bear left"):
        return legacy_type.replace("bear", "slight", 1)
    if legacy_type in ("turn right", "turn left"):
        return legacy_type.replace("turn ", "", 1)
    if legacy_type == "u-turn":
        return "uturn"
    return legacy_type

def decode_legacy_maneuver(
    legacy_type: str,
) -> Tuple[Optional[ManeuverType], Optional[ManeuverDirection]]:
    maneuver_type = ManeuverType.from_wire(legacy_maneuver_type(legacy_type))
    direction = ManeuverDirection.from_wire(legacy_maneuver_direction(legacy_type))
    return maneuver_type, direction

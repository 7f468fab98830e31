"""Closed wire vocabularies used by directions responses."""

import enum
from typing import Optional

class WireEnum(str, enum.Enum):
    """
    Enum whose values are the exact strings used on the wire.

    from_wire is partial: any string outside the table decodes to None.
    to_wire is total: every member has exactly one wire string.
    """

    @classmethod
    def from_wire(cls, value) -> Optional["WireEnum"]:
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    def to_wire(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

@enum.unique
class TransportType(WireEnum):
    AUTOMOBILE = "driving"
    FERRY = "ferry"
    MOVABLE_BRIDGE = "moveable bridge"
    INACCESSIBLE = "unaccessible"
    WALKING = "walking"
    CYCLING = "cycling"
    TRAIN = "train"

@enum.unique
class ManeuverType(WireEnum):
    DEPART = "depart"
    TURN = "turn"
    CONTINUE = "continue"
    PASS_NAME_CHANGE = "new name"
    MERGE = "merge"
    TAKE_ON_RAMP = "on ramp"
    TAKE_OFF_RAMP = "off ramp"
    REACH_FORK = "fork"
    REACH_END = "end of road"
    USE_LANE = "use lane"
    TAKE_ROUNDABOUT = "roundabout"
    TAKE_ROTARY = "rotary"
    TURN_AT_ROUNDABOUT = "roundabout turn"
    HEED_WARNING = "notification"
    ARRIVE = "arrive"
    # legacy responses only
    PASS_WAYPOINT = "waypoint"

@enum.unique
class ManeuverDirection(WireEnum):
    SHARP_RIGHT = "sharp right"
    RIGHT = "right"
    SLIGHT_RIGHT = "slight right"
    STRAIGHT_AHEAD = "straight"
    SLIGHT_LEFT = "slight left"
    LEFT = "left"
    SHARP_LEFT = "sharp left"
    U_TURN = "uturn"

# Names swap between the roundabout itself and its exit road for these.
ROUNDABOUT_TYPES = frozenset({ManeuverType.TAKE_ROUNDABOUT, ManeuverType.TAKE_ROTARY})

class ApiGeneration(str, enum.Enum):
    CURRENT = "v5"
    LEGACY = "v4"

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

from .vocabulary import ManeuverDirection, ManeuverType, TransportType

class LatLon(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float

    @property
    def is_valid(self) -> bool:
        return -90.0 <= self.lat <= 90.0 and -180.0 <= self.lon <= 180.0

# Stands in for a maneuver location that could not be read back from storage
INVALID_COORDINATE = LatLon(lat=-180.0, lon=-180.0)

class Intersection(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: LatLon
    headings: Tuple[float, ...] = ()
    outlet_indexes: Tuple[int, ...] = Field((), description="Indexes into headings the traveler may leave by")
    approach_index: Optional[int] = Field(None, description="Index into headings of the approach road")
    outlet_index: Optional[int] = Field(None, description="Index into headings of the road taken")

class RouteStep(BaseModel):
    """
    One maneuver along a route and the approach to the next maneuver.
    Built once from a directions response (or from a persisted record) and never modified.
    """
    model_config = ConfigDict(frozen=True)

    coordinates: Optional[Tuple[LatLon, ...]] = Field(None, description="Path from this maneuver to the next")
    instructions: str = ""
    initial_heading: Optional[float] = Field(None, description="Degrees, before the maneuver")
    final_heading: Optional[float] = Field(None, description="Degrees, after the maneuver")
    maneuver_type: Optional[ManeuverType] = None
    maneuver_direction: Optional[ManeuverDirection] = None
    maneuver_location: LatLon
    exit_index: Optional[int] = None
    exit_names: Optional[Tuple[str, ...]] = None
    distance: float = Field(0.0, ge=0, description="Meters to the next maneuver")
    expected_travel_time: float = Field(0.0, ge=0, description="Seconds to the next maneuver")
    names: Optional[Tuple[str, ...]] = None
    codes: Optional[Tuple[str, ...]] = None
    transport_type: Optional[TransportType] = None
    destination_codes: Optional[Tuple[str, ...]] = None
    destinations: Optional[Tuple[str, ...]] = None
    intersections: Optional[Tuple[Intersection, ...]] = None

    @property
    def coordinate_count(self) -> int:
        return len(self.coordinates) if self.coordinates is not None else 0

    def __str__(self) -> str:
        return self.instructions

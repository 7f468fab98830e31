from typing import Any, Dict, List

from pydantic import ValidationError

from .errors import DecodeError
from .geometry import coordinate_from_position
from .models import Intersection

def decode_intersection(data: Dict[str, Any]) -> Intersection:
    """
    One element of a step's "intersections" array.

    "entry" is parallel to "bearings"; the indexes whose entry is true
    become outlet_indexes. "in" and "out" index into bearings as well.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Intersection must be an object, got {type(data).__name__}")

    entry = data.get("entry") or []
    if not isinstance(entry, list):
        raise DecodeError("Intersection entry must be a list")

    try:
        return Intersection(
            location=coordinate_from_position(data.get("location")),
            headings=data.get("bearings") or (),
            outlet_indexes=[i for i, allowed in enumerate(entry) if allowed is True],
            approach_index=data.get("in"),
            outlet_index=data.get("out"),
        )
    except ValidationError as exc:
        raise DecodeError(f"Invalid intersection: {exc}") from exc

def decode_intersections(items: Any) -> List[Intersection]:
    if not isinstance(items, list):
        raise DecodeError("intersections must be a list")
    return [decode_intersection(item) for item in items]

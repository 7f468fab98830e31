from typing import Optional

class DecodeError(ValueError):
    """Raised when a directions payload or a persisted step cannot be decoded."""

class MalformedInput(DecodeError):
    """
    A structurally required field is missing or has the wrong type.
    Only the maneuver object, maneuver type, maneuver location and the
    step name (way_name for legacy steps) are treated this way.
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Missing or malformed field: {field}")

from pydantic import BaseModel
import os

class Settings(BaseModel):
    polyline_precision: int = int(os.getenv("DIRECTIONS_POLYLINE_PRECISION", "5"))
    default_generation: str = os.getenv("DIRECTIONS_API_GENERATION", "v5")
    log_level: str = os.getenv("DIRECTIONS_LOG_LEVEL", "INFO")

settings = Settings()

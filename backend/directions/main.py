import logging
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException, Query

from .config import settings
from .errors import DecodeError, MalformedInput
from .persistence import deserialize_step, serialize_step
from .steps import build_step, parse_route_legs

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Directions Step Decoder", version="0.3.0")

@app.get("/health")
def health():
    return {"ok": True}

def _decode_error(e: DecodeError) -> HTTPException:
    detail: Dict[str, Any] = {"error": str(e)}
    if isinstance(e, MalformedInput):
        detail["field"] = e.field
    return HTTPException(status_code=422, detail=detail)

@app.post("/api/steps/decode")
def decode_step(
    step: Dict[str, Any] = Body(...),
    generation: Optional[str] = Query(None, description="v5 (current) or v4 (legacy)"),
):
    try:
        route_step = build_step(step, generation or settings.default_generation)
    except DecodeError as e:
        logger.info("Rejected step: %s", e)
        raise _decode_error(e)
    return serialize_step(route_step)

@app.post("/api/routes/decode")
def decode_routes(
    response: Dict[str, Any] = Body(...),
    generation: Optional[str] = Query(None, description="v5 (current) or v4 (legacy)"),
):
    """
    Decodes every step of every route in a directions response.
    Returns routes[] -> legs[] -> steps[] as stored step records.
    """
    routes = response.get("routes")
    if not isinstance(routes, list):
        raise HTTPException(status_code=422, detail={"error": "Response has no routes list"})

    out: List[Dict[str, Any]] = []
    try:
        for route in routes:
            legs = parse_route_legs(route, generation or settings.default_generation)
            out.append({"legs": [{"steps": [serialize_step(s) for s in leg]} for leg in legs]})
    except DecodeError as e:
        logger.info("Rejected directions response: %s", e)
        raise _decode_error(e)

    return {"routes": out}

@app.post("/api/steps/restore")
def restore_step(record: Dict[str, Any] = Body(...)):
    """
    Validates a stored step record and returns it in normalized form.
    """
    try:
        route_step = deserialize_step(record)
    except DecodeError as e:
        raise _decode_error(e)
    return serialize_step(route_step)

from __future__ import annotations

import math
from datetime import datetime

from fastapi import HTTPException, Request

from ..discovery.models import Coordinate

_JSON_MEDIA_TYPES = ("application/json", "*/*")


def require_json_accept(request: Request) -> None:
    """Raise 406 unless the client accepts a JSON response."""
    accept = request.headers.get("accept")
    if not accept or not any(media in accept for media in _JSON_MEDIA_TYPES):
        raise HTTPException(status_code=406, detail="Not Acceptable")


def _parse_degrees(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def get_user_coordinate(lon: str | None = None, lat: str | None = None) -> Coordinate:
    """Build the user's coordinate from the ``lon``/``lat`` query params, or raise 400."""
    lon_value = _parse_degrees(lon)
    lat_value = _parse_degrees(lat)
    if lon_value is None or lat_value is None:
        raise HTTPException(status_code=400, detail="Bad query params")
    return Coordinate(lon=lon_value, lat=lat_value)


def get_now() -> datetime:
    """Current wall-clock time; overridden in tests."""
    return datetime.now()

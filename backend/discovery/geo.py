from __future__ import annotations

import math

from .models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(point_a: Coordinate, point_b: Coordinate) -> float:
    """Great-circle distance in kilometres between two (lon, lat) points.

    Uses the haversine formula on a spherical Earth. Inputs are not range
    checked; NaN coordinates yield NaN.
    """
    phi1 = math.radians(point_a.lat)
    phi2 = math.radians(point_b.lat)
    dphi = math.radians(point_b.lat - point_a.lat)
    dlambda = math.radians(point_b.lon - point_a.lon)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # rounding can push a just outside [0, 1] near antipodal or pole-mirrored
    # points; NaN fails both comparisons and passes through
    if a > 1.0:
        a = 1.0
    elif a < 0.0:
        a = 0.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c

from __future__ import annotations

from datetime import date
from typing import Sequence

from .geo import distance_km
from .models import Coordinate, Restaurant

DEFAULT_RADIUS_KM = 1.5
DEFAULT_MAX_MONTHS = 4


def filter_by_proximity(
    restaurants: Sequence[Restaurant],
    user_coordinate: Coordinate,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> list[Restaurant]:
    """Keep restaurants strictly closer than ``radius_km`` to the user, in input order."""
    return [r for r in restaurants if distance_km(r.location, user_coordinate) < radius_km]


def partition_by_status(restaurants: Sequence[Restaurant], online: bool) -> list[Restaurant]:
    return [r for r in restaurants if r.online == online]


def months_between(earlier: date, later: date) -> int:
    """Whole calendar months from ``earlier`` to ``later``.

    Only the year and month components are compared: 31 Jan -> 1 Feb is one
    month, 1 Jan -> 31 Jan is zero.
    """
    return (later.year - earlier.year) * 12 + (later.month - earlier.month)


def filter_by_recency(
    restaurants: Sequence[Restaurant],
    now: date,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> list[Restaurant]:
    """Keep restaurants launched at most ``max_months`` calendar months before ``now``.

    Launch dates after ``now`` give a negative difference and are kept.
    """
    return [r for r in restaurants if months_between(r.launch_date, now) <= max_months]

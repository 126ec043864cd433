from __future__ import annotations

from datetime import date
from typing import Any, Callable, Sequence

from .filters import DEFAULT_MAX_MONTHS, filter_by_recency, partition_by_status
from .geo import distance_km
from .models import Coordinate, Restaurant

MAX_SECTION_SIZE = 10


def _rank_with_fallback(
    restaurants: Sequence[Restaurant],
    key: Callable[[Restaurant], Any],
    reverse: bool = False,
    limit: int = MAX_SECTION_SIZE,
) -> list[Restaurant]:
    """Online restaurants first, topped up with offline ones, capped at ``limit``.

    ``sorted`` is stable in both directions, so ties keep their input order.
    """
    ranked = sorted(partition_by_status(restaurants, online=True), key=key, reverse=reverse)
    if len(ranked) < limit:
        ranked += sorted(partition_by_status(restaurants, online=False), key=key, reverse=reverse)
    return ranked[:limit]


def popular_restaurants(
    restaurants: Sequence[Restaurant],
    limit: int = MAX_SECTION_SIZE,
) -> list[Restaurant]:
    """Most popular first."""
    return _rank_with_fallback(restaurants, key=lambda r: r.popularity, reverse=True, limit=limit)


def new_restaurants(
    restaurants: Sequence[Restaurant],
    now: date,
    max_months: int = DEFAULT_MAX_MONTHS,
    limit: int = MAX_SECTION_SIZE,
) -> list[Restaurant]:
    """Newest first, among restaurants launched within ``max_months`` of ``now``.

    The recency filter runs before the online/offline split, so offline
    fallbacks are recent too.
    """
    recent = filter_by_recency(restaurants, now, max_months)
    return _rank_with_fallback(recent, key=lambda r: r.launch_date, reverse=True, limit=limit)


def nearby_restaurants(
    restaurants: Sequence[Restaurant],
    user_coordinate: Coordinate,
    limit: int = MAX_SECTION_SIZE,
) -> list[Restaurant]:
    """Closest to the user first."""
    return _rank_with_fallback(
        restaurants,
        key=lambda r: distance_km(r.location, user_coordinate),
        limit=limit,
    )

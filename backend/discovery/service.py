from __future__ import annotations

import logging
import time
from datetime import date
from typing import Sequence

from ..analytics.store import record_event
from .config import DEFAULT_DISCOVERY_CONFIG, DiscoveryConfig
from .filters import filter_by_proximity
from .models import Coordinate, DiscoveryResponse, Restaurant
from .sections import build_sections

logger = logging.getLogger(__name__)


def get_discovery(
    catalog: Sequence[Restaurant],
    user_coordinate: Coordinate,
    now: date,
    config: DiscoveryConfig = DEFAULT_DISCOVERY_CONFIG,
) -> DiscoveryResponse:
    start_time = time.time()

    working_set = filter_by_proximity(catalog, user_coordinate, config.radius_km)
    sections = build_sections(working_set, user_coordinate, now, config)
    response = DiscoveryResponse(sections=sections)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.debug(
        "Discovery at (%s, %s): %d candidates, %d sections in %.1f ms",
        user_coordinate.lon,
        user_coordinate.lat,
        len(working_set),
        len(sections),
        elapsed_ms,
    )
    record_event("discovery", {
        "lon": user_coordinate.lon,
        "lat": user_coordinate.lat,
        "total_candidates": len(working_set),
        "sections": {s.title.value: len(s.restaurants) for s in sections},
        "response_time_ms": elapsed_ms,
    })
    return response

from __future__ import annotations

from datetime import date
from typing import Sequence

from .config import DEFAULT_DISCOVERY_CONFIG, DiscoveryConfig
from .models import Coordinate, Restaurant, Section, SectionTitle
from .ranking import nearby_restaurants, new_restaurants, popular_restaurants


def build_sections(
    working_set: Sequence[Restaurant],
    user_coordinate: Coordinate,
    now: date,
    config: DiscoveryConfig = DEFAULT_DISCOVERY_CONFIG,
) -> list[Section]:
    """Run the popular, new and nearby pipelines and keep the non-empty ones, in that order."""
    limit = config.max_section_size
    candidates = [
        (SectionTitle.popular, popular_restaurants(working_set, limit=limit)),
        (
            SectionTitle.new,
            new_restaurants(working_set, now, max_months=config.new_max_months, limit=limit),
        ),
        (SectionTitle.nearby, nearby_restaurants(working_set, user_coordinate, limit=limit)),
    ]
    return [
        Section(title=title, restaurants=list(restaurants))
        for title, restaurants in candidates
        if restaurants
    ]
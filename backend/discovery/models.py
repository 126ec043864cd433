from __future__ import annotations

from datetime import date
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(NamedTuple):
    """A (longitude, latitude) pair in decimal degrees."""

    lon: float
    lat: float


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    location: Coordinate = Field(..., description="[longitude, latitude] in degrees")
    online: bool
    popularity: float = Field(..., ge=0.0)
    launch_date: date
    blurhash: str = ""


class SectionTitle(str, Enum):
    popular = "Popular Restaurants"
    new = "New Restaurants"
    nearby = "Nearby Restaurants"


class Section(BaseModel):
    title: SectionTitle
    restaurants: list[Restaurant]


class DiscoveryResponse(BaseModel):
    sections: list[Section] = Field(default_factory=list)

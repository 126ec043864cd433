from __future__ import annotations

from datetime import datetime

import uvicorn
from fastapi import Depends, FastAPI

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .api.dependencies import get_now, get_user_coordinate, require_json_accept
from .discovery.config import DEFAULT_DISCOVERY_CONFIG
from .discovery.data_store import get_catalog
from .discovery.models import Coordinate, DiscoveryResponse, Restaurant
from .discovery.service import get_discovery

app = FastAPI(title="Restaurant Discovery API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(catalog: tuple[Restaurant, ...] = Depends(get_catalog)) -> dict:
    return {
        "restaurants": len(catalog),
        "online": sum(1 for r in catalog if r.online),
        "radius_km": DEFAULT_DISCOVERY_CONFIG.radius_km,
        "max_section_size": DEFAULT_DISCOVERY_CONFIG.max_section_size,
    }


# ── Discovery ────────────────────────────────────────────────────────────


@app.get(
    "/discovery",
    response_model=DiscoveryResponse,
    dependencies=[Depends(require_json_accept)],
)
def discovery(
    coordinate: Coordinate = Depends(get_user_coordinate),
    catalog: tuple[Restaurant, ...] = Depends(get_catalog),
    now: datetime = Depends(get_now),
) -> DiscoveryResponse:
    return get_discovery(catalog, coordinate, now)


# ── Analytics ────────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events("discovery"))


if __name__ == "__main__":
    uvicorn.run(app, host=DEFAULT_DISCOVERY_CONFIG.host, port=DEFAULT_DISCOVERY_CONFIG.port)

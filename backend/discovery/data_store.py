from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import DEFAULT_DISCOVERY_CONFIG
from .models import Restaurant

logger = logging.getLogger(__name__)

_catalog: tuple[Restaurant, ...] | None = None


def load_catalog(path: Path) -> tuple[Restaurant, ...]:
    """Read ``{"restaurants": [...]}`` from *path* and validate every record.

    Raises ``pydantic.ValidationError`` on the first malformed record.
    """
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    return tuple(Restaurant.model_validate(item) for item in payload.get("restaurants", []))


def get_catalog() -> tuple[Restaurant, ...]:
    """Return the in-memory restaurant catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        path = DEFAULT_DISCOVERY_CONFIG.catalog_path
        try:
            _catalog = load_catalog(path)
        except Exception:
            logger.exception("Failed to load restaurant catalog from %s", path)
            raise
        logger.info("Loaded %d restaurants from %s", len(_catalog), path)
    return _catalog

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "restaurants.json"


@dataclass(frozen=True)
class DiscoveryConfig:
    catalog_path: Path = Path(os.getenv("DISCOVERY_CATALOG_PATH", str(_DEFAULT_CATALOG)))
    radius_km: float = float(os.getenv("DISCOVERY_RADIUS_KM", "1.5"))
    max_section_size: int = int(os.getenv("DISCOVERY_MAX_SECTION_SIZE", "10"))
    new_max_months: int = int(os.getenv("DISCOVERY_NEW_MAX_MONTHS", "4"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


DEFAULT_DISCOVERY_CONFIG = DiscoveryConfig()

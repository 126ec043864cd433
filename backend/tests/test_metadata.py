from __future__ import annotations

from fastapi.testclient import TestClient

from backend.app import app
from backend.discovery.config import DEFAULT_DISCOVERY_CONFIG
from backend.discovery.data_store import load_catalog

client = TestClient(app)


def test_metadata_reflects_bundled_catalog():
    catalog = load_catalog(DEFAULT_DISCOVERY_CONFIG.catalog_path)
    resp = client.get("/metadata")
    assert resp.status_code == 200
    body = resp.json()
    assert body["restaurants"] == len(catalog)
    assert body["online"] == sum(1 for r in catalog if r.online)


def test_no_dependency_overrides_left_behind():
    assert app.dependency_overrides == {}

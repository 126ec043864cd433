from __future__ import annotations

from backend.analytics.aggregator import compute_analytics
from backend.analytics.store import clear_events, get_events, record_event


def test_analytics_empty():
    body = compute_analytics([])
    assert body["total_queries"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["empty_results"] == {"count": 0, "rate": 0.0}
    assert body["section_impressions"] == {
        "Popular Restaurants": 0,
        "New Restaurants": 0,
        "Nearby Restaurants": 0,
    }


def test_record_event_appends_with_timestamp():
    clear_events()
    record_event("discovery", {"total_candidates": 3})
    events = get_events()
    assert len(events) == 1
    assert events[0]["type"] == "discovery"
    assert "timestamp" in events[0]


def test_compute_analytics_aggregates_discovery_events():
    events = [
        {
            "type": "discovery",
            "total_candidates": 4,
            "sections": {"Popular Restaurants": 4, "Nearby Restaurants": 4},
            "response_time_ms": 2.0,
        },
        {
            "type": "discovery",
            "total_candidates": 0,
            "sections": {},
            "response_time_ms": 1.0,
        },
        {"type": "other", "response_time_ms": 100.0},
    ]
    body = compute_analytics(events)
    assert body["total_queries"] == 2
    assert body["avg_response_time_ms"] == 1.5
    assert body["avg_candidates"] == 2.0
    assert body["section_impressions"]["Popular Restaurants"] == 1
    assert body["section_impressions"]["New Restaurants"] == 0
    assert body["empty_results"]["count"] == 1


def test_get_events_filters_by_type():
    clear_events()
    record_event("discovery", {"total_candidates": 1})
    record_event("startup", {})
    assert [e["type"] for e in get_events("discovery")] == ["discovery"]
    assert len(get_events()) == 2

from __future__ import annotations

from collections import Counter
from typing import Any

from ..discovery.models import SectionTitle


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    queries = [e for e in events if e["type"] == "discovery"]
    total = len(queries)

    # Average response time
    times = [q["response_time_ms"] for q in queries if "response_time_ms" in q]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Average size of the proximity-filtered working set
    candidates = [q.get("total_candidates", 0) for q in queries]
    avg_candidates = round(sum(candidates) / total, 1) if total else 0.0

    # How often each section was shown
    impressions: Counter[str] = Counter({title.value: 0 for title in SectionTitle})
    for q in queries:
        for title in q.get("sections", {}) or {}:
            impressions[title] += 1

    empty = sum(1 for q in queries if not q.get("sections"))

    return {
        "total_queries": total,
        "avg_response_time_ms": avg_time,
        "avg_candidates": avg_candidates,
        "section_impressions": dict(impressions),
        "empty_results": {
            "count": empty,
            "rate": round(empty / total * 100, 1) if total else 0.0,
        },
    }

from __future__ import annotations

from flask import Blueprint, Response
from prometheus_client import Counter, Histogram, generate_latest

metrics_blueprint = Blueprint("metrics_bp", __name__)

CONTENT_TYPE_LATEST = "text/plain; version=0.0.4; charset=utf-8"

SEARCH_CACHE_HITS = Counter(
    "bandtracks_search_cache_hits_total",
    "Track searches answered from the response cache.",
)
SEARCH_CACHE_MISSES = Counter(
    "bandtracks_search_cache_misses_total",
    "Track searches that required an upstream call.",
)
UPSTREAM_FAILURES = Counter(
    "bandtracks_upstream_failures_total",
    "Failed calls to the iTunes Search API.",
)
UPSTREAM_LATENCY = Histogram(
    "bandtracks_upstream_request_seconds",
    "Latency of iTunes Search API calls.",
    buckets=(0.1, 0.25, 0.5, 1, 2, 5, 10, float("inf")),
)
FAVORITE_TOGGLES = Counter(
    "bandtracks_favorite_toggles_total",
    "Favorite toggles by resulting action.",
    ["action"],
)


def record_search_cache_hit() -> None:
    SEARCH_CACHE_HITS.inc()


def record_search_cache_miss() -> None:
    SEARCH_CACHE_MISSES.inc()


def record_upstream_failure() -> None:
    UPSTREAM_FAILURES.inc()


def observe_upstream_latency(seconds: float) -> None:
    UPSTREAM_LATENCY.observe(seconds)


def record_favorite_toggle(action: str) -> None:
    FAVORITE_TOGGLES.labels(action=action).inc()


@metrics_blueprint.route("/metrics")
def metrics_endpoint() -> Response:
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

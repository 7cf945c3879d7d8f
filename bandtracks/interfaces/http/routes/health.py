from __future__ import annotations

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health_bp", __name__)


@health_bp.route("/healthz")
def healthz():
    checks = {}

    search_service = current_app.extensions.get("track_search_service")
    checks["search_cache_entries"] = len(search_service.cache) if search_service else 0

    registry = current_app.extensions.get("favorites_registry")
    checks["favorites"] = len(registry) if registry is not None else 0

    status = "ok" if search_service is not None and registry is not None else "degraded"
    return jsonify({"status": status, "checks": checks}), 200 if status == "ok" else 503

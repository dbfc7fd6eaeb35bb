from __future__ import annotations

from flask import Flask, jsonify, request

from ..access.controller import access_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @access_required
    def dashboard():
        try:
            stats = container.insights_service.dashboard_stats()
        except Exception:
            app.logger.exception("Error fetching stats")
            return jsonify({"stats": None})
        return jsonify({"stats": stats.to_dict()})

    @app.route("/api/insights", methods=["GET"], endpoint="insights")
    @access_required
    def insights():
        svc = container.insights_service
        limit = request.args.get("limit", type=int)
        out: dict = {}

        # Each panel loads on its own; one failing query leaves the others intact.
        sections = {
            "attendance": lambda: [d.to_dict() for d in svc.weekly_attendance()],
            "demographics": lambda: svc.demographics().to_dict(),
            "top_attenders": lambda: [t.to_dict() for t in svc.top_attenders(limit)],
            "tag_counts": lambda: [c.to_dict() for c in svc.category_counts()],
        }
        for key, load in sections.items():
            try:
                out[key] = load()
            except Exception:
                app.logger.exception("Error fetching %s", key)
                out[key] = None

        return jsonify(out)

from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError
from ..container import Container

SESSION_KEY = "authenticated"


def access_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(SESSION_KEY):
            return jsonify({"success": False, "message": "Access code required"}), 401
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        try:
            container.access_service.require(data.get("access_code", ""))
        except AuthenticationError as e:
            app.logger.info("Rejected access code from %s", request.remote_addr)
            return jsonify({"success": False, "message": str(e)}), 401

        session.permanent = True
        session[SESSION_KEY] = True
        return jsonify({"success": True})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.pop(SESSION_KEY, None)
        return jsonify({"success": True})

    @app.route("/api/session", methods=["GET"], endpoint="session_status")
    def session_status():
        return jsonify({"authenticated": bool(session.get(SESSION_KEY))})

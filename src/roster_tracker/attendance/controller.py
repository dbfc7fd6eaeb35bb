from __future__ import annotations

from flask import Flask, jsonify, request

from ..access.controller import access_required
from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import as_flag
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str):
        try:
            return parse_iso_date(value)
        except (TypeError, ValueError):
            raise ValidationError("Date must be in YYYY-MM-DD format")

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_sheet")
    @access_required
    def attendance_sheet():
        try:
            day = _parse_date(request.args["date"]) if request.args.get("date") else today_local()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        try:
            sheet = container.attendance_service.get_sheet(day)
        except Exception:
            app.logger.exception("Error fetching attendance for %s", day)
            return jsonify(
                {
                    "date": day.strftime("%Y-%m-%d"),
                    "members": [],
                    "attendance": {},
                    "totals": {"present": 0, "absent": 0, "communion": 0},
                    "is_marked": False,
                }
            )
        return jsonify(sheet.to_dict())

    @app.route("/api/attendance/marked-dates", methods=["GET"], endpoint="marked_dates")
    @access_required
    def marked_dates():
        try:
            dates = container.attendance_service.marked_dates()
        except Exception:
            app.logger.exception("Error fetching marked dates")
            dates = []
        return jsonify({"dates": [d.strftime("%Y-%m-%d") for d in dates]})

    @app.route("/api/attendance/<int:member_id>/<day>/status", methods=["PUT"], endpoint="set_attendance_status")
    @access_required
    def set_attendance_status(member_id: int, day: str):
        data = request.get_json(silent=True) or {}
        try:
            record = container.attendance_service.set_status(member_id, _parse_date(day), data.get("status", ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Error updating attendance for member %s on %s", member_id, day)
            return jsonify({"success": False, "message": "Error updating attendance. Please try again."}), 500
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance/<int:member_id>/<day>/communion", methods=["PUT"], endpoint="set_attendance_communion")
    @access_required
    def set_attendance_communion(member_id: int, day: str):
        data = request.get_json(silent=True) or {}
        try:
            record = container.attendance_service.set_communion(
                member_id, _parse_date(day), as_flag(data.get("communion"))
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Error updating communion for member %s on %s", member_id, day)
            return jsonify({"success": False, "message": "Error updating attendance. Please try again."}), 500
        return jsonify({"success": True, "record": record.to_dict()})

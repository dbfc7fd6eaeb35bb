from __future__ import annotations

from flask import Flask, jsonify, request

from ..access.controller import access_required
from ..core.constants import EXPORT_FILENAME
from ..core.exceptions import CsvFormatError, ImportRejectedError, NotFoundError, ValidationError
from ..container import Container

PARSE_ERROR_MESSAGE = "Error parsing CSV file. Please check the file format and try again."


def register(app: Flask, container: Container) -> None:
    def _payload():
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else request.form

    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    @access_required
    def list_members():
        try:
            members = container.member_service.list_members()
        except Exception:
            # Read path: the view shows an empty list rather than an error.
            app.logger.exception("Error fetching members")
            members = []
        return jsonify({"members": [m.to_dict() for m in members]})

    @app.route("/api/members", methods=["POST"], endpoint="create_member")
    @access_required
    def create_member():
        try:
            payload = container.member_service.build_payload(_payload())
            member = container.member_service.create_member(payload)
            return jsonify({"success": True, "member": member.to_dict()}), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Error saving member")
            return jsonify({"success": False, "message": "Error saving member. Please try again."}), 500

    @app.route("/api/members/<int:member_id>", methods=["PUT"], endpoint="update_member")
    @access_required
    def update_member(member_id: int):
        try:
            payload = container.member_service.build_payload(_payload())
            member = container.member_service.update_member(member_id, payload)
            return jsonify({"success": True, "member": member.to_dict()})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Error saving member %s", member_id)
            return jsonify({"success": False, "message": "Error saving member. Please try again."}), 500

    @app.route("/api/members/<int:member_id>", methods=["DELETE"], endpoint="delete_member")
    @access_required
    def delete_member(member_id: int):
        try:
            container.member_service.delete_member(member_id)
            return jsonify({"success": True})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            app.logger.exception("Error deleting member %s", member_id)
            return jsonify({"success": False, "message": "Error deleting member. Please try again."}), 500

    @app.route("/api/members/export.csv", methods=["GET"], endpoint="export_members")
    @access_required
    def export_members():
        try:
            text = container.member_service.export_csv()
        except Exception:
            app.logger.exception("Error exporting members")
            return jsonify({"success": False, "message": "Error exporting members. Please try again."}), 500

        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
        )

    @app.route("/api/members/import", methods=["POST"], endpoint="import_members")
    @access_required
    def import_members():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"success": False, "message": "No file uploaded"}), 400

        try:
            text = upload.read().decode("utf-8-sig")
            outcome = container.member_service.import_csv(text)
        except (UnicodeDecodeError, CsvFormatError) as e:
            app.logger.warning("Error parsing CSV %s: %s", upload.filename, e)
            return jsonify({"success": False, "message": PARSE_ERROR_MESSAGE}), 400
        except ImportRejectedError as e:
            return jsonify(
                {
                    "success": False,
                    "message": str(e),
                    "issues": [i.to_dict() for i in e.issues],
                }
            ), 400
        except Exception:
            app.logger.exception("Error importing members")
            return jsonify(
                {
                    "success": False,
                    "message": "Error importing members. Please check the file format and try again.",
                }
            ), 500

        return jsonify({"success": True, **outcome.to_dict()})

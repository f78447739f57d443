from __future__ import annotations

import json

from flask import Flask, jsonify, request

from ..common.web import current_user_id, json_error, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="export_backup")
    @login_required
    def export_backup():
        user_id = current_user_id()
        data = container.backup_service.export_backup(user_id)
        filename = container.backup_service.backup_filename(user_id)
        return app.response_class(
            json.dumps(data, indent=2, ensure_ascii=False),
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/backup", methods=["POST"], endpoint="import_backup")
    @login_required
    def import_backup():
        upload = request.files.get("file")
        if upload is not None:
            payload = upload.read()
        elif request.is_json:
            payload = request.get_data()
        else:
            return json_error("Missing backup file", 400)

        result = container.backup_service.import_backup(current_user_id(), payload)
        return jsonify({"success": True, "imported": result.imported, "hourly_rate": result.hourly_rate})

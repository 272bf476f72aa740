from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import EXPORT_FILENAME
from ..core.exceptions import StorageError, ValidationError


def register(app: Flask, container: Container) -> None:
    # Handled failures are reported as {"error": ...} with HTTP 200.

    def _name_from_body():
        data = request.get_json(silent=True)
        return data.get("name") if isinstance(data, dict) else None

    @app.route("/timein", methods=["POST"], endpoint="time_in")
    def time_in():
        try:
            time_in_at = container.record_service.clock_in(_name_from_body())
        except (ValidationError, StorageError) as e:
            return jsonify({"error": str(e)})
        return jsonify({"message": "Time In recorded", "timeIn": time_in_at})

    @app.route("/timeout", methods=["POST"], endpoint="time_out")
    def time_out():
        try:
            result = container.record_service.clock_out(_name_from_body())
        except (ValidationError, StorageError) as e:
            return jsonify({"error": str(e)})
        return jsonify({"message": "Time Out recorded", "timeOut": result.time_out, "hours": result.hours})

    @app.route("/report/today/<name>", methods=["GET"], endpoint="report_today")
    def report_today(name: str):
        try:
            rows = container.record_service.today_report(name)
        except StorageError as e:
            return jsonify({"error": str(e)})
        return jsonify([r.to_dict() for r in rows])

    @app.route("/report/week/<name>", methods=["GET"], endpoint="report_week")
    def report_week(name: str):
        try:
            rows = container.record_service.week_report(name)
        except StorageError as e:
            return jsonify({"error": str(e)})
        return jsonify([r.to_dict() for r in rows])

    @app.route("/export", methods=["GET"], endpoint="export_csv")
    def export_csv():
        try:
            csv_text = container.export_service.build_csv()
        except StorageError as e:
            return app.response_class(str(e), mimetype="text/plain")

        return app.response_class(
            csv_text,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
        )

from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import BatchValidationError, ReferenceNotFoundError, StoreError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/asistencia", methods=["POST"], endpoint="register_attendance_batch")
    def register_attendance_batch():
        data = request.get_json(silent=True) or {}
        records = data.get("registros") if isinstance(data, dict) else None

        try:
            result = container.attendance_service.register_batch(records)
        except BatchValidationError as e:
            body = {"message": str(e)}
            if e.index is not None:
                body["index"] = e.index
            return jsonify(body), 400
        except ReferenceNotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except StoreError as e:
            logger.exception("attendance batch failed")
            return jsonify({"message": "Error interno del servidor.", "details": str(e)}), 500

        return (
            jsonify(
                {
                    "message": (
                        f"Asistencia de {result.processed_count} estudiantes registrada/actualizada exitosamente."
                    ),
                    "ClaseID": result.reference_class_id,
                }
            ),
            201,
        )

    @app.route("/api/asistencia/clase/<int:class_id>", methods=["GET"], endpoint="attendance_for_class")
    def attendance_for_class(class_id: int):
        try:
            records = container.attendance_service.list_for_class(class_id)
        except StoreError as e:
            logger.exception("attendance listing failed for class %s", class_id)
            return jsonify({"message": "Error al obtener el registro de asistencia de la clase.", "details": str(e)}), 500

        return jsonify(
            [
                {
                    "AsistenciaID": r.attendance_id,
                    "Fecha": r.date.isoformat(),
                    "Status": r.status.value,
                    "EstudianteID": r.student_id,
                    "Nombre": r.student_name,
                    "Correo": r.student_email,
                }
                for r in records
            ]
        )

    @app.route("/api/asistencia/resumen", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        try:
            summaries = container.attendance_service.summary_recent()
        except StoreError as e:
            logger.exception("attendance summary failed")
            return jsonify({"message": "Error al obtener el resumen de asistencia.", "details": str(e)}), 500

        return jsonify(
            [
                {
                    "ClaseID": s.class_id,
                    "clase": s.title,
                    "fecha": s.held_at.isoformat(),
                    "hora": s.time_label,
                    "instructor": s.instructor,
                    "presentes": s.present_count,
                    "total": s.total_count,
                }
                for s in summaries
            ]
        )

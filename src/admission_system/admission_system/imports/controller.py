from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import EXCEL_MIME_TYPES, UPLOAD_FIELD_NAME
from ..core.exceptions import MissingColumnsError, ParseError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/estudiantes/importar", methods=["POST"], endpoint="import_students")
    def import_students():
        """Bulk-create students from an uploaded .xls/.xlsx file.

        Responds 201 whenever the file could be read, even if some rows failed;
        the body carries the counts and up to 10 row-numbered error messages.
        """

        upload = request.files.get(UPLOAD_FIELD_NAME)
        if upload is None or not upload.filename:
            return jsonify({"message": "No se ha subido ningún archivo Excel."}), 400

        if upload.mimetype not in EXCEL_MIME_TYPES:
            return jsonify({"message": "Solo se permiten archivos Excel (.xls, .xlsx)"}), 400

        max_bytes = int(app.config["MAX_UPLOAD_BYTES"])
        content = upload.read(max_bytes + 1)
        if len(content) > max_bytes:
            limit_mb = max_bytes // (1024 * 1024)
            return jsonify({"message": f"El archivo excede el tamaño máximo permitido ({limit_mb} MB)."}), 400

        try:
            report = container.student_import_service.import_workbook(content)
        except MissingColumnsError as e:
            return jsonify({"message": str(e), "missing": e.missing}), 400
        except ParseError as e:
            logger.warning("unreadable upload %r: %s", upload.filename, e)
            return jsonify({"message": "Error al procesar el archivo Excel.", "details": str(e)}), 500
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except StoreError as e:
            logger.exception("student import aborted by a store failure")
            return jsonify({"message": "Error interno del servidor.", "details": str(e)}), 500

        return (
            jsonify(
                {
                    "message": (
                        f"Importación completada: {report.inserted_count} estudiantes registrados, "
                        f"{report.failed_count} con errores."
                    ),
                    "insertedCount": report.inserted_count,
                    "errorCount": report.failed_count,
                    "errorDetails": list(report.error_details),
                }
            ),
            201,
        )

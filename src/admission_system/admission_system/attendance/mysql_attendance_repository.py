from __future__ import annotations

from typing import Any, Sequence

from ..core.enums import AttendanceStatus
from ..database.executor import QueryExecutor
from .model import AttendanceEntry, AttendanceRecord, ClassAttendanceSummary
from .repository import AttendanceRepository


def build_upsert_statement(entries: Sequence[AttendanceEntry]) -> tuple[str, list[Any]]:
    """One multi-row INSERT that overwrites Fecha/Status on a (ClaseID, EstudianteID) clash."""
    placeholders = ", ".join(["(%s, %s, %s, %s)"] * len(entries))
    sql = (
        "INSERT INTO RegistroAsistencia (ClaseID, EstudianteID, Fecha, Status) "
        f"VALUES {placeholders} "
        "ON DUPLICATE KEY UPDATE Fecha = VALUES(Fecha), Status = VALUES(Status)"
    )
    params: list[Any] = []
    for e in entries:
        params.extend((e.class_id, e.student_id, e.date, e.status.value))
    return sql, params


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, executor: QueryExecutor):
        self._executor = executor

    def upsert_batch(self, entries: Sequence[AttendanceEntry]) -> int:
        if not entries:
            return 0
        sql, params = build_upsert_statement(entries)
        return self._executor.execute(sql, params).rowcount

    def list_for_class(self, class_id: int) -> Sequence[AttendanceRecord]:
        rows = self._executor.fetch(
            """
            SELECT
                RA.AsistenciaID, RA.ClaseID, RA.Fecha, RA.Status,
                E.EstudianteID, E.Nombre, E.Correo
            FROM RegistroAsistencia RA
            JOIN Estudiante E ON RA.EstudianteID = E.EstudianteID
            WHERE RA.ClaseID = %s
            ORDER BY E.Nombre ASC
            """,
            (int(class_id),),
        )
        return [
            AttendanceRecord(
                attendance_id=int(r["AsistenciaID"]),
                class_id=int(r["ClaseID"]),
                student_id=int(r["EstudianteID"]),
                date=r["Fecha"],
                status=AttendanceStatus(r["Status"]),
                student_name=r.get("Nombre"),
                student_email=r.get("Correo"),
            )
            for r in rows
        ]

    def summary_recent(self, limit: int = 10) -> Sequence[ClassAttendanceSummary]:
        rows = self._executor.fetch(
            """
            SELECT
                CN.ClaseID, CN.Titulo, CN.Fecha,
                CONCAT(D.Nombre, ' ', D.Apellidos) AS Instructor,
                SUM(CASE WHEN RA.Status = 'Presente' THEN 1 ELSE 0 END) AS Presentes,
                COUNT(RA.EstudianteID) AS Total
            FROM ClaseNivelacion CN
            LEFT JOIN RegistroAsistencia RA ON CN.ClaseID = RA.ClaseID
            JOIN Docente D ON CN.DocenteID = D.DocenteID
            GROUP BY CN.ClaseID, CN.Titulo, CN.Fecha, D.Nombre, D.Apellidos
            ORDER BY CN.Fecha DESC
            LIMIT %s
            """,
            (int(limit),),
        )
        return [
            ClassAttendanceSummary(
                class_id=int(r["ClaseID"]),
                title=r["Titulo"],
                held_at=r["Fecha"],
                instructor=r["Instructor"],
                # SUM over an empty LEFT JOIN yields NULL
                present_count=int(r["Presentes"] or 0),
                total_count=int(r["Total"] or 0),
            )
            for r in rows
        ]

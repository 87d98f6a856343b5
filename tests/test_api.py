from __future__ import annotations

import io
from datetime import datetime

import pandas as pd
import pytest

from src.admission_system.admission_system.attendance.model import ClassAttendanceSummary
from src.admission_system.admission_system.attendance.service import AttendanceBatchService
from src.admission_system.admission_system.container import Container
from src.admission_system.admission_system.core.exceptions import (
    InternalStoreError,
    ReferenceConstraintError,
    UniqueConstraintError,
)
from src.admission_system.admission_system.imports.service import StudentImportService
from src.admission_system.admission_system.main import create_app
from src.admission_system.admission_system.schools.model import ReferenceEntry

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class InMemoryStudents:
    def __init__(self):
        self.by_email = {}

    def create_student(self, student):
        if student.email in self.by_email:
            raise UniqueConstraintError("Duplicate entry")
        self.by_email[student.email] = student
        return len(self.by_email)


class InMemorySchools:
    def __init__(self, *, broken=False):
        self._broken = broken

    def list_reference_entries(self):
        if self._broken:
            raise InternalStoreError("db down")
        return [ReferenceEntry(1, "CBTis 168")]


class InMemoryAttendance:
    def __init__(self):
        self.rows = {}

    def upsert_batch(self, entries):
        if any(e.student_id == 404 for e in entries):
            raise ReferenceConstraintError("Cannot add or update a child row")
        for e in entries:
            self.rows[e.key] = e
        return len(entries)

    def list_for_class(self, class_id):
        return []

    def summary_recent(self, limit=10):
        present = sum(1 for e in self.rows.values() if e.status.value == "Presente")
        return [ClassAttendanceSummary(1, "Álgebra", datetime(2024, 1, 10, 9, 30), "Ana Ruiz", present, len(self.rows))]


@pytest.fixture
def stores():
    return {"students": InMemoryStudents(), "schools": InMemorySchools(), "attendance": InMemoryAttendance()}


@pytest.fixture
def client(monkeypatch, stores):
    monkeypatch.setenv("APP_ENV", "testing")
    container = Container(
        executor=None,
        students_repo=stores["students"],
        schools_repo=stores["schools"],
        attendance_repo=stores["attendance"],
        student_import_service=StudentImportService(stores["students"], stores["schools"]),
        attendance_service=AttendanceBatchService(stores["attendance"]),
    )
    app = create_app(container)
    return app.test_client()


def _xlsx(records) -> bytes:
    buf = io.BytesIO()
    pd.DataFrame(records).to_excel(buf, index=False, engine="openpyxl")
    return buf.getvalue()


def _upload(client, content: bytes, *, filename="alumnos.xlsx", mimetype=XLSX_MIME):
    return client.post(
        "/api/estudiantes/importar",
        data={"archivoExcel": (io.BytesIO(content), filename, mimetype)},
        content_type="multipart/form-data",
    )


def test_import_reports_partial_success_with_201(client, stores):
    content = _xlsx(
        [
            {"Nombre": "Ana", "Apellidos": "López", "Correo": "ana@example.com", "Preparatoria": "Instituto Tec"},
            {"Nombre": "Ana", "Apellidos": "López", "Correo": "ana@example.com", "Preparatoria": "CBTis 168"},
        ]
    )

    resp = _upload(client, content)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["insertedCount"] == 1
    assert body["errorCount"] == 1
    assert body["errorDetails"][0].startswith("Fila 3:")
    assert stores["students"].by_email["ana@example.com"].school_id is None


def test_import_without_file_is_400(client):
    resp = client.post("/api/estudiantes/importar", data={}, content_type="multipart/form-data")

    assert resp.status_code == 400


def test_import_rejects_non_excel_mimetype(client):
    resp = _upload(client, b"a,b,c", filename="alumnos.csv", mimetype="text/csv")

    assert resp.status_code == 400
    assert "Excel" in resp.get_json()["message"]


def test_import_rejects_files_over_the_limit(client):
    resp = _upload(client, b"0" * (5 * 1024 * 1024 + 1))

    assert resp.status_code == 400


def test_import_missing_columns_lists_them(client):
    resp = _upload(client, _xlsx([{"Nombre": "Ana", "Apellidos": "López"}]))

    assert resp.status_code == 400
    assert resp.get_json()["missing"] == ["Correo"]


def test_import_empty_sheet_is_400(client):
    resp = _upload(client, _xlsx([]))

    assert resp.status_code == 400


def test_import_unreadable_file_is_500(client):
    resp = _upload(client, b"definitely not a workbook")

    assert resp.status_code == 500


def test_import_store_failure_before_rows_is_500(monkeypatch, stores):
    monkeypatch.setenv("APP_ENV", "testing")
    schools = InMemorySchools(broken=True)
    container = Container(
        executor=None,
        students_repo=stores["students"],
        schools_repo=schools,
        attendance_repo=stores["attendance"],
        student_import_service=StudentImportService(stores["students"], schools),
        attendance_service=AttendanceBatchService(stores["attendance"]),
    )
    client = create_app(container).test_client()

    resp = _upload(client, _xlsx([{"Nombre": "Ana", "Apellidos": "López", "Correo": "ana@example.com"}]))

    assert resp.status_code == 500
    assert stores["students"].by_email == {}


def test_attendance_batch_created(client, stores):
    payload = {
        "registros": [
            {"ClaseID": 1, "EstudianteID": 5, "Fecha": "2024-01-10", "Status": "Presente"},
            {"ClaseID": 1, "EstudianteID": 6, "Fecha": "2024-01-10", "Status": "Ausente"},
        ]
    }

    first = client.post("/api/asistencia", json=payload)
    second = client.post("/api/asistencia", json=payload)

    assert first.status_code == second.status_code == 201
    assert first.get_json()["ClaseID"] == 1
    assert len(stores["attendance"].rows) == 2


def test_attendance_incomplete_entry_is_400_and_writes_nothing(client, stores):
    payload = {
        "registros": [
            {"ClaseID": 1, "EstudianteID": 5, "Fecha": "2024-01-10", "Status": "Presente"},
            {"ClaseID": 1, "EstudianteID": 6, "Fecha": "2024-01-10"},
        ]
    }

    resp = client.post("/api/asistencia", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["index"] == 1
    assert stores["attendance"].rows == {}


def test_attendance_empty_list_is_400(client):
    assert client.post("/api/asistencia", json={"registros": []}).status_code == 400
    assert client.post("/api/asistencia", json={}).status_code == 400


def test_attendance_unknown_reference_is_404(client):
    payload = {"registros": [{"ClaseID": 1, "EstudianteID": 404, "Fecha": "2024-01-10", "Status": "Presente"}]}

    assert client.post("/api/asistencia", json=payload).status_code == 404


def test_attendance_listing_and_health(client):
    assert client.get("/api/asistencia/clase/1").get_json() == []
    assert client.get("/health").get_json() == {"status": "ok"}


def test_attendance_summary_reports_present_and_total(client):
    payload = {
        "registros": [
            {"ClaseID": 1, "EstudianteID": 5, "Fecha": "2024-01-10", "Status": "Presente"},
            {"ClaseID": 1, "EstudianteID": 6, "Fecha": "2024-01-10", "Status": "Ausente"},
        ]
    }
    client.post("/api/asistencia", json=payload)

    resp = client.get("/api/asistencia/resumen")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {
            "ClaseID": 1,
            "clase": "Álgebra",
            "fecha": "2024-01-10T09:30:00",
            "hora": "09:30",
            "instructor": "Ana Ruiz",
            "presentes": 1,
            "total": 2,
        }
    ]


def test_attendance_with_unpadded_date_is_400(client):
    payload = {"registros": [{"ClaseID": 1, "EstudianteID": 5, "Fecha": "2024-1-5", "Status": "Presente"}]}

    resp = client.post("/api/asistencia", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["index"] == 0

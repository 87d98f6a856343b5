from __future__ import annotations

import logging
from typing import Any, Iterable

from ..common.validators import clean_text
from ..core.constants import (
    AFFIRMATIVE_TOKENS,
    COL_ACCEPTED,
    COL_EMAIL,
    COL_ENROLLMENT,
    COL_MAJOR,
    COL_MUNICIPALITY,
    COL_NAME,
    COL_NOTES,
    COL_PHONE,
    COL_SCHOOL,
    COL_SURNAME,
    MAX_IMPORT_ERROR_DETAILS,
)
from ..core.exceptions import (
    NotNullConstraintError,
    ReferenceConstraintError,
    RowCreateError,
    StoreError,
    UniqueConstraintError,
    ValidationError,
)
from ..schools.repository import SchoolRepository
from ..students.model import NewStudent
from ..students.repository import StudentRepository
from .model import ImportReport, ImportRow
from .reference_resolver import ReferenceResolver
from .tabular_parser import parse_workbook

logger = logging.getLogger(__name__)


def normalize_accepted(value: Any) -> bool:
    """True only for a boolean True cell or an affirmative token (SI / SÍ, any case)."""
    if isinstance(value, bool):
        return value
    text = clean_text(value)
    return text is not None and text.upper() in AFFIRMATIVE_TOKENS


def _required(row: ImportRow, column: str) -> str:
    text = clean_text(row.get(column))
    if text is None:
        raise RowCreateError(f"el campo {column} es obligatorio")
    return text


def _failure_message(error: Exception) -> str:
    if isinstance(error, UniqueConstraintError):
        return f"el correo ya está registrado ({error})"
    if isinstance(error, ReferenceConstraintError):
        return f"la preparatoria referenciada no existe ({error})"
    if isinstance(error, NotNullConstraintError):
        return f"faltan datos obligatorios ({error})"
    return str(error)


class StudentImportService:
    """Use case: bulk student creation from a spreadsheet.

    Rows are independent: a row that cannot be stored is counted and
    described in the report, and processing continues with the next row.
    Only structural problems of the file (or failing to load the school
    snapshot) abort the call, and they do so before anything is written.
    """

    def __init__(
        self,
        students: StudentRepository,
        schools: SchoolRepository,
        *,
        max_error_details: int = MAX_IMPORT_ERROR_DETAILS,
    ):
        self._students = students
        self._schools = schools
        self._max_error_details = max_error_details

    def import_workbook(self, content: bytes) -> ImportReport:
        sheet = parse_workbook(content)
        resolver = ReferenceResolver.from_entries(self._schools.list_reference_entries())
        logger.info("importing %d student rows (%d known schools)", len(sheet.rows), len(resolver))
        return self.import_rows(sheet.rows, resolver)

    def import_rows(self, rows: Iterable[ImportRow], resolver: ReferenceResolver) -> ImportReport:
        inserted = 0
        failed = 0
        details: list[str] = []

        for row in rows:
            try:
                self._students.create_student(self.build_student(row, resolver))
            except (ValidationError, StoreError) as e:
                failed += 1
                message = _failure_message(e)
                logger.warning("row %d rejected: %s", row.row_number, message)
                if len(details) < self._max_error_details:
                    details.append(f"Fila {row.row_number}: {message}")
                continue
            inserted += 1

        logger.info("student import finished: inserted=%d failed=%d", inserted, failed)
        return ImportReport(inserted_count=inserted, failed_count=failed, error_details=tuple(details))

    @staticmethod
    def build_student(row: ImportRow, resolver: ReferenceResolver) -> NewStudent:
        return NewStudent(
            name=_required(row, COL_NAME),
            surname=_required(row, COL_SURNAME),
            email=_required(row, COL_EMAIL),
            enrollment_code=clean_text(row.get(COL_ENROLLMENT)),
            phone=clean_text(row.get(COL_PHONE)),
            school_id=resolver.resolve(row.get(COL_SCHOOL)),
            intended_major=clean_text(row.get(COL_MAJOR)),
            municipality=clean_text(row.get(COL_MUNICIPALITY)),
            accepted=normalize_accepted(row.get(COL_ACCEPTED)),
            notes=clean_text(row.get(COL_NOTES)),
        )

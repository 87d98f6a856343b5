from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_positive_int
from ..core.constants import RECENT_CLASS_SUMMARY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import (
    BatchValidationError,
    ReferenceConstraintError,
    ReferenceNotFoundError,
    ValidationError,
)
from .model import AttendanceBatchResult, AttendanceEntry, AttendanceRecord, ClassAttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("ClaseID", "EstudianteID", "Fecha", "Status")


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError("Fecha debe tener el formato AAAA-MM-DD")


def _parse_status(value: Any) -> AttendanceStatus:
    try:
        return AttendanceStatus(str(value).strip())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Status debe ser uno de: {allowed}")


def parse_entry(index: int, raw: Any) -> AttendanceEntry:
    """Validate one submitted record; errors carry the record's position in the batch."""
    if not isinstance(raw, Mapping):
        raise BatchValidationError(f"El registro {index} no es un objeto válido.", index=index)

    missing = [name for name in _REQUIRED_FIELDS if _is_missing(raw.get(name))]
    if missing:
        raise BatchValidationError(
            f"Registro incompleto en la lista masiva (posición {index}): falta {', '.join(missing)}.",
            index=index,
        )

    try:
        return AttendanceEntry(
            class_id=require_positive_int(raw["ClaseID"], "ClaseID"),
            student_id=require_positive_int(raw["EstudianteID"], "EstudianteID"),
            date=_parse_date(raw["Fecha"]),
            status=_parse_status(raw["Status"]),
        )
    except ValidationError as e:
        raise BatchValidationError(f"Registro inválido en la lista masiva (posición {index}): {e}", index=index) from e


class AttendanceBatchService:
    """Use case: take attendance for a class in one submission.

    The batch is all-or-nothing. Every record is validated before anything
    is written, and the write itself is a single upsert statement, so a
    resubmission of the same batch leaves the stored rows unchanged.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def register_batch(self, records: Optional[Sequence[Any]]) -> AttendanceBatchResult:
        if not records or isinstance(records, (str, bytes, Mapping)):
            raise BatchValidationError("Debe proporcionar al menos un registro de asistencia.")

        entries = [parse_entry(i, raw) for i, raw in enumerate(records)]

        try:
            affected = self._attendance.upsert_batch(entries)
        except ReferenceConstraintError as e:
            logger.warning("attendance batch rejected, unknown class or student: %s", e)
            raise ReferenceNotFoundError("Error de relación: ClaseID o EstudianteID no existen.") from e

        logger.info(
            "attendance batch stored: class=%s entries=%d affected_rows=%s",
            entries[0].class_id,
            len(entries),
            affected,
        )
        return AttendanceBatchResult(processed_count=len(entries), reference_class_id=entries[0].class_id)

    def list_for_class(self, class_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_class(int(class_id))

    def summary_recent(self, limit: int = RECENT_CLASS_SUMMARY_LIMIT) -> Sequence[ClassAttendanceSummary]:
        return self._attendance.summary_recent(limit)

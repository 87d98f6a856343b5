from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry, AttendanceRecord, ClassAttendanceSummary


class AttendanceRepository(Protocol):
    def upsert_batch(self, entries: Sequence[AttendanceEntry]) -> int:
        """Insert-or-overwrite all entries atomically, keyed by (class, student).

        Either every entry is applied or none is; a foreign-key failure
        surfaces as ``ReferenceConstraintError``. Returns the store's
        affected-row count.
        """

        raise NotImplementedError

    def list_for_class(self, class_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def summary_recent(self, limit: int = 10) -> Sequence[ClassAttendanceSummary]:
        """Most recent classes first, each with present and total marks (zero when none)."""

        raise NotImplementedError

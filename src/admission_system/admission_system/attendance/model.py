from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One submitted attendance mark; (class_id, student_id) is its natural key."""

    class_id: int
    student_id: int
    date: date
    status: AttendanceStatus

    @property
    def key(self) -> tuple[int, int]:
        return (self.class_id, self.student_id)


@dataclass(frozen=True)
class AttendanceBatchResult:
    processed_count: int
    reference_class_id: int


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model: stored attendance row joined with the student's name."""

    attendance_id: int
    class_id: int
    student_id: int
    date: date
    status: AttendanceStatus
    student_name: Optional[str] = None
    student_email: Optional[str] = None


@dataclass(frozen=True)
class ClassAttendanceSummary:
    """Read-model: one class with its instructor and attendance tally."""

    class_id: int
    title: str
    held_at: datetime
    instructor: str
    present_count: int
    total_count: int

    @property
    def time_label(self) -> str:
        return self.held_at.strftime("%H:%M")

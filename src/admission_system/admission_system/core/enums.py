from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "Presente"
    ABSENT = "Ausente"


class ConstraintKind(str, Enum):
    """Kind of constraint the store reports as violated."""

    FOREIGN_KEY = "FOREIGN_KEY"
    UNIQUE = "UNIQUE"
    NOT_NULL = "NOT_NULL"

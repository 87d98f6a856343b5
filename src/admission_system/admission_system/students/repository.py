from __future__ import annotations

from typing import Protocol

from .model import NewStudent


class StudentRepository(Protocol):
    def create_student(self, student: NewStudent) -> int:
        """Insert one student and return its generated id.

        Raises a ``StoreError`` subclass (e.g. ``UniqueConstraintError`` for a
        repeated email) when the store rejects the row.
        """

        raise NotImplementedError

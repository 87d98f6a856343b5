from __future__ import annotations

from typing import Sequence

from ..database.executor import QueryExecutor
from .model import ReferenceEntry
from .repository import SchoolRepository


class MySQLSchoolRepository(SchoolRepository):
    def __init__(self, executor: QueryExecutor):
        self._executor = executor

    def list_reference_entries(self) -> Sequence[ReferenceEntry]:
        rows = self._executor.fetch("SELECT PrepID, Nombre FROM Preparatoria ORDER BY PrepID ASC")
        return [ReferenceEntry(school_id=int(r["PrepID"]), name=r["Nombre"]) for r in rows if r.get("Nombre")]

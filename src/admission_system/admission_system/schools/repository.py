from __future__ import annotations

from typing import Protocol, Sequence

from .model import ReferenceEntry


class SchoolRepository(Protocol):
    def list_reference_entries(self) -> Sequence[ReferenceEntry]:
        """All schools, in a stable order, as a snapshot for name resolution."""

        raise NotImplementedError

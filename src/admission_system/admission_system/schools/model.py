from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceEntry:
    """(identifier, display name) pair of a reference table row."""

    school_id: int
    name: str

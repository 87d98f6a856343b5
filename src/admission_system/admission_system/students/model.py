from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NewStudent:
    """Validated values for one Estudiante insert."""

    name: str
    surname: str
    email: str
    enrollment_code: Optional[str] = None
    phone: Optional[str] = None
    school_id: Optional[int] = None
    intended_major: Optional[str] = None
    municipality: Optional[str] = None
    accepted: bool = False
    notes: Optional[str] = None

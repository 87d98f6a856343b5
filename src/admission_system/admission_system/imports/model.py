from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True)
class ImportRow:
    """One data row of an uploaded sheet.

    ``row_number`` is the row as the operator sees it in the spreadsheet
    (1-based, header included), so error messages can point back to it.
    """

    row_number: int
    values: Mapping[str, Any]

    def get(self, column: str) -> Optional[Any]:
        return self.values.get(column)


@dataclass(frozen=True)
class ParsedSheet:
    columns: Sequence[str]
    rows: Sequence[ImportRow]
    header_row_number: int = 1


@dataclass(frozen=True)
class ImportReport:
    inserted_count: int
    failed_count: int
    error_details: Sequence[str] = field(default_factory=tuple)

    @property
    def processed_count(self) -> int:
        return self.inserted_count + self.failed_count

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence


@dataclass(frozen=True)
class ExecResult:
    """Outcome of a write statement."""

    rowcount: int
    lastrowid: Optional[int] = None


class QueryExecutor(Protocol):
    """The only I/O boundary of the ingestion engine.

    Implementations run one parameterized statement per call, commit it as a
    unit, and raise a ``StoreError`` subclass on failure.
    """

    def execute(self, statement: str, params: Sequence[Any] = ()) -> ExecResult:
        raise NotImplementedError

    def fetch(self, query: str, params: Sequence[Any] = ()) -> Sequence[Dict[str, Any]]:
        raise NotImplementedError

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from ..schools.model import ReferenceEntry


def normalize_reference_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    key = str(value).strip().lower()
    return key or None


class ReferenceResolver:
    """Case-insensitive display-name -> id lookup over one reference snapshot.

    Built once per import batch. When two entries normalize to the same key
    the later one wins. An unknown name resolves to ``None``; callers store it
    as an absent foreign key, it is not an error.
    """

    def __init__(self, lookup: Dict[str, int]):
        self._lookup = lookup

    @classmethod
    def from_entries(cls, entries: Iterable[ReferenceEntry]) -> "ReferenceResolver":
        lookup: Dict[str, int] = {}
        for entry in entries:
            key = normalize_reference_name(entry.name)
            if key is not None:
                lookup[key] = int(entry.school_id)
        return cls(lookup)

    def resolve(self, raw_name: Any) -> Optional[int]:
        key = normalize_reference_name(raw_name)
        if key is None:
            return None
        return self._lookup.get(key)

    def __len__(self) -> int:
        return len(self._lookup)

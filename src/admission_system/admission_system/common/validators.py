from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def clean_text(value: Any) -> Optional[str]:
    """Stringify a cell/JSON value; blank or missing becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; True must not pass as id 1.
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} no es válido")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no es válido")
    if number <= 0 or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} no es válido")
    return number

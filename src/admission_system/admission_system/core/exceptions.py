from __future__ import annotations

from typing import Optional, Sequence

from .enums import ConstraintKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ImportFileError(ValidationError):
    """Raised when an uploaded spreadsheet is structurally unusable."""


class ParseError(ImportFileError):
    """Raised when the upload cannot be decoded as a workbook."""


class EmptyDatasetError(ImportFileError):
    """Raised when the sheet has a header but no data rows."""


class MissingColumnsError(ImportFileError):
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Faltan columnas obligatorias: {', '.join(self.missing)}")


class RowCreateError(ValidationError):
    """A single import row could not be turned into a student."""


class BatchValidationError(ValidationError):
    def __init__(self, message: str, *, index: Optional[int] = None):
        self.index = index
        super().__init__(message)


class ReferenceNotFoundError(DomainError):
    """Raised when a batch references a class or student that does not exist."""


class StoreError(Exception):
    """Base exception for failures reported by the query executor."""


class ConstraintViolation(StoreError):
    kind: ConstraintKind

    def __init__(self, message: str, *, kind: Optional[ConstraintKind] = None):
        if kind is not None:
            self.kind = kind
        super().__init__(message)


class ReferenceConstraintError(ConstraintViolation):
    kind = ConstraintKind.FOREIGN_KEY


class UniqueConstraintError(ConstraintViolation):
    kind = ConstraintKind.UNIQUE


class NotNullConstraintError(ConstraintViolation):
    kind = ConstraintKind.NOT_NULL


class InternalStoreError(StoreError):
    """Any store failure that is not a recognized constraint violation."""

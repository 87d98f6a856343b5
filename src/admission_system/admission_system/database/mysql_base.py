from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import (
    InternalStoreError,
    NotNullConstraintError,
    ReferenceConstraintError,
    StoreError,
    UniqueConstraintError,
)
from .connection import DatabaseConnection

_FOREIGN_KEY_ERRNOS = frozenset(
    {
        errorcode.ER_NO_REFERENCED_ROW,
        errorcode.ER_NO_REFERENCED_ROW_2,
        errorcode.ER_ROW_IS_REFERENCED,
        errorcode.ER_ROW_IS_REFERENCED_2,
    }
)
_UNIQUE_ERRNOS = frozenset({errorcode.ER_DUP_ENTRY})
_NOT_NULL_ERRNOS = frozenset({errorcode.ER_BAD_NULL_ERROR, errorcode.ER_NO_DEFAULT_FOR_FIELD})


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def classify_store_error(error: mysql.connector.Error) -> StoreError:
    """Translate a driver error into the typed store error taxonomy.

    Classification relies on the server error number only; message text is
    driver/locale specific and is kept solely for display.
    """

    errno = getattr(error, "errno", None)
    message = getattr(error, "msg", None) or str(error)

    if errno in _FOREIGN_KEY_ERRNOS:
        return ReferenceConstraintError(message)
    if errno in _UNIQUE_ERRNOS:
        return UniqueConstraintError(message)
    if errno in _NOT_NULL_ERRNOS:
        return NotNullConstraintError(message)
    return InternalStoreError(message)

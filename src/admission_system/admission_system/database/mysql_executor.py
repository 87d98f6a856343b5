from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

import mysql.connector

from .connection import DatabaseConnection
from .executor import ExecResult, QueryExecutor
from .mysql_base import classify_store_error, db_cursor, fetchall

logger = logging.getLogger(__name__)


class MySQLQueryExecutor(QueryExecutor):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def execute(self, statement: str, params: Sequence[Any] = ()) -> ExecResult:
        try:
            with db_cursor(self._conn_factory, dictionary=False) as (_, cur):
                cur.execute(statement, tuple(params))
                lastrowid = cur.lastrowid
                return ExecResult(
                    rowcount=int(cur.rowcount),
                    lastrowid=int(lastrowid) if lastrowid else None,
                )
        except mysql.connector.Error as e:
            store_error = classify_store_error(e)
            logger.debug("statement failed (%s): %s", type(store_error).__name__, store_error)
            raise store_error from e

    def fetch(self, query: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(query, tuple(params))
                return fetchall(cur)
        except mysql.connector.Error as e:
            raise classify_store_error(e) from e

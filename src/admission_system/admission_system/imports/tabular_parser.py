"""Spreadsheet decoding for bulk imports.

The first sheet of the workbook is read; its first row is the header and
every following row is a data row. Blank rows are dropped but the surviving
rows keep their sheet row numbers.
"""

from __future__ import annotations

import io
from typing import Any, Iterable, Optional

import pandas as pd

from ..core.constants import REQUIRED_IMPORT_COLUMNS, SHEET_ROW_OFFSET
from ..core.exceptions import EmptyDatasetError, MissingColumnsError, ParseError
from .model import ImportRow, ParsedSheet


def _clean_cell(value: Any) -> Optional[Any]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, bool):
        return value
    if pd.isna(value):
        return None
    # Excel stores every number as float; ids and phones must not become "5551234.0".
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def read_first_sheet(content: bytes) -> pd.DataFrame:
    """Decode an .xls/.xlsx buffer into a raw DataFrame (header applied, values untouched)."""
    if not content:
        raise ParseError("El archivo está vacío o no es un Excel válido")
    try:
        # dtype=object keeps cell values as the engine produced them (no NaN-driven float upcasting).
        return pd.read_excel(io.BytesIO(content), sheet_name=0, header=0, dtype=object)
    except Exception as e:
        raise ParseError(f"No se pudo leer el archivo Excel: {e}") from e


def parse_workbook(content: bytes, *, required_columns: Iterable[str] = REQUIRED_IMPORT_COLUMNS) -> ParsedSheet:
    """Decode an uploaded workbook into ordered ``ImportRow`` records.

    Raises
    ------
    ParseError: the buffer is not a readable workbook.
    EmptyDatasetError: the sheet has no data rows after the header.
    MissingColumnsError: a mandatory header is absent (``missing`` lists them in order).
    """
    return parse_frame(read_first_sheet(content), required_columns=required_columns)


def parse_frame(df: pd.DataFrame, *, required_columns: Iterable[str] = REQUIRED_IMPORT_COLUMNS) -> ParsedSheet:
    """Turn a header-applied sheet into ImportRows (row 0 of ``df`` is sheet row 2)."""
    columns = [str(c).strip() for c in df.columns]

    rows: list[ImportRow] = []
    for position, raw in enumerate(df.itertuples(index=False, name=None)):
        values = {col: _clean_cell(val) for col, val in zip(columns, raw)}
        if all(v is None for v in values.values()):
            continue
        rows.append(ImportRow(row_number=position + SHEET_ROW_OFFSET, values=values))

    if not rows:
        raise EmptyDatasetError("El archivo no contiene filas de datos")

    present = set(columns)
    missing = [name for name in required_columns if name not in present]
    if missing:
        raise MissingColumnsError(missing)

    return ParsedSheet(columns=columns, rows=rows)

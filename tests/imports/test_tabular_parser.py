from __future__ import annotations

import io

import pandas as pd
import pytest

from src.admission_system.admission_system.core.exceptions import (
    EmptyDatasetError,
    MissingColumnsError,
    ParseError,
)
from src.admission_system.admission_system.imports.tabular_parser import parse_frame, parse_workbook

HEADER = ["Nombre", "Apellidos", "Matricula", "Correo", "Telefono", "Preparatoria", "Aceptado"]


def _xlsx(rows, columns=HEADER) -> bytes:
    buf = io.BytesIO()
    pd.DataFrame(rows, columns=columns).to_excel(buf, index=False, engine="openpyxl")
    return buf.getvalue()


def test_rows_keep_file_order_and_sheet_row_numbers():
    content = _xlsx(
        [
            ["Ana", "López", "A001", "ana@example.com", 5551234567, "CBTis 1", "SI"],
            ["Luis", "Pérez", "A002", "luis@example.com", None, "Conalep", True],
        ]
    )

    sheet = parse_workbook(content)

    assert [r.row_number for r in sheet.rows] == [2, 3]
    assert sheet.rows[0].get("Nombre") == "Ana"
    assert sheet.rows[1].get("Correo") == "luis@example.com"
    assert sheet.header_row_number == 1


def test_integral_numbers_are_not_turned_into_floats():
    content = _xlsx(
        [
            ["Ana", "López", 1001, "ana@example.com", 5551234567, None, None],
            ["Luis", "Pérez", 1002, "luis@example.com", None, None, None],
        ]
    )

    sheet = parse_workbook(content)

    assert sheet.rows[0].get("Telefono") == 5551234567
    assert isinstance(sheet.rows[0].get("Telefono"), int)
    assert sheet.rows[1].get("Telefono") is None
    assert sheet.rows[0].get("Matricula") == 1001


def test_header_names_are_stripped():
    columns = [" Nombre ", "Apellidos", "Correo "]
    sheet = parse_workbook(_xlsx([["Ana", "López", "ana@example.com"]], columns=columns))

    assert list(sheet.columns) == ["Nombre", "Apellidos", "Correo"]
    assert sheet.rows[0].get("Correo") == "ana@example.com"


def test_missing_email_column_is_reported_by_name():
    content = _xlsx([["Ana", "López"]], columns=["Nombre", "Apellidos"])

    with pytest.raises(MissingColumnsError) as exc:
        parse_workbook(content)

    assert exc.value.missing == ["Correo"]


def test_missing_columns_are_listed_in_fixed_order():
    content = _xlsx([["x"]], columns=["Municipio"])

    with pytest.raises(MissingColumnsError) as exc:
        parse_workbook(content)

    assert exc.value.missing == ["Nombre", "Apellidos", "Correo"]


def test_header_only_sheet_is_empty_dataset():
    with pytest.raises(EmptyDatasetError):
        parse_workbook(_xlsx([]))


def test_garbage_bytes_raise_parse_error():
    with pytest.raises(ParseError):
        parse_workbook(b"this is not a spreadsheet")


def test_empty_buffer_raises_parse_error():
    with pytest.raises(ParseError):
        parse_workbook(b"")


def test_blank_rows_are_skipped_without_renumbering():
    df = pd.DataFrame(
        [
            ["Ana", "López", "ana@example.com"],
            [None, float("nan"), "   "],
            ["Luis", "Pérez", "luis@example.com"],
        ],
        columns=["Nombre", "Apellidos", "Correo"],
        dtype=object,
    )

    sheet = parse_frame(df)

    assert [r.row_number for r in sheet.rows] == [2, 4]


def test_only_blank_rows_is_empty_dataset():
    df = pd.DataFrame([[None, None, None]], columns=["Nombre", "Apellidos", "Correo"], dtype=object)

    with pytest.raises(EmptyDatasetError):
        parse_frame(df)


def test_blank_string_cells_become_none():
    df = pd.DataFrame([["Ana", "  ", "ana@example.com"]], columns=["Nombre", "Apellidos", "Correo"], dtype=object)

    row = parse_frame(df).rows[0]

    assert row.get("Apellidos") is None
    assert row.get("Nombre") == "Ana"

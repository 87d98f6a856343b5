"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_IMPORT_ERROR_DETAILS = 10
DEFAULT_MAX_UPLOAD_MB = 5
RECENT_CLASS_SUMMARY_LIMIT = 10

# Offset from 0-based data-row index to the 1-based sheet row (header is row 1).
SHEET_ROW_OFFSET = 2

EXCEL_MIME_TYPES = frozenset(
    {
        "application/vnd.ms-excel",  # .xls
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",  # .xlsx
    }
)
UPLOAD_FIELD_NAME = "archivoExcel"

# Student spreadsheet headers.
COL_NAME = "Nombre"
COL_SURNAME = "Apellidos"
COL_ENROLLMENT = "Matricula"
COL_EMAIL = "Correo"
COL_PHONE = "Telefono"
COL_SCHOOL = "Preparatoria"
COL_MAJOR = "CarreraInteres"
COL_MUNICIPALITY = "Municipio"
COL_ACCEPTED = "Aceptado"
COL_NOTES = "Notas"

REQUIRED_IMPORT_COLUMNS = (COL_NAME, COL_SURNAME, COL_EMAIL)

# Fixed on purpose: locale variants ("Sí.", "yes", "1") are not guessed.
AFFIRMATIVE_TOKENS = frozenset({"SI", "SÍ"})

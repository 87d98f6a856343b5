"""Import students from a local .xls/.xlsx file into the configured database.

Usage: python scripts/import_students.py alumnos.xlsx
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.admission_system.admission_system.container import build_container
from src.admission_system.admission_system.core.exceptions import ImportFileError, StoreError
from src.admission_system.admission_system.core.logging_setup import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bulk-import students from a spreadsheet")
    parser.add_argument("file", type=Path, help="path to the .xls/.xlsx file")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=dict(settings.DB_CONFIG))

    try:
        report = container.student_import_service.import_workbook(args.file.read_bytes())
    except ImportFileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except StoreError as e:
        print(f"ERROR: database failure: {e}", file=sys.stderr)
        return 1

    print(f"inserted={report.inserted_count} failed={report.failed_count}")
    for line in report.error_details:
        print(f"  {line}")
    return 0 if report.failed_count == 0 else 3


if __name__ == "__main__":
    raise SystemExit(main())

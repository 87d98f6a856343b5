from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceBatchService
from .database.connection import DBConfig, DatabaseConnection
from .database.executor import QueryExecutor
from .database.mysql_executor import MySQLQueryExecutor
from .imports.service import StudentImportService
from .schools.mysql_school_repository import MySQLSchoolRepository
from .schools.repository import SchoolRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository


@dataclass(frozen=True)
class Container:
    executor: QueryExecutor

    students_repo: StudentRepository
    schools_repo: SchoolRepository
    attendance_repo: AttendanceRepository

    student_import_service: StudentImportService
    attendance_service: AttendanceBatchService

    conn: Optional[DatabaseConnection] = None


def build_services(executor: QueryExecutor, *, conn: Optional[DatabaseConnection] = None) -> Container:
    """Wire repositories and services on top of any QueryExecutor."""
    students_repo = MySQLStudentRepository(executor)
    schools_repo = MySQLSchoolRepository(executor)
    attendance_repo = MySQLAttendanceRepository(executor)

    return Container(
        executor=executor,
        students_repo=students_repo,
        schools_repo=schools_repo,
        attendance_repo=attendance_repo,
        student_import_service=StudentImportService(students_repo, schools_repo),
        attendance_service=AttendanceBatchService(attendance_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(MySQLQueryExecutor(conn), conn=conn)

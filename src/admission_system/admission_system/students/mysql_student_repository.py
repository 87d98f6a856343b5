from __future__ import annotations

from ..core.exceptions import InternalStoreError
from ..database.executor import QueryExecutor
from .model import NewStudent
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, executor: QueryExecutor):
        self._executor = executor

    def create_student(self, student: NewStudent) -> int:
        result = self._executor.execute(
            """
            INSERT INTO Estudiante(
                Nombre, Apellidos, Matricula, Correo, Telefono,
                PrepID, CarreraInteres, Municipio, Aceptado, Notas
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                student.name,
                student.surname,
                student.enrollment_code,
                student.email,
                student.phone,
                student.school_id,
                student.intended_major,
                student.municipality,
                1 if student.accepted else 0,
                student.notes,
            ),
        )
        if not result.lastrowid:
            raise InternalStoreError("El registro del estudiante no devolvió un identificador")
        return result.lastrowid

"""
Students controller.

Each operation runs against a StudentContext and returns a response object
FastAPI can send as-is; failures are raised as the API errors in errors.py.
"""

import logging
from typing import Callable, List

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from database import DuplicateStudentError, StudentContext
from errors import BadRequest, Conflict, NotFound
from models.student import Student
from models.tables import StudentRecord

logger = logging.getLogger(__name__)


def default_location(student_id: int) -> str:
    return f"/api/students/{student_id}"


class CreatedAtResult(JSONResponse):
    """201 response carrying the stored student and where to fetch it."""

    def __init__(self, value: Student, location: str):
        self.value = value
        self.location = location
        super().__init__(
            status_code=status.HTTP_201_CREATED,
            content=jsonable_encoder(value),
            headers={"Location": location},
        )


class NoContentResult(Response):
    def __init__(self):
        super().__init__(status_code=status.HTTP_204_NO_CONTENT)


class StudentsController:

    def __init__(self, context: StudentContext, location_for: Callable[[int], str] = default_location):
        self.context = context
        self.location_for = location_for

    def get_students(self) -> List[Student]:
        return [Student.model_validate(record) for record in self.context.all()]

    def get_student(self, student_id: int) -> Student:
        record = self.context.find(student_id)
        if record is None:
            raise NotFound(f"Student {student_id} not found")
        return Student.model_validate(record)

    def post_student(self, student: Student) -> CreatedAtResult:
        # uniqueness is left to the database
        self.context.add(StudentRecord(**student.model_dump()))
        try:
            self.context.save()
        except DuplicateStudentError:
            raise Conflict(f"Student {student.id} already exists")

        logger.info("Created student %s", student.id)
        return CreatedAtResult(student, self.location_for(student.id))

    def put_student(self, student_id: int, student: Student) -> NoContentResult:
        if student_id != student.id:
            raise BadRequest(f"Route id {student_id} does not match body id {student.id}")

        record = self.context.find(student_id)
        if record is None:
            raise NotFound(f"Student {student_id} not found")

        record.first_name = student.first_name
        record.last_name = student.last_name
        record.age = student.age
        self.context.save()

        logger.info("Updated student %s", student_id)
        return NoContentResult()

    def delete_student(self, student_id: int) -> NoContentResult:
        record = self.context.find(student_id)
        if record is None:
            raise NotFound(f"Student {student_id} not found")

        self.context.remove(record)
        self.context.save()

        logger.info("Deleted student %s", student_id)
        return NoContentResult()

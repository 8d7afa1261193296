from typing import List
from fastapi import APIRouter, Depends, Request, status

from models.student import Student
from database import StudentContext, get_db
from auth.security import get_api_key
from controllers.students import StudentsController

router = APIRouter()


def get_controller(request: Request, db: StudentContext = Depends(get_db)) -> StudentsController:
    def location_for(student_id: int) -> str:
        return request.url_for("get_student", student_id=student_id).path

    return StudentsController(db, location_for)


@router.get("/", response_model=List[Student])
def get_students(controller: StudentsController = Depends(get_controller)):
    return controller.get_students()


@router.get("/{student_id}", response_model=Student)
def get_student(student_id: int, controller: StudentsController = Depends(get_controller)):
    return controller.get_student(student_id)


@router.post("/", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
        student: Student,
        controller: StudentsController = Depends(get_controller),
        _: str = Depends(get_api_key)
):
    return controller.post_student(student)


@router.put("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_student(
        student_id: int,
        student: Student,
        controller: StudentsController = Depends(get_controller),
        _: str = Depends(get_api_key)
):
    return controller.put_student(student_id, student)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
        student_id: int,
        controller: StudentsController = Depends(get_controller),
        _: str = Depends(get_api_key)
):
    return controller.delete_student(student_id)

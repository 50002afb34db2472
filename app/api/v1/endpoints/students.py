from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.deps import get_student_service
from app.core.exceptions import StudentNotFoundException
from app.services.student.student import StudentService
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """
    Create a new student

    Required:
    - **name**: Student name
    - **email**: Email address (format checked, not unique)

    Optional:
    - **course**: Course name
    - **age**: Age in years
    """
    return service.add(student)


@router.get("", response_model=List[Student])
def get_students(service: StudentService = Depends(get_student_service)):
    """
    List every student, oldest first
    """
    return service.list()


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    """
    Get a single student by ID
    """
    student = service.get_by_id(student_id)
    if student is None:
        raise StudentNotFoundException(student_id)
    return student


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: int,
    student: StudentUpdate,
    service: StudentService = Depends(get_student_service)
):
    """
    Replace all fields of an existing student
    """
    updated_student = service.update(student_id, student)
    if updated_student is None:
        raise StudentNotFoundException(student_id)
    return updated_student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    """
    Delete a student
    """
    if service.delete(student_id) is None:
        raise StudentNotFoundException(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

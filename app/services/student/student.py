import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.student import MAX_INT_COLUMN, Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


class StudentService:
    """
    Business operations on students.

    Lookups that miss return None instead of raising; the API layer
    decides how to report a missing student.
    """

    def __init__(self, db: Session):
        self.db = db

    def add(self, data: StudentCreate) -> Student:
        """Create a new student; the id is assigned by the database."""
        student = Student(
            name=data.name,
            email=data.email,
            course=data.course,
            age=data.age
        )
        self.db.add(student)
        self._commit()
        self.db.refresh(student)
        logger.info(f"Created student id={student.id}")
        return student

    def list(self) -> List[Student]:
        """All students in insertion order."""
        return self.db.query(Student).order_by(Student.id).all()

    def get_by_id(self, student_id: int) -> Optional[Student]:
        # Ids outside the column range can never have been assigned
        if not 1 <= student_id <= MAX_INT_COLUMN:
            student = None
        else:
            student = self.db.get(Student, student_id)
        if student is None:
            logger.warning(f"Student id={student_id} not found")
        return student

    def update(self, student_id: int, data: StudentUpdate) -> Optional[Student]:
        """
        Overwrite every mutable field of an existing student.

        Fields missing from the payload are written as None; there is no
        partial update.
        """
        student = self.get_by_id(student_id)
        if student is None:
            return None

        student.name = data.name
        student.email = data.email
        student.course = data.course
        student.age = data.age
        self._commit()
        self.db.refresh(student)
        logger.info(f"Updated student id={student_id}")
        return student

    def delete(self, student_id: int) -> Optional[Student]:
        """Remove a student. Returns the removed record, or None if absent."""
        student = self.get_by_id(student_id)
        if student is None:
            return None

        self.db.delete(student)
        self._commit()
        logger.info(f"Deleted student id={student_id}")
        return student

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error, transaction rolled back: {e}")
            raise

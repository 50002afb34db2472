from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.student.student import StudentService


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    """
    Dependency providing a StudentService bound to the request's session.
    The session itself is opened and closed by get_db.
    """
    return StudentService(db)

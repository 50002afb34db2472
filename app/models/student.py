from sqlalchemy import Column, Integer, String
from app.core.database import Base

# Largest value an Integer column holds on PostgreSQL (int4)
MAX_INT_COLUMN = 2**31 - 1


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), index=True, nullable=False)
    course = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<Student id={self.id} email={self.email!r}>"

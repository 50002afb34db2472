from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email

from app.models.student import MAX_INT_COLUMN


class StudentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255)
    course: Optional[str] = Field(default=None, max_length=255)
    age: Optional[int] = Field(default=None, ge=0, le=MAX_INT_COLUMN)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        """Reject malformed addresses but store the value exactly as sent."""
        validate_email(v)
        return v


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    pass


class StudentInDB(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass

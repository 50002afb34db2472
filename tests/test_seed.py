"""
Tests for the development seed script.
"""

import pytest
from sqlalchemy.orm import sessionmaker

import seed
from app.models.student import Student


@pytest.fixture
def seed_session(db_session, monkeypatch):
    """Point the seed script at the test database"""
    monkeypatch.setattr(seed, "SessionLocal", sessionmaker(bind=db_session.get_bind()))
    return db_session


def test_seed_populates_empty_database(seed_session):
    seed.seed_data()

    students = seed_session.query(Student).order_by(Student.id).all()
    assert len(students) == 3
    assert all(s.email.endswith("@example.com") for s in students)


def test_seed_skips_when_data_exists(seed_session):
    seed_session.add(Student(name="Existing", email="existing@x.com"))
    seed_session.commit()

    seed.seed_data()

    assert seed_session.query(Student).count() == 1

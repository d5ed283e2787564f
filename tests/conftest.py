import os

# ✅ 앱 import 전에 테스트용 설정 주입 (MySQL 대신 메모리 SQLite)
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")
os.environ.setdefault("ENV", "dev")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, enable_sqlite_foreign_keys, get_db
from main import app
from models.marks import Mark
from models.subjects import Subject


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    enable_sqlite_foreign_keys(engine)

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def student_payload():
    return {
        "first_name": "Rahul",
        "last_name": "Sharma",
        "email": "rahul.sharma@university.edu",
        "phone": "9876543210",
        "date_of_birth": "2002-05-14",
        "address": "12 MG Road",
        "city": "Mumbai",
        "state": "Maharashtra",
        "postal_code": "400001",
    }


@pytest.fixture
def make_payload(student_payload):
    def _make(i: int, **overrides):
        payload = dict(student_payload, email=f"student{i}@university.edu")
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def subjects(db_session):
    rows = [
        Subject(subject_id=1, subject_code="MATH101", subject_name="Mathematics", max_marks=50, passing_marks=40),
        Subject(subject_id=2, subject_code="PHY101", subject_name="Physics", max_marks=100, passing_marks=40),
        Subject(subject_id=3, subject_code="CHEM101", subject_name="Chemistry", max_marks=80, passing_marks=32),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def add_marks(db_session, subjects):
    def _add(student_id: int):
        marks = [
            Mark(student_id=student_id, subject_id=1, marks_obtained=45, exam_date=date(2024, 3, 10),
                 exam_type="Final", grade="A"),
            Mark(student_id=student_id, subject_id=2, marks_obtained=30, exam_date=date(2024, 5, 20),
                 exam_type="Final", grade="D", remarks="Needs improvement"),
            Mark(student_id=student_id, subject_id=3, marks_obtained=62, exam_date=date(2023, 11, 2),
                 exam_type="Midterm", grade="B+"),
        ]
        db_session.add_all(marks)
        db_session.commit()
        return marks
    return _add

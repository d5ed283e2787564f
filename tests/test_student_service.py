"""
학생 쿼리 계층(services/student_service.py) 테스트
"""

from datetime import date, datetime

import pytest
from sqlalchemy.exc import IntegrityError

from models.marks import Mark
from models.students import Student as StudentModel
from models.subjects import Subject
from schemas.students import StudentCreate, StudentUpdate
from services import student_service
from utils.db_errors import UNIQUE_VIOLATION, classify


class TestCreateStudent:
    def test_defaults_applied_for_absent_country_and_status(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))

        assert created.student_id >= 1
        assert created.first_name == "Rahul"
        assert created.email == "rahul.sharma@university.edu"
        assert created.date_of_birth == date(2002, 5, 14)
        assert created.country == "India"
        assert created.status == "active"
        assert created.created_at is not None
        assert created.updated_at is not None
        assert created.enrollment_date is not None

    def test_absent_optional_fields_are_null(self, db_session):
        created = student_service.create_student(db_session, StudentCreate(
            first_name="Asha", last_name="Verma",
            email="asha@university.edu", date_of_birth="2001-01-01",
        ))

        assert created.phone is None
        assert created.address is None
        assert created.city is None
        assert created.postal_code is None

    def test_explicit_country_and_status_kept(self, db_session, student_payload):
        payload = dict(student_payload, country="Nepal", status="graduated")
        created = student_service.create_student(db_session, StudentCreate(**payload))

        assert created.country == "Nepal"
        assert created.status == "graduated"

    def test_duplicate_email_rejected(self, db_session, student_payload):
        student_service.create_student(db_session, StudentCreate(**student_payload))

        with pytest.raises(IntegrityError) as excinfo:
            student_service.create_student(db_session, StudentCreate(**student_payload))

        assert classify(excinfo.value) == UNIQUE_VIOLATION
        assert db_session.query(StudentModel).filter_by(email=student_payload["email"]).count() == 1


class TestListStudents:
    def test_newest_first_with_limit_and_offset(self, db_session, make_payload):
        for i in range(15):
            student_service.create_student(db_session, StudentCreate(**make_payload(i)))

        first_page = student_service.list_students(db_session, limit=10, offset=0)
        second_page = student_service.list_students(db_session, limit=10, offset=10)

        ids = [s.student_id for s in first_page]
        assert len(first_page) == 10
        assert ids == sorted(ids, reverse=True)
        assert len(second_page) == 5
        assert max(s.student_id for s in second_page) < min(ids)
        assert student_service.count_students(db_session) == 15

    def test_empty_store(self, db_session):
        assert student_service.list_students(db_session, limit=10, offset=0) == []
        assert student_service.count_students(db_session) == 0


class TestStudentWithMarks:
    def test_marks_ordered_by_exam_date_desc_with_derived_fields(self, db_session, student_payload, add_marks):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))
        add_marks(created.student_id)

        detail = student_service.get_student_with_marks(db_session, created.student_id)

        assert detail.email == created.email
        assert [m.exam_date for m in detail.marks] == [
            date(2024, 5, 20), date(2024, 3, 10), date(2023, 11, 2),
        ]

        physics, maths, chemistry = detail.marks
        assert maths.subject_code == "MATH101"
        assert maths.percentage == 90.0
        assert maths.result == "Pass"
        assert physics.percentage == 30.0
        assert physics.result == "Fail"
        assert physics.remarks == "Needs improvement"
        assert chemistry.percentage == 77.5
        assert chemistry.result == "Pass"
        assert chemistry.max_marks == 80
        assert chemistry.passing_marks == 32

    def test_student_without_marks(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))

        detail = student_service.get_student_with_marks(db_session, created.student_id)

        assert detail.marks == []

    def test_fractional_percentages_round_half_up(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))
        db_session.add_all([
            Subject(subject_id=10, subject_code="BIO101", subject_name="Biology", max_marks=40, passing_marks=16),
            Subject(subject_id=11, subject_code="HIS101", subject_name="History", max_marks=32, passing_marks=12),
            Mark(student_id=created.student_id, subject_id=10, marks_obtained=33.33, exam_date=date(2024, 6, 1)),
            Mark(student_id=created.student_id, subject_id=11, marks_obtained=1, exam_date=date(2024, 5, 1)),
        ])
        db_session.commit()

        detail = student_service.get_student_with_marks(db_session, created.student_id)

        assert [m.percentage for m in detail.marks] == [83.33, 3.13]
        assert [m.result for m in detail.marks] == ["Pass", "Fail"]

    @pytest.mark.parametrize("obtained,max_marks,expected", [
        (45, 50, 90.0),
        (33.33, 40, 83.33),
        (1, 32, 3.13),
        (62.5, 80, 78.13),
        (0, 100, 0.0),
    ])
    def test_mark_percentage(self, obtained, max_marks, expected):
        assert student_service.mark_percentage(obtained, max_marks) == expected

    def test_missing_student_returns_none(self, db_session):
        assert student_service.get_student_with_marks(db_session, 999) is None
        assert student_service.get_student(db_session, 999) is None


class TestUpdateStudent:
    def test_only_given_fields_change(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))

        updated = student_service.update_student(db_session, created.student_id, StudentUpdate(city="Pune"))

        assert updated.city == "Pune"
        assert updated.updated_at is not None
        unchanged = created.model_dump(exclude={"city", "updated_at"})
        assert updated.model_dump(exclude={"city", "updated_at"}) == unchanged

    def test_null_fields_keep_prior_value(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))

        updated = student_service.update_student(
            db_session, created.student_id, StudentUpdate(phone=None, status="suspended")
        )

        assert updated.phone == created.phone
        assert updated.status == "suspended"

    def test_updated_at_refreshed(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))
        old = datetime(2000, 1, 1)
        db_session.query(StudentModel).filter_by(student_id=created.student_id).update({"updated_at": old})
        db_session.commit()

        updated = student_service.update_student(db_session, created.student_id, StudentUpdate(city="Pune"))

        assert updated.updated_at > old
        assert updated.created_at == created.created_at

    def test_updated_at_refreshed_on_empty_patch(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))
        old = datetime(2000, 1, 1)
        db_session.query(StudentModel).filter_by(student_id=created.student_id).update({"updated_at": old})
        db_session.commit()

        updated = student_service.update_student(db_session, created.student_id, StudentUpdate())

        assert updated.updated_at > old
        assert updated.city == created.city

    def test_missing_student_returns_none(self, db_session):
        assert student_service.update_student(db_session, 999, StudentUpdate(city="Pune")) is None


class TestDeleteStudent:
    def test_returns_prior_contents_and_removes_row(self, db_session, student_payload):
        created = student_service.create_student(db_session, StudentCreate(**student_payload))

        deleted = student_service.delete_student(db_session, created.student_id)

        assert deleted == created
        assert student_service.get_student_with_marks(db_session, created.student_id) is None

    def test_marks_removed_with_student(self, db_session, student_payload, add_marks):
        from models.marks import Mark

        created = student_service.create_student(db_session, StudentCreate(**student_payload))
        add_marks(created.student_id)

        student_service.delete_student(db_session, created.student_id)

        assert db_session.query(Mark).filter_by(student_id=created.student_id).count() == 0

    def test_missing_student_returns_none(self, db_session):
        assert student_service.delete_student(db_session, 999) is None

"""
services/student_service.py

학생 레코드 조회/저장 로직 (라우터와 DB 사이의 쿼리 계층)
- 모든 함수는 열린 Session을 첫 인자로 받는다
- 대상 학생이 없으면 예외 대신 None을 반환한다
- 제약 조건 위반(IntegrityError 등)은 롤백 후 그대로 올려 보내고, 전역 에러 핸들러가 상태 코드로 변환한다
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import settings
from models.marks import Mark as MarkModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from schemas.marks import MarkOut
from schemas.students import StudentCreate, StudentDetail, StudentOut, StudentUpdate

logger = logging.getLogger(__name__)


def mark_percentage(marks_obtained: float, max_marks: int) -> float:
    # 0.5는 올림 (DB의 ROUND(numeric, 2)와 동일)
    ratio = Decimal(str(marks_obtained)) / Decimal(max_marks) * 100
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def mark_result(marks_obtained: float, passing_marks: int) -> str:
    return "Pass" if marks_obtained >= passing_marks else "Fail"


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


# ✅ [CREATE] 학생 추가 (country/status는 값이 없으면 기본값)
def create_student(db: Session, data: StudentCreate) -> StudentOut:
    values = data.model_dump()
    values["country"] = values.get("country") or settings.DEFAULT_COUNTRY
    values["status"] = values.get("status") or "active"

    db_student = StudentModel(**values)
    db.add(db_student)
    _commit(db)
    db.refresh(db_student)
    logger.info(f"학생 생성: student_id={db_student.student_id}")
    return StudentOut.model_validate(db_student)


# ✅ [READ] 학생 목록 (최근 등록 순)
def list_students(db: Session, limit: int, offset: int) -> List[StudentOut]:
    records = (
        db.query(StudentModel)
        .order_by(StudentModel.student_id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )
    return [StudentOut.model_validate(r) for r in records]


# ✅ [COUNT] 전체 학생 수 (페이지 메타 계산용)
def count_students(db: Session) -> int:
    return db.query(func.count(StudentModel.student_id)).scalar() or 0


# ✅ [READ] 학생 단건 (존재 여부 확인용)
def get_student(db: Session, student_id: int) -> Optional[StudentOut]:
    student = db.get(StudentModel, student_id)
    if student is None:
        return None
    return StudentOut.model_validate(student)


# ✅ [READ] 학생 상세 + 과목별 시험 성적 (최근 시험일 순, 득점률/합격 여부 포함)
def get_student_with_marks(db: Session, student_id: int) -> Optional[StudentDetail]:
    student = db.get(StudentModel, student_id)
    if student is None:
        return None

    rows = (
        db.query(MarkModel, SubjectModel)
        .join(SubjectModel, MarkModel.subject_id == SubjectModel.subject_id)
        .filter(MarkModel.student_id == student_id)
        .order_by(MarkModel.exam_date.desc(), MarkModel.mark_id.desc())
        .all()
    )

    marks = [
        MarkOut(
            mark_id=m.mark_id,
            marks_obtained=m.marks_obtained,
            exam_date=m.exam_date,
            exam_type=m.exam_type,
            grade=m.grade,
            remarks=m.remarks,
            subject_id=s.subject_id,
            subject_code=s.subject_code,
            subject_name=s.subject_name,
            max_marks=s.max_marks,
            passing_marks=s.passing_marks,
            percentage=mark_percentage(m.marks_obtained, s.max_marks),
            result=mark_result(m.marks_obtained, s.passing_marks),
        )
        for m, s in rows
    ]

    detail = StudentOut.model_validate(student).model_dump()
    return StudentDetail(**detail, marks=marks)


# ✅ [UPDATE] 부분 수정: 값이 있는 필드만 덮어쓰고 updated_at은 항상 갱신
def update_student(db: Session, student_id: int, patch: StudentUpdate) -> Optional[StudentOut]:
    student = db.get(StudentModel, student_id)
    if student is None:
        return None

    for key, value in patch.model_dump(exclude_none=True).items():
        setattr(student, key, value)
    student.updated_at = func.now()

    _commit(db)
    db.refresh(student)
    logger.info(f"학생 수정: student_id={student_id}")
    return StudentOut.model_validate(student)


# ✅ [DELETE] 하드 삭제, 삭제 직전 내용을 반환
def delete_student(db: Session, student_id: int) -> Optional[StudentOut]:
    student = db.get(StudentModel, student_id)
    if student is None:
        return None

    snapshot = StudentOut.model_validate(student)
    db.delete(student)
    _commit(db)
    logger.info(f"학생 삭제: student_id={student_id}")
    return snapshot

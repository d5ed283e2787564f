from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from schemas.common import envelope, make_pagination
from schemas.students import StudentCreate, StudentUpdate
from services import student_service

router = APIRouter(prefix="/students", tags=["Students"])

StudentId = Annotated[int, Path(ge=1, description="Student ID (positive integer)")]


def _not_found(student_id: int) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=envelope(False, f"Student with ID {student_id} not found"),
    )


# ✅ [CREATE] 학생 추가
@router.post("", status_code=status.HTTP_201_CREATED)
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    created = student_service.create_student(db, student)
    return envelope(True, "Student created successfully", data=created)


# ✅ [READ] 학생 목록 (페이지네이션)
@router.get("")
def read_students(
    page: int = Query(1, description="1부터 시작하는 페이지 번호"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, description="페이지당 항목 수 (1~100)"),
    db: Session = Depends(get_db),
):
    # 범위 검사는 DB 조회 전에
    if page < 1 or limit < 1 or limit > settings.MAX_PAGE_SIZE:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=envelope(
                False,
                "Invalid pagination parameters. Page must be >= 1, "
                f"limit must be between 1 and {settings.MAX_PAGE_SIZE}",
            ),
        )

    offset = (page - 1) * limit
    students = student_service.list_students(db, limit, offset)
    total = student_service.count_students(db)
    return envelope(
        True,
        "Students retrieved successfully",
        data=students,
        pagination=make_pagination(total, page, limit),
    )


# ✅ [READ] 학생 상세 (시험 성적 포함)
@router.get("/{student_id}")
def read_student(student_id: StudentId, db: Session = Depends(get_db)):
    student = student_service.get_student_with_marks(db, student_id)
    if student is None:
        return _not_found(student_id)
    return envelope(True, "Student retrieved successfully", data=student)


# ✅ [UPDATE] 학생 정보 부분 수정
@router.put("/{student_id}")
def update_student(student_id: StudentId, updated: StudentUpdate, db: Session = Depends(get_db)):
    if student_service.get_student(db, student_id) is None:
        return _not_found(student_id)

    student = student_service.update_student(db, student_id, updated)
    if student is None:
        return _not_found(student_id)
    return envelope(True, "Student updated successfully", data=student)


# ✅ [DELETE] 학생 삭제
@router.delete("/{student_id}")
def delete_student(student_id: StudentId, db: Session = Depends(get_db)):
    deleted = student_service.delete_student(db, student_id)
    if deleted is None:
        return _not_found(student_id)
    return envelope(True, "Student deleted successfully", data=deleted)

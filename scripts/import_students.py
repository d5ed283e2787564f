import csv
from typing import Optional
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.marks import Mark  # noqa: F401  (Student.marks 관계 매핑용)
from schemas.students import StudentCreate
from services import student_service

CSV_PATH = "data/students.csv"  # ✅ 파일 경로


# ==========================================================
# [함수] 학생 CSV → DB 마이그레이션
# - API와 같은 검증 규칙(StudentCreate)을 거친다
# - 형식 오류 / 중복 이메일 행은 건너뛴다
# ==========================================================
def migrate_students(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> int:
    own_session = db is None
    if own_session:
        db = SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for line_no, row in enumerate(reader, start=2):
                try:
                    data = StudentCreate(**row)
                except ValidationError as e:
                    print(f"⚠️ 잘못된 행 → 건너뜀 (line {line_no}): {e.error_count()}개 오류")
                    continue

                try:
                    student_service.create_student(db, data)
                except IntegrityError:
                    print(f"⚠️ 중복 이메일 {data.email} → 건너뜀 (line {line_no})")
                    continue
                count += 1
    finally:
        if own_session:
            db.close()

    print(f"✅ 학생 정보 CSV → DB 마이그레이션 완료 ({count}건)")
    return count


if __name__ == "__main__":
    migrate_students()

import csv
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.marks import Mark as MarkModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel

# ==========================================================
# [설정] CSV 파일 경로
# ==========================================================
CSV_PATH = "data/marks.csv"


# ==========================================================
# [함수] 시험 성적 CSV → DB 마이그레이션
# ==========================================================
def migrate_marks(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> int:
    own_session = db is None
    if own_session:
        db = SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                student_id = int(row["student_id"])
                subject_id = int(row["subject_id"])

                # ✅ FK 검증: 학생/과목 존재 여부 확인
                if db.get(StudentModel, student_id) is None:
                    print(f"⚠️ 학생 ID {student_id} 없음 → 건너뜀")
                    continue
                if db.get(SubjectModel, subject_id) is None:
                    print(f"⚠️ 과목 ID {subject_id} 없음 → 건너뜀")
                    continue

                # ✅ exam_date: YYYY-MM-DD 형식 변환
                try:
                    exam_date = datetime.strptime(row["exam_date"].strip(), "%Y-%m-%d").date()
                except ValueError:
                    print(f"⚠️ 잘못된 날짜 형식 → {row['exam_date']}")
                    continue

                mark = MarkModel(
                    student_id=student_id,                        # 학생 ID (FK)
                    subject_id=subject_id,                        # 과목 ID (FK)
                    marks_obtained=float(row["marks_obtained"]),  # 취득 점수
                    exam_date=exam_date,                          # 시험일
                    exam_type=row.get("exam_type") or None,       # 시험 종류
                    grade=row.get("grade") or None,               # 등급
                    remarks=row.get("remarks") or None,           # 비고
                )
                db.add(mark)
                count += 1

        db.commit()
    finally:
        if own_session:
            db.close()

    print(f"✅ 시험 성적 CSV → DB 마이그레이션 완료 ({count}건)")
    return count


if __name__ == "__main__":
    migrate_marks()

import csv
from typing import Optional
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.subjects import Subject as SubjectModel  # ✅ 모델 import

CSV_PATH = "data/subjects.csv"  # ✅ 파일 경로


def migrate_subjects(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> int:
    own_session = db is None
    if own_session:
        db = SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                subject = SubjectModel(
                    subject_id=int(row["subject_id"]),            # 과목 고유 ID
                    subject_code=row["subject_code"].strip(),     # 과목 코드
                    subject_name=row["subject_name"].strip(),     # 과목 이름
                    max_marks=int(row["max_marks"]),              # 만점
                    passing_marks=int(row["passing_marks"]),      # 합격 기준 점수
                )
                db.add(subject)
                count += 1

        db.commit()
    finally:
        if own_session:
            db.close()

    print(f"✅ 과목 CSV → DB 마이그레이션 완료 ({count}건)")
    return count


if __name__ == "__main__":
    migrate_subjects()

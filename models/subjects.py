from sqlalchemy import Column, Integer, String
from database.db import Base


class Subject(Base):
    __tablename__ = "subjects"  # 과목 정보 테이블 (조회 전용 참조 데이터)

    subject_id = Column(Integer, primary_key=True, index=True)      # 과목 고유 ID (Primary Key)
    subject_code = Column(String(20), nullable=False, unique=True)  # 과목 코드 (예: MATH101)
    subject_name = Column(String(100), nullable=False)              # 과목 이름
    max_marks = Column(Integer, nullable=False, default=100)        # 만점
    passing_marks = Column(Integer, nullable=False, default=40)     # 합격 기준 점수

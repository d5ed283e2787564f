from datetime import date

from sqlalchemy import Column, Integer, String, Date, DateTime, Text, func
from sqlalchemy.orm import relationship
from database.db import Base

STUDENT_STATUSES = ("active", "inactive", "graduated", "suspended")


class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    student_id = Column(Integer, primary_key=True, index=True)         # 고유 학생 ID (Primary Key, 자동 부여)
    first_name = Column(String(50), nullable=False)                    # 이름
    last_name = Column(String(50), nullable=False)                     # 성
    email = Column(String(100), nullable=False, unique=True)           # 이메일 (전체 학생 중 유일)
    phone = Column(String(15))                                         # 연락처 (숫자 10~15자리)
    date_of_birth = Column(Date, nullable=False)                       # 생년월일
    enrollment_date = Column(Date, default=date.today)                 # 입학일
    address = Column(Text)                                             # 주소
    city = Column(String(50))                                          # 도시
    state = Column(String(50))                                         # 주/도
    postal_code = Column(String(10))                                   # 우편번호
    country = Column(String(50), default="India")                      # 국가
    status = Column(String(20), nullable=False, default="active")      # 상태 (active/inactive/graduated/suspended)
    created_at = Column(DateTime, server_default=func.now())           # 생성 시각
    updated_at = Column(DateTime, server_default=func.now())           # 수정 시각

    # 학생 삭제 시 성적도 함께 삭제 (DB의 ON DELETE CASCADE에 위임)
    marks = relationship("Mark", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)

from sqlalchemy import Column, Integer, String, Date, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base


class Mark(Base):
    __tablename__ = "marks"  # 시험 성적 테이블 (학생 1명 × 과목 1개)

    mark_id = Column(Integer, primary_key=True, index=True)                       # 성적 고유 ID
    student_id = Column(
        Integer, ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )                                                                             # 학생 ID
    subject_id = Column(Integer, ForeignKey("subjects.subject_id"), nullable=False)  # 과목 ID
    marks_obtained = Column(Numeric(5, 2, asdecimal=False), nullable=False)       # 취득 점수
    exam_date = Column(Date, nullable=False)                                      # 시험일
    exam_type = Column(String(50))                                                # 시험 종류 (예: Midterm, Final)
    grade = Column(String(5))                                                     # 등급 (예: A, B+)
    remarks = Column(Text)                                                        # 비고

    student = relationship("Student", back_populates="marks")
    subject = relationship("Subject")

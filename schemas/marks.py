from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel


class MarkOut(BaseModel):
    mark_id: int                             # 성적 고유 ID
    marks_obtained: float                    # 취득 점수
    exam_date: date                          # 시험일
    exam_type: Optional[str] = None          # 시험 종류
    grade: Optional[str] = None              # 등급
    remarks: Optional[str] = None            # 비고
    subject_id: int                          # 과목 ID
    subject_code: str                        # 과목 코드
    subject_name: str                        # 과목 이름
    max_marks: int                           # 만점
    passing_marks: int                       # 합격 기준 점수
    percentage: float                        # 득점률 (소수 둘째 자리 반올림)
    result: Literal["Pass", "Fail"]          # 합격 여부

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from schemas.marks import MarkOut

StudentStatus = Literal["active", "inactive", "graduated", "suspended"]

# ✅ 검증 실패 시 필드별 안내 메시지 (폼의 각 입력칸 아래에 표시)
REQUIRED_MESSAGES = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "email": "Email is required",
    "date_of_birth": "Date of birth is required",
}

FIELD_MESSAGES = {
    "student_id": "Student ID must be a positive integer",
    "first_name": "First name must be between 2 and 50 characters",
    "last_name": "Last name must be between 2 and 50 characters",
    "email": "Must be a valid email address",
    "phone": "Phone must be 10-15 digits",
    "date_of_birth": "Must be a valid date (YYYY-MM-DD)",
    "address": "Address must be less than 255 characters",
    "city": "City must be less than 50 characters",
    "state": "State must be less than 50 characters",
    "postal_code": "Postal code must be less than 10 characters",
    "country": "Country must be less than 50 characters",
    "status": "Status must be one of: active, inactive, graduated, suspended",
}


def field_message(field: str, error_type: str, default: str) -> str:
    """pydantic 기본 문구 대신 필드별 메시지 (등록되지 않은 필드는 기본 문구 유지)"""
    if error_type == "missing" and field in REQUIRED_MESSAGES:
        return REQUIRED_MESSAGES[field]
    return FIELD_MESSAGES.get(field, default)


# ✅ 입력 공통 필드 (모두 선택, 값이 있으면 형식/길이 검증)
class StudentFields(BaseModel):
    first_name: Optional[str] = Field(None, min_length=2, max_length=50)   # 이름
    last_name: Optional[str] = Field(None, min_length=2, max_length=50)    # 성
    email: Optional[EmailStr] = None                                       # 이메일
    phone: Optional[str] = Field(None, pattern=r"^[0-9]{10,15}$")          # 연락처 (숫자 10~15자리)
    date_of_birth: Optional[date] = None                                   # 생년월일 (YYYY-MM-DD)
    address: Optional[str] = Field(None, max_length=255)                   # 주소
    city: Optional[str] = Field(None, max_length=50)                       # 도시
    state: Optional[str] = Field(None, max_length=50)                      # 주/도
    postal_code: Optional[str] = Field(None, max_length=10)                # 우편번호
    country: Optional[str] = Field(None, max_length=50)                    # 국가
    status: Optional[StudentStatus] = None                                 # 상태

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # 폼에서 빈 칸은 ""로 넘어오므로 "값 없음"으로 취급
    @field_validator(
        "phone", "address", "city", "state", "postal_code", "country", "status",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v):
        return v.lower() if v is not None else v


# ✅ 생성용 (POST): 이름/이메일/생년월일 필수
class StudentCreate(StudentFields):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    date_of_birth: date


# ✅ 부분 수정용 (PUT): 넘어온 필드만 반영, null/생략은 기존 값 유지
class StudentUpdate(StudentFields):
    pass


# ✅ 전체 출력용 (GET, 상세조회 등)
class StudentOut(BaseModel):
    student_id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: date
    enrollment_date: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ✅ 상세 조회용: 학생 정보 + 시험 성적 목록 (최근 시험일 순)
class StudentDetail(StudentOut):
    marks: List[MarkOut] = []

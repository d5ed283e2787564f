"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 항목: ErrorItem ({field, message})
  2) 페이지네이션 메타: PaginationMeta, make_pagination()
  3) 응답 봉투: envelope()
"""

from __future__ import annotations

from math import ceil
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# 1) 에러 항목
# =========================================================

class ErrorItem(BaseModel):
    """필드 단위 검증 오류"""
    field: str = Field(..., description="오류가 난 입력 필드 이름 (예: email)")
    message: str = Field(..., description="사람이 읽을 수 있는 오류 메시지")


# =========================================================
# 2) 페이지네이션 메타
# =========================================================

class PaginationMeta(BaseModel):
    """
    목록 응답에 포함시키는 페이지 정보 (프론트 호환을 위해 camelCase 키 사용)
    - totalPages: ceil(totalRecords / pageSize), 데이터가 없으면 0
    """
    currentPage: int = Field(..., ge=1)
    pageSize: int = Field(..., ge=1)
    totalRecords: int = Field(..., ge=0)
    totalPages: int = Field(..., ge=0)
    hasNextPage: bool
    hasPreviousPage: bool

    model_config = ConfigDict(extra="ignore")


def make_pagination(total: int, page: int, limit: int) -> PaginationMeta:
    """전체 건수와 현재 page/limit으로 페이지 메타를 계산"""
    total_pages = ceil(total / limit)
    return PaginationMeta(
        currentPage=page,
        pageSize=limit,
        totalRecords=total,
        totalPages=total_pages,
        hasNextPage=page < total_pages,
        hasPreviousPage=page > 1,
    )


# =========================================================
# 3) 응답 봉투
# =========================================================

def envelope(success: bool, message: str, **extra: Any) -> dict:
    """
    모든 엔드포인트의 공통 응답 형식 {success, message, data?, pagination?, errors?}
    - 값이 None인 최상위 키는 생략 (data 내부의 null 필드는 그대로 유지)
    """
    body = {"success": success, "message": message}
    for key, value in extra.items():
        if value is not None:
            body[key] = jsonable_encoder(value)
    return body

"""
DB 드라이버별 오류를 공통 분류로 변환
- PostgreSQL: SQLSTATE (pgcode / sqlstate)
- MySQL(PyMySQL): errno (args[0])
- SQLite: 오류 메시지
"""

from typing import Optional

from sqlalchemy.exc import DataError, DBAPIError

UNIQUE_VIOLATION = "unique_violation"
FOREIGN_KEY_VIOLATION = "foreign_key_violation"
INVALID_INPUT = "invalid_input"

_PG_CODES = {
    "23505": UNIQUE_VIOLATION,
    "23503": FOREIGN_KEY_VIOLATION,
    "22P02": INVALID_INPUT,
}

_MYSQL_CODES = {
    1062: UNIQUE_VIOLATION,        # ER_DUP_ENTRY
    1451: FOREIGN_KEY_VIOLATION,   # ER_ROW_IS_REFERENCED_2
    1452: FOREIGN_KEY_VIOLATION,   # ER_NO_REFERENCED_ROW_2
    1292: INVALID_INPUT,           # ER_TRUNCATED_WRONG_VALUE
    1366: INVALID_INPUT,           # ER_TRUNCATED_WRONG_VALUE_FOR_FIELD
}

_SQLITE_MESSAGES = {
    "UNIQUE constraint failed": UNIQUE_VIOLATION,
    "FOREIGN KEY constraint failed": FOREIGN_KEY_VIOLATION,
    "datatype mismatch": INVALID_INPUT,
}


def classify(exc: DBAPIError) -> Optional[str]:
    """분류할 수 없는 오류는 None"""
    orig = getattr(exc, "orig", None)

    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code in _PG_CODES:
        return _PG_CODES[code]

    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and args[0] in _MYSQL_CODES:
        return _MYSQL_CODES[args[0]]

    text = str(orig) if orig is not None else str(exc)
    for needle, kind in _SQLITE_MESSAGES.items():
        if needle in text:
            return kind

    if isinstance(exc, DataError):
        return INVALID_INPUT
    return None

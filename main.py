from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


# ✅ DB / 미들웨어 임포트
from database.db import engine, get_db
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers
from schemas.common import envelope

# ✅ 라우터 임포트
from routers import students, ui

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (브라우저 UI 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 + 요청 로그 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
add_error_handlers(app)

# ✅ API 프리픽스 라우터 등록
app.include_router(students.router, prefix=settings.API_PREFIX)
app.include_router(ui.router)


# ✅ 루트 엔드포인트 (API 안내)
@app.get("/")
def root():
    return envelope(
        True,
        "Student Management API is running",
        version=settings.APP_VERSION,
        endpoints={
            "students": f"{settings.API_PREFIX}/students",
            "health": "/health",
            "ui": "/ui",
        },
    )


# ✅ 헬스체크 엔드포인트 (DB 연결 확인)
@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"DB 헬스체크 실패: {e}")
        return JSONResponse(
            status_code=500,
            content=envelope(False, "Database connection failed", error=str(e)),
        )
    return envelope(
        True,
        "Database connection is healthy",
        database=db.get_bind().dialect.name,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )


@app.on_event("startup")
def _check_database():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("✅ Database connected successfully")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")  # 연결 실패해도 서버 시작


@app.on_event("shutdown")
def _close_pool():
    engine.dispose()
    logger.info("Database pool closed")

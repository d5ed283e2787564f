from sqlalchemy import create_engine, event        # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import declarative_base        # 모델의 Base 클래스
from sqlalchemy.orm import sessionmaker            # 세션 팩토리 함수

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기


def _engine_options(url: str) -> dict:
    # SQLite(테스트/로컬)는 풀 크기 옵션을 받지 않는다
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_pre_ping": True,
    }


# ✅ SQLite는 FK 검사(ON DELETE CASCADE 포함)가 커넥션마다 꺼져 있으므로 연결 시 켠다
def enable_sqlite_foreign_keys(target_engine) -> None:
    @event.listens_for(target_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성 (요청 간 공유되는 커넥션 풀)
engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ✅ 요청마다 세션을 열고, 응답 후 반드시 닫는 FastAPI 의존성
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

from database.db import Base, engine

# ✅ 테이블 정의 등록 (import만으로 Base.metadata에 추가됨)
from models.students import Student  # noqa: F401
from models.subjects import Subject  # noqa: F401
from models.marks import Mark  # noqa: F401


def create_tables():
    Base.metadata.create_all(bind=engine)
    print("✅ students / subjects / marks 테이블 생성 완료")


if __name__ == "__main__":
    create_tables()

"""
SQLAlchemy 데이터베이스 설정

SQLAlchemy 엔진, 세션, Base 클래스를 정의합니다.
"""

import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.core.config import Settings, get_settings


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def set_sqlite_functions(dbapi_conn, connection_record):
    """
    SQLite 연결마다 lower() 를 파이썬 str.lower 로 교체합니다.

    SQLite 내장 lower() 는 ASCII 만 변환하므로, icontains 검색이
    키릴 문자나 움라우트 등에서도 대소문자를 구분하지 않도록 합니다.
    """
    if isinstance(dbapi_conn, sqlite3.Connection):
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def create_db_engine(settings: Settings) -> Engine:
    """설정의 DATABASE_URL 로 엔진을 생성합니다."""
    if settings.is_sqlite:
        # SQLite 사용 시 check_same_thread 비활성화 (FastAPI 스레드풀에서 사용)
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        settings.database_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # connection 유효성 자동 체크
        pool_recycle=3600,  # 1시간마다 connection 재생성 (stale connection 방지)
    )


engine = create_db_engine(get_settings())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    FastAPI 의존성 주입용 데이터베이스 세션 제너레이터

    요청마다 새 세션을 만들고 응답 후 닫습니다.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

"""
pytest 픽스처 정의
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.security import create_access_token
from app.db.database import Base, get_db
from app.main import app
from app.services.user_service import UserService


@pytest.fixture(scope="session")
def settings(tmp_path_factory):
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite:///:memory:",
        pagination_limit=2,
        jwt_secret_key="test-secret-key-for-testing",
        jwt_algorithm="HS256",
        jwt_expiration_minutes=30,
        media_root=str(tmp_path_factory.mktemp("media")),
        upload_prefix="/uploads",
    )


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고,
    테스트 종료 후 테이블을 삭제하여 격리를 보장합니다.
    TestClient 의 워커 스레드에서도 같은 DB를 보도록 StaticPool 을 사용합니다.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # 모든 테이블 생성
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def test_client(test_db, settings):
    """각 테스트마다 테스트 데이터베이스와 설정을 주입한 클라이언트 픽스처"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    def override_get_settings():
        return settings

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = override_get_settings

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(test_db):
    """관리자 계정 픽스처"""
    return UserService.register_user(
        "Admin", "admin@example.com", "adminpass123", test_db, is_admin=True
    )


@pytest.fixture
def normal_user(test_db):
    """일반 사용자 계정 픽스처"""
    return UserService.register_user("User U", "u@example.com", "userpass123", test_db)


@pytest.fixture
def other_user(test_db):
    """두 번째 일반 사용자 계정 픽스처"""
    return UserService.register_user("User V", "v@example.com", "userpass123", test_db)


def _auth_headers(user, settings) -> dict:
    token = create_access_token(user.id, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_auth_headers(settings):
    """임의 사용자의 인증 헤더를 만드는 함수 픽스처"""
    return lambda user: _auth_headers(user, settings)


@pytest.fixture
def admin_headers(admin_user, settings):
    """관리자 인증 헤더"""
    return _auth_headers(admin_user, settings)


@pytest.fixture
def user_headers(normal_user, settings):
    """일반 사용자 인증 헤더"""
    return _auth_headers(normal_user, settings)


@pytest.fixture
def other_headers(other_user, settings):
    """두 번째 일반 사용자 인증 헤더"""
    return _auth_headers(other_user, settings)

"""
User 모델 테스트
"""

import pytest
from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import IntegrityError

from app.models.user import User
from app.db.database import Base


@pytest.fixture(scope="function")
def db_session():
    """테스트용 인메모리 SQLite 데이터베이스 세션"""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


class TestUserModel:
    """User 모델 테스트 클래스"""

    def test_create_user_with_all_fields(self, db_session):
        """모든 필드를 포함한 User 생성 테스트"""
        user = User(
            name="Test User",
            email="test@example.com",
            hashed_password="hashed_password_123",
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)

        assert user.id is not None
        assert user.is_admin is False
        assert isinstance(user.created_at, datetime)
        assert isinstance(user.updated_at, datetime)

    def test_email_unique(self, db_session):
        """email 이 중복될 수 없음을 테스트"""
        db_session.add(User(name="A", email="dup@example.com", hashed_password="x"))
        db_session.commit()

        db_session.add(User(name="B", email="dup@example.com", hashed_password="y"))
        with pytest.raises(IntegrityError):
            db_session.commit()

    def test_user_repr(self, db_session):
        """User 문자열 표현 테스트"""
        user = User(name="Test User", email="repr@example.com", hashed_password="x")
        db_session.add(user)
        db_session.commit()

        assert "repr@example.com" in repr(user)
        assert str(user) == "User: Test User"

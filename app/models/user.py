"""
User 모델

사용자 계정 정보를 저장하는 SQLAlchemy 모델입니다.
"""

from datetime import datetime
from sqlalchemy import Boolean, Column, String, DateTime

from app.db.database import Base
from app.models.product import generate_id


class User(Base):
    """
    사용자 모델

    Attributes:
        id: 사용자 고유 ID (uuid hex)
        name: 표시 이름 (Not Null)
        email: 이메일 주소 (Unique, Not Null) - 로그인 ID로 사용
        hashed_password: 해싱된 비밀번호 (Not Null)
        is_admin: 관리자 여부
        created_at: 생성 일시 (자동 설정)
        updated_at: 수정 일시 (자동 업데이트)
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        """User 객체의 문자열 표현"""
        return f"<User(id='{self.id}', email='{self.email}')>"

    def __str__(self) -> str:
        """User 객체의 문자열 표현 (사용자 친화적)"""
        return f"User: {self.name}"

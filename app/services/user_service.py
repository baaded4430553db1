"""
사용자 서비스

회원 가입, 로그인, 토큰 기반 사용자 조회와 계정 관리 기능을 제공합니다.
"""

import logging
from typing import Optional

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.security import hash_password, verify_password, decode_access_token
from app.core.exceptions import (
    AdminDeletionException,
    InvalidCredentialsException,
    UserAlreadyExistsException,
    UserNotFoundException,
)
from app.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """사용자 계정 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    @staticmethod
    def _normalize_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def _ensure_email_available(
        email: str, db: Session, exclude_id: Optional[str] = None
    ) -> None:
        query = db.query(User).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise UserAlreadyExistsException(email)

    @staticmethod
    def _commit(email: str, db: Session) -> None:
        """동시에 같은 이메일이 저장되면 unique 인덱스 위반을 중복 이메일로 변환합니다."""
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise UserAlreadyExistsException(email)

    @staticmethod
    def register_user(
        name: str, email: str, password: str, db: Session, is_admin: bool = False
    ) -> User:
        """
        새 사용자를 등록합니다.

        Args:
            name: 표시 이름
            email: 이메일 (로그인 ID, 소문자로 저장)
            password: 평문 비밀번호
            db: 데이터베이스 세션
            is_admin: 관리자 여부 (관리자 생성 스크립트에서만 True)

        Returns:
            User: 생성된 사용자 객체

        Raises:
            UserAlreadyExistsException: 이미 존재하는 이메일인 경우

        Example:
            >>> user = UserService.register_user("John", "john@example.com", "secret123", db)
            >>> user.email
            'john@example.com'
        """
        email = UserService._normalize_email(email)
        UserService._ensure_email_available(email, db)

        new_user = User(
            name=name,
            email=email,
            hashed_password=hash_password(password),
            is_admin=is_admin,
        )
        db.add(new_user)
        UserService._commit(email, db)
        db.refresh(new_user)

        logger.info("User registered: %s (admin=%s)", new_user.id, is_admin)
        return new_user

    @staticmethod
    def authenticate_user(email: str, password: str, db: Session) -> User:
        """
        이메일과 비밀번호로 사용자 인증을 수행합니다.

        Raises:
            InvalidCredentialsException: 이메일이 없거나 비밀번호가 틀린 경우
        """
        email = UserService._normalize_email(email)
        user: User | None = db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.hashed_password):
            raise InvalidCredentialsException("Invalid email or password")
        return user

    @staticmethod
    def get_current_user(token: str, db: Session, settings: Settings) -> User:
        """
        JWT 토큰에서 현재 사용자를 조회합니다.

        Args:
            token: JWT 액세스 토큰 (sub 클레임 = 사용자 ID)
            db: 데이터베이스 세션
            settings: 애플리케이션 설정

        Returns:
            User: 사용자 객체

        Raises:
            InvalidCredentialsException: 토큰이 유효하지 않거나 만료되었거나,
                토큰의 사용자가 더 이상 존재하지 않는 경우
        """
        try:
            user_id = decode_access_token(token, settings)
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialsException("Token has expired")
        except jwt.InvalidTokenError:
            raise InvalidCredentialsException("Invalid token")

        user = db.get(User, user_id)
        if not user:
            raise InvalidCredentialsException("User for token no longer exists")
        return user

    @staticmethod
    def get_user(user_id: str, db: Session) -> User:
        """
        사용자 ID로 사용자를 조회합니다.

        Raises:
            UserNotFoundException: 사용자가 없는 경우
        """
        user = db.get(User, user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    @staticmethod
    def list_users(db: Session) -> list[User]:
        """모든 사용자를 가입 순서로 조회합니다."""
        return db.query(User).order_by(User.created_at, User.id).all()

    @staticmethod
    def update_profile(
        user: User,
        db: Session,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """
        본인 프로필을 수정합니다. None 인 값은 변경하지 않습니다.

        Raises:
            UserAlreadyExistsException: 다른 사용자가 쓰는 이메일로 바꾸려는 경우
        """
        if name is not None:
            user.name = name
        if email is not None:
            email = UserService._normalize_email(email)
            UserService._ensure_email_available(email, db, exclude_id=user.id)
            user.email = email
        if password is not None:
            user.hashed_password = hash_password(password)

        UserService._commit(user.email, db)
        db.refresh(user)
        return user

    @staticmethod
    def update_user(
        user_id: str,
        db: Session,
        name: Optional[str] = None,
        email: Optional[str] = None,
        is_admin: Optional[bool] = None,
    ) -> User:
        """
        관리자가 사용자 정보를 수정합니다. None 인 값은 변경하지 않습니다.

        Raises:
            UserNotFoundException: 사용자가 없는 경우
            UserAlreadyExistsException: 다른 사용자가 쓰는 이메일로 바꾸려는 경우
        """
        user = UserService.get_user(user_id, db)

        if name is not None:
            user.name = name
        if email is not None:
            email = UserService._normalize_email(email)
            UserService._ensure_email_available(email, db, exclude_id=user.id)
            user.email = email
        if is_admin is not None:
            user.is_admin = is_admin

        UserService._commit(user.email, db)
        db.refresh(user)

        logger.info("User updated: %s", user.id)
        return user

    @staticmethod
    def delete_user(user_id: str, db: Session) -> None:
        """
        사용자를 삭제합니다. 관리자 계정은 삭제할 수 없습니다.

        Raises:
            UserNotFoundException: 사용자가 없는 경우
            AdminDeletionException: 관리자 계정인 경우
        """
        user = UserService.get_user(user_id, db)
        if user.is_admin:
            raise AdminDeletionException(user_id)

        db.delete(user)
        db.commit()

        logger.info("User removed: %s", user_id)

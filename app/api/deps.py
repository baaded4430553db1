"""
FastAPI 의존성 주입 함수들

데이터베이스 세션, 설정, 인증 등의 의존성을 제공합니다.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.exceptions import AdminRequiredException, InvalidCredentialsException
from app.db.database import get_db
from app.models.user import User
from app.services.user_service import UserService

__all__ = ["get_db", "get_settings", "get_current_user", "get_current_admin"]


# Authorization 헤더가 없어도 쿠키로 인증할 수 있도록 auto_error 비활성화
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/auth", auto_error=False)


def get_current_user(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    JWT 토큰으로 현재 인증된 사용자를 조회하는 의존성 함수

    토큰은 Authorization: Bearer 헤더를 우선으로 하고,
    없으면 로그인 시 설정한 http-only 쿠키에서 읽습니다.

    Raises:
        InvalidCredentialsException: 토큰이 없거나 유효하지 않은 경우 (401)

    Example:
        @router.get("/protected")
        def protected_route(current_user: User = Depends(get_current_user)):
            return {"user": current_user.name}
    """
    token = bearer_token or request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise InvalidCredentialsException("Not authorized, no token")

    return UserService.get_current_user(token, db, settings)


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """
    관리자 권한을 요구하는 의존성 함수

    Raises:
        AdminRequiredException: 관리자가 아닌 경우 (403)
    """
    if not current_user.is_admin:
        raise AdminRequiredException()
    return current_user

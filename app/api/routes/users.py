"""
사용자 관련 API 엔드포인트

로그인/회원 가입/로그아웃, 본인 프로필, 관리자용 사용자 관리 기능을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_admin
from app.core.config import Settings, get_settings
from app.core.security import create_access_token
from app.models.user import User
from app.schemas.product import MessageResponse
from app.schemas.user import (
    AuthResponse,
    ProfileUpdateRequest,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.services.user_service import UserService


router = APIRouter()


def issue_token(user: User, response: Response, settings: Settings) -> AuthResponse:
    """JWT 를 발급하여 http-only 쿠키로 설정하고 응답 본문에도 담습니다."""
    token = create_access_token(user.id, settings)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        max_age=settings.jwt_expiration_minutes * 60,
    )
    return AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        is_admin=user.is_admin,
        token=token,
    )


@router.post("/auth", response_model=AuthResponse)
def auth_user(
    credentials: UserLoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    로그인 및 JWT 토큰 발급 (공개)

    Example:
        Request:
        ```json
        {
            "email": "john@example.com",
            "password": "securePass123"
        }
        ```

        Response (200):
        ```json
        {
            "id": "9b2e...",
            "name": "John Doe",
            "email": "john@example.com",
            "isAdmin": false,
            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
        }
        ```

    Raises:
        InvalidCredentialsException: 잘못된 인증 정보 (401)
    """
    user = UserService.authenticate_user(credentials.email, credentials.password, db)
    return issue_token(user, response, settings)


@router.post("", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_data: UserRegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    새 사용자를 등록하고 바로 로그인 상태로 만듭니다 (공개).

    Raises:
        UserAlreadyExistsException: 이미 존재하는 이메일 (409)
    """
    user = UserService.register_user(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        db=db,
    )
    return issue_token(user, response, settings)


@router.post("/logout", response_model=MessageResponse)
def logout_user(response: Response, settings: Settings = Depends(get_settings)):
    """로그아웃 (인증 쿠키 삭제)"""
    response.delete_cookie(settings.auth_cookie_name, httponly=True, samesite="strict")
    return MessageResponse(message="Logged out successfully")


@router.get("/profile", response_model=UserResponse)
def get_user_profile(current_user: User = Depends(get_current_user)):
    """현재 인증된 사용자의 정보를 조회합니다."""
    return current_user


@router.put("/profile", response_model=AuthResponse)
def update_user_profile(
    profile_data: ProfileUpdateRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """
    본인 프로필을 수정합니다. 보낸 필드만 바뀌며, 새 토큰을 발급합니다.

    Raises:
        UserAlreadyExistsException: 다른 사용자가 쓰는 이메일 (409)
    """
    user = UserService.update_profile(
        current_user,
        db,
        name=profile_data.name,
        email=profile_data.email,
        password=profile_data.password,
    )
    return issue_token(user, response, settings)


@router.get("", response_model=List[UserResponse])
def get_users(
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """모든 사용자 목록을 조회합니다 (관리자 전용)."""
    return UserService.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """
    사용자를 조회합니다 (관리자 전용).

    Raises:
        UserNotFoundException: 사용자가 없는 경우 (404)
    """
    return UserService.get_user(user_id, db)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    user_data: UserUpdateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """사용자 정보를 수정합니다 (관리자 전용, 보낸 필드만 수정)."""
    return UserService.update_user(
        user_id,
        db,
        name=user_data.name,
        email=user_data.email,
        is_admin=user_data.is_admin,
    )


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """
    사용자를 삭제합니다 (관리자 전용).

    Raises:
        UserNotFoundException: 사용자가 없는 경우 (404)
        AdminDeletionException: 관리자 계정인 경우 (400)
    """
    UserService.delete_user(user_id, db)
    return MessageResponse(message="User removed")

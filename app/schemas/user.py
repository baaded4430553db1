"""
사용자/인증 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
"""

from typing import Optional

from pydantic import ConfigDict, EmailStr, Field

from app.schemas.product import CamelModel


class UserLoginRequest(CamelModel):
    """
    로그인 요청 스키마

    Example:
        {
            "email": "john@example.com",
            "password": "securePass123"
        }
    """

    email: EmailStr = Field(..., description="이메일", examples=["john@example.com"])
    password: str = Field(..., description="비밀번호", examples=["securePass123"])


class UserRegisterRequest(CamelModel):
    """
    회원 가입 요청 스키마

    Example:
        {
            "name": "John Doe",
            "email": "john@example.com",
            "password": "securePass123"
        }
    """

    name: str = Field(
        ..., min_length=1, max_length=100, description="표시 이름", examples=["John Doe"]
    )
    email: EmailStr = Field(..., description="이메일", examples=["john@example.com"])
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="비밀번호 (6자 이상)",
        examples=["securePass123"],
    )


class ProfileUpdateRequest(CamelModel):
    """본인 프로필 수정 요청 스키마 (보낸 필드만 수정)"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=100)


class UserUpdateRequest(CamelModel):
    """관리자용 사용자 수정 요청 스키마 (보낸 필드만 수정)"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    is_admin: Optional[bool] = None


class UserResponse(CamelModel):
    """
    사용자 정보 응답 스키마

    Example:
        {
            "id": "9b2e...",
            "name": "John Doe",
            "email": "john@example.com",
            "isAdmin": false
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="사용자 ID")
    name: str = Field(..., description="표시 이름")
    email: str = Field(..., description="이메일")
    is_admin: bool = Field(..., description="관리자 여부")


class AuthResponse(UserResponse):
    """로그인/회원 가입 응답 스키마 (JWT 토큰 포함)"""

    token: str = Field(..., description="JWT 액세스 토큰")

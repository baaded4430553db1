"""
Pydantic 스키마 모듈
"""

from app.schemas.product import (
    ProductRequest,
    ProductResponse,
    ProductPageResponse,
    CategoryPageResponse,
    ReviewCreateRequest,
    ReviewResponse,
    MessageResponse,
)
from app.schemas.user import (
    UserLoginRequest,
    UserRegisterRequest,
    ProfileUpdateRequest,
    UserUpdateRequest,
    UserResponse,
    AuthResponse,
)

__all__ = [
    "ProductRequest",
    "ProductResponse",
    "ProductPageResponse",
    "CategoryPageResponse",
    "ReviewCreateRequest",
    "ReviewResponse",
    "MessageResponse",
    "UserLoginRequest",
    "UserRegisterRequest",
    "ProfileUpdateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "AuthResponse",
]

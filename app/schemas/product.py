"""
상품 및 리뷰 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다. JSON 키는 camelCase 를 사용합니다
(countInStock, numReviews 등).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 별칭을 사용하는 기반 스키마"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductRequest(CamelModel):
    """
    상품 생성/수정 요청 스키마

    수정(PUT) 시에도 같은 스키마를 사용하며, 모든 필드를 통째로 교체합니다.
    생략된 선택 필드는 null 로 저장됩니다.

    Example:
        {
            "name": "Widget",
            "price": 9.99,
            "countInStock": 5,
            "colors": ["red", "blue"]
        }
    """

    name: str = Field(
        ..., min_length=1, max_length=200, description="상품명", examples=["Widget"]
    )
    price: float = Field(..., ge=0, description="상품 가격 (0 이상)", examples=[9.99])
    description: Optional[str] = Field(None, description="상품 설명")
    image: Optional[str] = Field(
        None, description="이미지 경로 또는 URL", examples=["/uploads/widget.jpg"]
    )
    brand: Optional[str] = Field(None, max_length=100, description="브랜드")
    category: Optional[str] = Field(None, max_length=100, description="카테고리")
    count_in_stock: int = Field(..., ge=0, description="재고 수량 (0 이상)", examples=[5])
    colors: List[str] = Field(default_factory=list, description="색상 목록")
    char: Any = Field(None, description="부가 정보 (그대로 저장)")
    year: Optional[int] = Field(None, description="연식", examples=[2024])


class ReviewCreateRequest(CamelModel):
    """
    리뷰 작성 요청 스키마

    Example:
        {
            "rating": 4,
            "comment": "ok"
        }
    """

    rating: int = Field(..., ge=1, le=5, description="평점 (1-5)", examples=[4])
    comment: str = Field("", description="리뷰 내용", examples=["ok"])


class ReviewResponse(CamelModel):
    """리뷰 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    user: Optional[str] = Field(None, validation_alias="user_id", description="작성자 ID")
    name: str = Field(..., description="작성 당시 사용자 이름")
    rating: int = Field(..., description="평점")
    comment: Optional[str] = Field(None, description="리뷰 내용")
    created_at: datetime = Field(..., description="작성 일시")


class ProductResponse(CamelModel):
    """
    상품 정보 응답 스키마

    Example:
        {
            "id": "4f1c0c7e0b8a4d7e9a0c3b2f1e6d5a4b",
            "user": "9b2e...",
            "name": "Widget",
            "price": 9.99,
            "countInStock": 5,
            "colors": ["red", "blue"],
            "rating": 0.0,
            "numReviews": 0,
            "reviews": [],
            ...
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="상품 ID")
    user: Optional[str] = Field(None, validation_alias="user_id", description="등록자 ID")
    name: str = Field(..., description="상품명")
    image: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    price: float = Field(..., description="상품 가격")
    count_in_stock: int = Field(..., description="재고 수량")
    colors: List[str] = Field(default_factory=list)
    char: Any = None
    year: Optional[int] = None
    rating: float = Field(..., description="리뷰 평점 평균")
    num_reviews: int = Field(..., description="리뷰 개수")
    reviews: List[ReviewResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProductPageResponse(CamelModel):
    """상품 목록 (페이지) 응답 스키마"""

    products: List[ProductResponse]
    page: int = Field(..., description="현재 페이지 (1부터)")
    pages: int = Field(..., description="전체 페이지 수")


class CategoryPageResponse(ProductPageResponse):
    """카테고리별 상품 목록 응답 스키마 (가격 범위 포함)"""

    category: str
    min_price: Optional[float] = Field(None, description="카테고리 최저가")
    max_price: Optional[float] = Field(None, description="카테고리 최고가")


class MessageResponse(BaseModel):
    """단순 메시지 응답 스키마"""

    message: str

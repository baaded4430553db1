"""
상품 카탈로그 API 엔드포인트

상품 목록/검색, 카테고리 조회, 상세 조회, 생성/수정/삭제, 리뷰 작성,
평점 상위 상품, 브랜드/색상/연식 목록 기능을 제공합니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_admin
from app.core.config import Settings, get_settings
from app.models.user import User
from app.schemas.product import (
    CategoryPageResponse,
    MessageResponse,
    ProductPageResponse,
    ProductRequest,
    ProductResponse,
    ReviewCreateRequest,
)
from app.services.product_service import ProductService


router = APIRouter()


@router.get("", response_model=ProductPageResponse)
def list_products(
    keyword: Optional[str] = Query(None, description="상품명 검색어"),
    page_number: int = Query(1, alias="pageNumber", ge=1, description="페이지 번호"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    상품 목록을 조회합니다 (공개).

    Example:
        Request:
        ```
        GET /api/products?keyword=wid&pageNumber=1
        ```

        Response (200):
        ```json
        {
            "products": [{"id": "4f1c...", "name": "Widget", ...}],
            "page": 1,
            "pages": 1
        }
        ```
    """
    return ProductService.list_products(
        db, settings, keyword=keyword, page=page_number
    )


@router.get("/category/{category}", response_model=CategoryPageResponse)
def list_products_by_category(
    category: str,
    response: Response,
    page_number: int = Query(1, alias="pageNumber", ge=1, description="페이지 번호"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    카테고리의 상품 목록과 가격 범위를 조회합니다 (공개).

    상품이 하나도 없으면 본문은 그대로 반환하되 상태 코드를 404로 설정합니다.

    Example:
        Response (200):
        ```json
        {
            "products": [...],
            "category": "phones",
            "page": 1,
            "pages": 2,
            "minPrice": 199.0,
            "maxPrice": 999.0
        }
        ```
    """
    result = ProductService.list_products_by_category(
        category, db, settings, page=page_number
    )
    if not result["products"]:
        response.status_code = status.HTTP_404_NOT_FOUND
    return result


@router.get("/top", response_model=List[ProductResponse])
def get_top_products(db: Session = Depends(get_db)):
    """평점이 가장 높은 상품 3개를 조회합니다 (공개)."""
    return ProductService.get_top_products(db)


@router.get("/brands", response_model=List[str])
def get_brands(db: Session = Depends(get_db)):
    """브랜드 목록 (중복 없음, 오름차순)."""
    return ProductService.get_brands(db)


@router.get("/colors", response_model=List[str])
def get_colors(db: Session = Depends(get_db)):
    """색상 목록 (중복 없음, 정렬하지 않음)."""
    return ProductService.get_colors(db)


@router.get("/years", response_model=List[int])
def get_years(db: Session = Depends(get_db)):
    """연식 목록 (중복 없음, null 제외)."""
    return ProductService.get_years(db)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, db: Session = Depends(get_db)):
    """
    특정 상품의 상세 정보를 리뷰와 함께 조회합니다 (공개).

    Raises:
        ProductNotFoundException: 상품이 없는 경우 (404, "Product not found")
    """
    return ProductService.get_product(product_id, db)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """
    새 상품을 생성합니다 (관리자 전용).

    Example:
        Request:
        ```json
        {
            "name": "Widget",
            "price": 9.99,
            "countInStock": 5,
            "colors": ["red", "blue"]
        }
        ```

        Response (201):
        ```json
        {
            "id": "4f1c...",
            "name": "Widget",
            "price": 9.99,
            "countInStock": 5,
            "colors": ["red", "blue"],
            "rating": 0.0,
            "numReviews": 0,
            "reviews": [],
            ...
        }
        ```
    """
    return ProductService.create_product(product_data.model_dump(), admin, db)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    product_data: ProductRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """
    상품의 모든 필드를 교체합니다 (관리자 전용).

    요청에 없는 선택 필드는 null 로 저장됩니다.
    """
    return ProductService.update_product(product_id, product_data.model_dump(), db)


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    admin: User = Depends(get_current_admin),
):
    """
    상품을 삭제합니다 (관리자 전용).

    업로드된 이미지(/uploads/...)가 있으면 파일을 먼저 삭제합니다.
    """
    ProductService.delete_product(product_id, db, settings)
    return MessageResponse(message="Product removed")


@router.post(
    "/{product_id}/reviews",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product_review(
    product_id: str,
    review_data: ReviewCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    상품에 리뷰를 작성합니다 (인증 필요).

    Example:
        Request:
        ```json
        {
            "rating": 4,
            "comment": "ok"
        }
        ```

        Response (201):
        ```json
        {"message": "Review added"}
        ```

    Raises:
        ProductNotFoundException: 상품이 없는 경우 (404)
        ProductAlreadyReviewedException: 이미 리뷰를 작성한 경우 (400)
    """
    ProductService.create_review(
        product_id,
        current_user,
        rating=review_data.rating,
        comment=review_data.comment,
        db=db,
    )
    return MessageResponse(message="Review added")

"""상품 카탈로그 서비스."""

import logging
import math
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.config import Settings
from app.core.exceptions import (
    ProductAlreadyReviewedException,
    ProductConflictException,
    ProductNotFoundException,
)
from app.models import Product, Review, User

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 3

# 생성/수정 시 통째로 교체되는 필드
PRODUCT_FIELDS = (
    "name",
    "price",
    "description",
    "image",
    "brand",
    "category",
    "count_in_stock",
    "colors",
    "char",
    "year",
)


class ProductService:
    """상품 조회, 생성, 수정, 삭제 및 리뷰 서비스."""

    @staticmethod
    def _paginate(
        query: Query, page: int, settings: Settings
    ) -> tuple[list[Product], int]:
        """
        정렬된 쿼리에서 한 페이지를 잘라냅니다.

        Returns:
            (상품 리스트, 전체 페이지 수)
        """
        page_size = settings.pagination_limit
        count = query.order_by(None).count()
        products = (
            query.order_by(Product.created_at, Product.id)
            .offset(page_size * (page - 1))
            .limit(page_size)
            .all()
        )
        return products, math.ceil(count / page_size)

    @staticmethod
    def list_products(
        db: Session, settings: Settings, keyword: Optional[str] = None, page: int = 1
    ) -> dict:
        """
        상품 목록을 페이지 단위로 조회합니다.

        Args:
            db: DB 세션
            settings: 애플리케이션 설정 (pagination_limit)
            keyword: 상품명 검색어 (대소문자 무시 부분 일치)
            page: 페이지 번호 (1부터)

        Returns:
            {"products": [...], "page": int, "pages": int}
        """
        query = db.query(Product)
        if keyword:
            query = query.filter(Product.name.icontains(keyword, autoescape=True))

        products, pages = ProductService._paginate(query, page, settings)
        return {"products": products, "page": page, "pages": pages}

    @staticmethod
    def list_products_by_category(
        category: str, db: Session, settings: Settings, page: int = 1
    ) -> dict:
        """
        카테고리의 상품 목록과 가격 범위를 조회합니다.

        Returns:
            {"products", "category", "page", "pages", "min_price", "max_price"}
            일치하는 상품이 없으면 min_price/max_price 는 None
        """
        min_price, max_price = (
            db.query(func.min(Product.price), func.max(Product.price))
            .filter(Product.category == category)
            .one()
        )

        query = db.query(Product).filter(Product.category == category)
        products, pages = ProductService._paginate(query, page, settings)

        return {
            "products": products,
            "category": category,
            "page": page,
            "pages": pages,
            "min_price": min_price,
            "max_price": max_price,
        }

    @staticmethod
    def get_product(product_id: str, db: Session) -> Product:
        """
        상품 ID로 상품을 조회합니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        product = db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    def _commit(product_id: str, db: Session) -> None:
        """버전 충돌을 도메인 예외로 바꾸어 커밋합니다."""
        try:
            db.commit()
        except StaleDataError:
            db.rollback()
            logger.warning("Version conflict while saving product %s", product_id)
            raise ProductConflictException(product_id)

    @staticmethod
    def create_product(data: dict[str, Any], owner: User, db: Session) -> Product:
        """
        상품을 생성합니다.

        Args:
            data: PRODUCT_FIELDS 값을 담은 딕셔너리
            owner: 상품을 등록하는 관리자
            db: DB 세션

        Returns:
            생성된 Product 객체 (리뷰 0개, 평점 0)
        """
        product = Product(
            user_id=owner.id,
            rating=0,
            num_reviews=0,
            **{field: data.get(field) for field in PRODUCT_FIELDS},
        )
        if product.colors is None:
            product.colors = []

        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info("Product created: %s (%s) by %s", product.id, product.name, owner.id)
        return product

    @staticmethod
    def update_product(product_id: str, data: dict[str, Any], db: Session) -> Product:
        """
        상품의 모든 필드를 요청 값으로 교체합니다 (부분 수정 아님).

        data 에 없는 필드는 None 으로 바뀝니다. colors 는 빈 목록이 됩니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            ProductConflictException: 다른 요청이 먼저 수정한 경우
        """
        product = ProductService.get_product(product_id, db)

        for field in PRODUCT_FIELDS:
            setattr(product, field, data.get(field))
        if product.colors is None:
            product.colors = []

        ProductService._commit(product_id, db)
        db.refresh(product)

        logger.info("Product updated: %s", product.id)
        return product

    @staticmethod
    def _remove_uploaded_image(image: Optional[str], settings: Settings) -> bool:
        """
        업로드 경로의 이미지 파일을 삭제합니다 (best-effort).

        외부 URL 등 업로드 경로가 아니면 파일 시스템에 접근하지 않습니다.

        Returns:
            파일을 삭제했으면 True
        """
        if not image or not image.startswith(settings.upload_prefix):
            return False

        media_root = Path(settings.media_root).resolve()
        upload_root = (media_root / settings.upload_prefix.lstrip("/")).resolve()
        file_path = (media_root / image.lstrip("/")).resolve()

        if not file_path.is_relative_to(upload_root):
            logger.warning("Refusing to remove image outside upload root: %s", image)
            return False

        try:
            file_path.unlink()
        except FileNotFoundError:
            logger.debug("Uploaded image already missing: %s", file_path)
            return False

        logger.info("Removed uploaded image %s", file_path)
        return True

    @staticmethod
    def delete_product(product_id: str, db: Session, settings: Settings) -> None:
        """
        상품을 삭제합니다.

        업로드된 이미지 파일을 먼저 지운 뒤 레코드를 삭제합니다.
        레코드 삭제가 실패해도 이미 지운 파일은 복구하지 않습니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        product = ProductService.get_product(product_id, db)

        ProductService._remove_uploaded_image(product.image, settings)

        db.delete(product)
        ProductService._commit(product_id, db)

        logger.info("Product removed: %s", product_id)

    @staticmethod
    def create_review(
        product_id: str, user: User, rating: int, comment: str, db: Session
    ) -> Product:
        """
        상품에 리뷰를 추가하고 리뷰 수와 평점 평균을 다시 계산합니다.

        리뷰 추가와 num_reviews/rating 갱신은 한 번의 커밋으로 저장되며,
        상품 버전(version_id)이 읽은 시점과 다르면 저장하지 않습니다.

        Args:
            product_id: 상품 ID
            user: 리뷰 작성자
            rating: 평점
            comment: 리뷰 내용
            db: DB 세션

        Returns:
            갱신된 Product 객체

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            ProductAlreadyReviewedException: 이미 리뷰를 작성한 경우
            ProductConflictException: 동시에 다른 리뷰가 저장된 경우
        """
        product = ProductService.get_product(product_id, db)

        if any(review.user_id == user.id for review in product.reviews):
            raise ProductAlreadyReviewedException(product_id, user.id)

        product.reviews.append(
            Review(user_id=user.id, name=user.name, rating=int(rating), comment=comment)
        )
        product.num_reviews = len(product.reviews)
        product.rating = (
            sum(review.rating for review in product.reviews) / product.num_reviews
        )

        try:
            ProductService._commit(product_id, db)
        except IntegrityError:
            # 같은 사용자의 리뷰가 동시에 저장된 경우 (product_id, user_id) 유니크 위반
            db.rollback()
            raise ProductAlreadyReviewedException(product_id, user.id)

        logger.info(
            "Review added to product %s by %s (rating=%s)", product_id, user.id, rating
        )
        return product

    @staticmethod
    def get_top_products(db: Session) -> list[Product]:
        """평점이 가장 높은 상품 3개를 조회합니다."""
        return (
            db.query(Product)
            .order_by(Product.rating.desc(), Product.created_at, Product.id)
            .limit(TOP_PRODUCTS_LIMIT)
            .all()
        )

    @staticmethod
    def get_brands(db: Session) -> list[str]:
        """중복 없는 브랜드 목록 (오름차순)."""
        rows = db.query(Product.brand).filter(Product.brand.isnot(None)).distinct()
        return sorted(brand for (brand,) in rows)

    @staticmethod
    def get_colors(db: Session) -> list[str]:
        """
        모든 상품의 colors 를 펼친 뒤 중복을 제거한 목록.

        정렬하지 않으며 저장소 순서에서 처음 나온 순서를 따릅니다.
        """
        rows = db.query(Product.colors).order_by(Product.created_at, Product.id)
        seen: dict[str, None] = {}
        for (colors,) in rows:
            for color in colors or []:
                seen.setdefault(color, None)
        return list(seen)

    @staticmethod
    def get_years(db: Session) -> list[int]:
        """중복 없는 연식 목록 (null 제외, 정렬하지 않음)."""
        rows = db.query(Product.year).filter(Product.year.isnot(None)).distinct()
        return [year for (year,) in rows]

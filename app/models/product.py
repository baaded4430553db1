"""
Product / Review 모델
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.db.database import Base


def generate_id() -> str:
    return uuid.uuid4().hex


class Product(Base):
    """
    상품 모델

    리뷰는 상품에 종속되며 (Review), 상품과 함께 저장/삭제됩니다.

    Attributes:
        id: 상품 고유 ID (uuid hex, 생성 시 자동 부여)
        user_id: 상품을 등록한 관리자 ID
        name: 상품명 (Not Null)
        image: 이미지 경로 또는 URL (/uploads/... 이면 로컬 업로드 파일)
        brand, category, description: 텍스트 필드
        price: 가격 (0 이상)
        count_in_stock: 재고 수량 (0 이상)
        colors: 색상 이름 목록 (JSON)
        char: 해석하지 않고 그대로 보관하는 값 (JSON)
        year: 연식 (Nullable)
        rating: 리뷰 평점 평균 (리뷰가 없으면 0)
        num_reviews: 리뷰 개수 (항상 len(reviews))
        version_id: 낙관적 동시성 제어용 버전
    """

    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    name = Column(String(200), nullable=False, index=True)
    image = Column(String(500), nullable=True)
    brand = Column(String(100), nullable=True, index=True)
    category = Column(String(100), nullable=True, index=True)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False, default=0)
    count_in_stock = Column(Integer, nullable=False, default=0)
    colors = Column(JSON, nullable=False, default=list)
    char = Column(JSON, nullable=True)
    year = Column(Integer, nullable=True)
    rating = Column(Float, nullable=False, default=0)
    num_reviews = Column(Integer, nullable=False, default=0)
    version_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    reviews = relationship(
        "Review",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id='{self.id}', name='{self.name}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"


class Review(Base):
    """
    상품 리뷰 모델 (상품에 종속)

    (product_id, user_id) 쌍은 유일합니다.
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("product_id", "user_id", name="uq_reviews_product_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        String(32),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    name = Column(String(100), nullable=False)  # 작성 당시 사용자 이름
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    product = relationship("Product", back_populates="reviews")

    def __repr__(self) -> str:
        return (
            f"<Review(product_id='{self.product_id}', user_id='{self.user_id}', "
            f"rating={self.rating})>"
        )

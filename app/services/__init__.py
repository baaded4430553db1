"""비즈니스 로직 서비스."""

from app.services.product_service import ProductService
from app.services.user_service import UserService

__all__ = ["ProductService", "UserService"]

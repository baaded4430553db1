from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.routes import products, users
from app.core.config import get_settings
from app.core.logging_config import configure_logging
from app.db.database import Base, engine

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 테이블이 없으면 생성합니다."""
    Base.metadata.create_all(bind=engine)
    logger.info("Catalog API started (env=%s)", settings.app_env)
    yield


app = FastAPI(
    title="Product Catalog API",
    description="상품 카탈로그, 리뷰, 사용자 계정 REST API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app, settings)

# 라우터 등록
app.include_router(products.router, prefix="/api/products", tags=["products"])
app.include_router(users.router, prefix="/api/users", tags=["users"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Product Catalog API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}

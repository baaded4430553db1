"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 데이터베이스 설정
    database_url: str = "sqlite:///./catalog.db"

    # 페이지네이션 설정 (PAGINATION_LIMIT)
    pagination_limit: int = Field(10, gt=0)

    # JWT 설정
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60 * 24 * 30
    auth_cookie_name: str = "jwt"

    # 업로드 이미지 설정
    media_root: str = "."
    upload_prefix: str = "/uploads"

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수

    시작 시 한 번만 생성되며, 이후에는 같은 인스턴스를 반환합니다.
    """
    return Settings()

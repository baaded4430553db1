"""
오류 응답 변환 테스트
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.errors import register_exception_handlers
from app.core.config import Settings
from app.core.exceptions import ProductNotFoundException, ProductConflictException


def build_app(settings: Settings) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app, settings)

    @app.get("/missing")
    def missing():
        raise ProductNotFoundException("abc")

    @app.get("/conflict")
    def conflict():
        raise ProductConflictException("abc")

    @app.get("/boom")
    def boom():
        raise RuntimeError("database unavailable")

    return app


class TestErrorTranslation:
    """예외 → 상태 코드/본문 변환 테스트 클래스"""

    def test_domain_error_with_stack_in_development(self):
        """개발 환경에서는 stack 이 포함되는지 테스트"""
        client = TestClient(build_app(Settings(app_env="development")))

        response = client.get("/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["message"] == "Product not found"
        assert "ProductNotFoundException" in body["stack"]

    def test_stack_hidden_in_production(self):
        """production 환경에서는 stack 이 null 인지 테스트"""
        client = TestClient(build_app(Settings(app_env="production")))

        response = client.get("/conflict")

        assert response.status_code == 409
        assert response.json()["stack"] is None

    def test_unhandled_error_is_500(self):
        """처리되지 않은 예외는 500 과 같은 형태의 본문인지 테스트"""
        client = TestClient(
            build_app(Settings(app_env="production")), raise_server_exceptions=False
        )

        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "database unavailable", "stack": None}

    def test_unmatched_route(self, test_client):
        """일치하는 라우트가 없으면 404 와 경로가 담긴 메시지인지 테스트"""
        response = test_client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["message"] == "Not Found - /api/nothing-here"


def test_health(test_client):
    """헬스체크 엔드포인트 테스트"""
    assert test_client.get("/health").json() == {"status": "healthy"}

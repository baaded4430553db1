"""
예외 → HTTP 응답 변환

서비스 계층이 던진 도메인 예외의 ErrorKind 를 상태 코드로 매핑하는
유일한 곳입니다. 모든 오류 응답은 {"message": ..., "stack": ...} 형태이며,
stack 은 production 환경에서 null 입니다.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings
from app.core.exceptions import CatalogException, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def error_body(message: str, exc: Exception, settings: Settings) -> dict:
    stack = None
    if not settings.is_production:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return {"message": message, "stack": stack}


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """도메인 예외, 라우트 미일치, 처리되지 않은 예외 핸들러를 등록합니다."""

    @app.exception_handler(CatalogException)
    async def catalog_exception_handler(request: Request, exc: CatalogException):
        status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        headers = None
        if exc.kind == ErrorKind.UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=status_code,
            content=error_body(exc.message, exc, settings),
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            # 일치하는 라우트가 없는 경우
            message = f"Not Found - {request.url.path}"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(message), exc, settings),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(str(exc) or "Internal Server Error", exc, settings),
        )

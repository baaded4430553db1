"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
각 예외는 ErrorKind를 가지며, HTTP 상태 코드로의 변환은
app.api.errors 에서만 수행합니다.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """예외 종류 (경계 계층에서 상태 코드로 매핑)"""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"


class CatalogException(Exception):
    """모든 도메인 예외의 기반 클래스"""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ProductNotFoundException(CatalogException):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__("Product not found")


class ProductAlreadyReviewedException(CatalogException):
    """
    같은 사용자가 같은 상품에 리뷰를 두 번 작성하려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, product_id: str, user_id: str):
        self.product_id = product_id
        self.user_id = user_id
        super().__init__("Product already reviewed")


class ProductConflictException(CatalogException):
    """
    다른 요청이 먼저 상품을 수정하여 버전이 맞지 않을 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    kind = ErrorKind.CONFLICT

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__("Product was modified concurrently, please retry")


class UserAlreadyExistsException(CatalogException):
    """
    이미 사용 중인 이메일로 회원 가입을 시도할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    kind = ErrorKind.CONFLICT

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email '{email}' already exists")


class UserNotFoundException(CatalogException):
    """
    사용자를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User not found")


class InvalidCredentialsException(CatalogException):
    """
    인증 실패 시 발생하는 예외 (잘못된 비밀번호, 유효하지 않은 토큰 등)

    HTTP Status Code: 401 Unauthorized
    """

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AdminRequiredException(CatalogException):
    """
    관리자 전용 엔드포인트에 일반 사용자가 접근할 때 발생하는 예외

    HTTP Status Code: 403 Forbidden
    """

    kind = ErrorKind.FORBIDDEN

    def __init__(self):
        super().__init__("Not authorized as admin")


class AdminDeletionException(CatalogException):
    """
    관리자 계정을 삭제하려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Can not delete admin user")

"""
계정 인증용 보안 유틸리티

- 비밀번호: bcrypt 해시 (72바이트 초과분은 bcrypt 규칙대로 잘라서 사용)
- 액세스 토큰: 사용자 ID 를 sub 클레임에 담은 JWT
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.core.config import Settings

# bcrypt 는 입력의 앞 72바이트만 사용합니다.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    비밀번호를 bcrypt 로 해싱합니다.

    Returns:
        str: salt 가 포함된 해시 문자열 ($2b$...)
    """
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    평문 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    저장된 값이 bcrypt 해시 형식이 아니면 False 를 반환합니다.
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password), hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_access_token(user_id: str, settings: Settings) -> str:
    """
    사용자 ID 로 액세스 토큰을 발급합니다.

    만료 시간은 JWT_EXPIRATION_MINUTES 설정을 따릅니다 (기본 30일).
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    """
    액세스 토큰을 검증하고 사용자 ID(sub)를 반환합니다.

    Raises:
        jwt.ExpiredSignatureError: 만료된 토큰
        jwt.InvalidTokenError: 서명 불일치, 형식 오류, sub/exp 클레임 누락
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
    return payload["sub"]

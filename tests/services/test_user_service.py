"""
사용자 서비스 테스트
"""

from datetime import datetime, timedelta, timezone
import pytest
import jwt

from app.services.user_service import UserService
from app.core.security import verify_password, create_access_token
from app.core.exceptions import (
    AdminDeletionException,
    InvalidCredentialsException,
    UserAlreadyExistsException,
    UserNotFoundException,
)
from app.models.user import User


class TestRegisterUser:
    """회원 가입 테스트 클래스"""

    def test_register_user_success(self, test_db):
        """회원 가입 성공 테스트"""
        user = UserService.register_user(
            "John Doe", "John@Example.com", "testpassword123", test_db
        )

        assert isinstance(user, User)
        assert user.id is not None
        assert user.name == "John Doe"
        # 이메일은 소문자로 저장
        assert user.email == "john@example.com"
        assert user.is_admin is False

        # 비밀번호가 해싱되어 저장되는지 확인
        assert user.hashed_password != "testpassword123"
        assert verify_password("testpassword123", user.hashed_password) is True

    def test_register_user_duplicate_email(self, test_db):
        """중복 이메일 등록 실패 테스트"""
        UserService.register_user("A", "dup@example.com", "password123", test_db)

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            UserService.register_user("B", "DUP@example.com", "password123", test_db)

        assert "dup@example.com" in str(exc_info.value)

    def test_register_user_race_on_unique_email(self, test_db, monkeypatch):
        """사전 확인을 통과한 중복 이메일도 unique 인덱스에서 걸러지는지 테스트"""
        UserService.register_user("A", "race@example.com", "password123", test_db)
        # 다른 요청이 사전 확인과 커밋 사이에 같은 이메일을 저장한 상황
        monkeypatch.setattr(
            UserService,
            "_ensure_email_available",
            staticmethod(lambda email, db, exclude_id=None: None),
        )

        with pytest.raises(UserAlreadyExistsException):
            UserService.register_user("B", "race@example.com", "password123", test_db)

        # 롤백 후에도 세션을 계속 사용할 수 있어야 함
        assert test_db.query(User).filter(User.email == "race@example.com").count() == 1

    def test_register_admin(self, test_db):
        """관리자 계정 생성 테스트"""
        user = UserService.register_user(
            "Admin", "root@example.com", "password123", test_db, is_admin=True
        )

        assert user.is_admin is True


class TestAuthenticateUser:
    """로그인 인증 테스트 클래스"""

    def test_authenticate_user_success(self, test_db, normal_user):
        """로그인 성공 테스트"""
        user = UserService.authenticate_user("U@example.com", "userpass123", test_db)

        assert user.id == normal_user.id

    def test_authenticate_user_wrong_password(self, test_db, normal_user):
        """잘못된 비밀번호로 로그인 실패 테스트"""
        with pytest.raises(InvalidCredentialsException) as exc_info:
            UserService.authenticate_user("u@example.com", "wrong456", test_db)

        assert str(exc_info.value) == "Invalid email or password"

    def test_authenticate_user_nonexistent(self, test_db):
        """존재하지 않는 사용자 로그인 실패 테스트"""
        with pytest.raises(InvalidCredentialsException):
            UserService.authenticate_user("nobody@example.com", "anypassword", test_db)


class TestGetCurrentUser:
    """토큰으로 사용자 조회 테스트 클래스"""

    def test_get_current_user_success(self, test_db, settings, normal_user):
        """유효한 토큰으로 사용자 조회 성공 테스트"""
        token = create_access_token(normal_user.id, settings)

        current_user = UserService.get_current_user(token, test_db, settings)

        assert current_user.id == normal_user.id

    def test_get_current_user_invalid_token(self, test_db, settings):
        """잘못된 토큰으로 조회 실패 테스트"""
        with pytest.raises(InvalidCredentialsException) as exc_info:
            UserService.get_current_user("invalid.token.string", test_db, settings)

        assert "invalid" in str(exc_info.value).lower()

    def test_get_current_user_expired_token(self, test_db, settings, normal_user):
        """만료된 토큰으로 조회 실패 테스트"""
        now = datetime.now(timezone.utc)
        expired_token = jwt.encode(
            {
                "sub": normal_user.id,
                "exp": now - timedelta(minutes=1),
                "iat": now - timedelta(minutes=31),
            },
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(InvalidCredentialsException) as exc_info:
            UserService.get_current_user(expired_token, test_db, settings)

        assert "expired" in str(exc_info.value).lower()

    def test_get_current_user_deleted_user(self, test_db, settings):
        """토큰은 유효하지만 사용자가 없는 경우 테스트"""
        token = create_access_token("ghost", settings)

        with pytest.raises(InvalidCredentialsException):
            UserService.get_current_user(token, test_db, settings)


class TestManageUsers:
    """사용자 관리 테스트 클래스"""

    def test_list_and_get_users(self, test_db, admin_user, normal_user):
        """사용자 목록과 단건 조회 테스트"""
        users = UserService.list_users(test_db)

        assert {u.id for u in users} == {admin_user.id, normal_user.id}
        assert UserService.get_user(normal_user.id, test_db).email == "u@example.com"

    def test_get_user_not_found(self, test_db):
        """없는 사용자 조회 시 예외 테스트"""
        with pytest.raises(UserNotFoundException) as exc_info:
            UserService.get_user("missing", test_db)

        assert str(exc_info.value) == "User not found"

    def test_update_profile_is_sparse(self, test_db, normal_user):
        """프로필 수정은 보낸 값만 바꾸는지 테스트"""
        user = UserService.update_profile(normal_user, test_db, password="newpass123")

        assert user.name == "User U"
        assert user.email == "u@example.com"
        assert verify_password("newpass123", user.hashed_password) is True

    def test_update_profile_email_taken(self, test_db, normal_user, other_user):
        """다른 사용자의 이메일로 변경 시 예외 테스트"""
        with pytest.raises(UserAlreadyExistsException):
            UserService.update_profile(normal_user, test_db, email="v@example.com")

    def test_update_user_promotes_admin(self, test_db, normal_user):
        """관리자가 사용자 권한을 변경하는 테스트"""
        user = UserService.update_user(normal_user.id, test_db, is_admin=True)

        assert user.is_admin is True
        assert user.name == "User U"

    def test_delete_user(self, test_db, normal_user):
        """일반 사용자 삭제 테스트"""
        user_id = normal_user.id

        UserService.delete_user(user_id, test_db)

        assert test_db.get(User, user_id) is None

    def test_delete_admin_rejected(self, test_db, admin_user):
        """관리자 계정 삭제 거부 테스트"""
        with pytest.raises(AdminDeletionException):
            UserService.delete_user(admin_user.id, test_db)

#!/usr/bin/env python3
"""
관리자 계정 생성 스크립트

상품 등록/수정/삭제와 사용자 관리에 필요한 관리자 계정을
데이터베이스에 직접 생성합니다.

Usage:
    python scripts/create_admin.py --name "Admin" --email admin@example.com --password secret123
"""

import argparse
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.exceptions import UserAlreadyExistsException
from app.db.database import Base, SessionLocal, engine
from app.services.user_service import UserService


def main():
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--email", required=True, help="Login e-mail")
    parser.add_argument("--password", required=True, help="Password (6+ chars)")

    args = parser.parse_args()

    if len(args.password) < 6:
        print("❌ Password must be at least 6 characters")
        sys.exit(1)

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        user = UserService.register_user(
            name=args.name,
            email=args.email,
            password=args.password,
            db=db,
            is_admin=True,
        )
    except UserAlreadyExistsException as e:
        print(f"❌ {e}")
        sys.exit(1)
    finally:
        db.close()

    print(f"✅ Admin created: {user.email} (ID: {user.id})")


if __name__ == "__main__":
    main()

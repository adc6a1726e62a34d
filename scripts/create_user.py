from pydantic import ValidationError

from shelflife.core.errors import ShelfLifeError
from shelflife.database import SessionLocal
from shelflife.schemas.user import UserRegistrationRequest
from shelflife.services.auth import register

import sys


def create_user(username: str, email: str, password: str, display_name: str = None) -> int:
    try:
        data = UserRegistrationRequest(
            username=username,
            email=email,
            password=password,
            display_name=display_name,
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"]) or "input"
            print(f"[FAIL] {field}: {err['msg']}")
        return 1

    db = SessionLocal()
    try:
        try:
            profile = register(db, data)
        except ShelfLifeError as e:
            print(f"[FAIL] {e.message}")
            return 1
        print(f"[OK] Created user id={profile.id} username={profile.username}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 4:
        print("Usage: python scripts/create_user.py <username> <email> <password> [display name]")
        sys.exit(1)
    username, email, password = sys.argv[1:4]
    display_name = sys.argv[4] if len(sys.argv) > 4 else None
    sys.exit(create_user(username, email, password, display_name))

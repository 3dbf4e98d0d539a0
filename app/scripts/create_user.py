"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AppError
from app.schemas.auth import SignupRequest
from app.services.auth import signup_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Taskboard user from the command line.")
    parser.add_argument("username", help="Username (3-255 chars)")
    parser.add_argument("email", help="Email address used to log in")
    parser.add_argument("password", help="Password (8-128 chars, at most 72 bytes)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    try:
        body = SignupRequest(username=args.username, email=args.email, password=args.password)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"{field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        created = signup_user(db, body, get_settings(), role=args.role)
        print(f"Created user '{created.username}' with role '{created.role}'.")
        return 0
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

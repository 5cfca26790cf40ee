"""
Create a user (e.g. the first admin). Run from project root:
  python -m videobelajar.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m videobelajar.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import sys

from pydantic import ValidationError

from videobelajar.core.database import SessionLocal
from videobelajar.core.logging_config import configure_logging
from videobelajar.schemas.user import UserCreate
from videobelajar.services.errors import ServiceError
from videobelajar.services.users import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a VideoBelajar user account.")
    parser.add_argument("name", help="Display name (at least 2 chars)")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help="Password (at least 6 chars)")
    parser.add_argument("role", nargs="?", default="student", choices=["admin", "user", "student"])
    parser.add_argument("--phone", default=None, help="Indonesian mobile number")
    args = parser.parse_args(argv)

    configure_logging()

    try:
        body = UserCreate(
            name=args.name,
            email=args.email,
            password=args.password,
            role=args.role,
            phone=args.phone,
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{err['loc'][0]}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = create_user(db, body)
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{body.email}' (id {user.id}) with role '{body.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

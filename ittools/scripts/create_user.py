"""
Create a user (e.g. the first admin). Run from project root:
  python -m ittools.scripts.create_user USERNAME PASSWORD [--admin] [--premium]
Example:
  python -m ittools.scripts.create_user admin your-secure-password --admin
"""
import argparse
import sys

from ittools.core.database import SessionLocal
from ittools.core.errors import ConflictError
from ittools.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, USERNAME_MAX_LEN
from ittools.services.users import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an IT Tools user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--admin", action="store_true", help="Grant admin rights")
    parser.add_argument("--premium", action="store_true", help="Grant premium access")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        create_user(db, username, args.password, is_premium=args.premium, is_admin=args.admin)
    except ConflictError:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    flags = [name for name, on in (("admin", args.admin), ("premium", args.premium)) if on]
    print(f"Created user '{username}'" + (f" ({', '.join(flags)})." if flags else "."))
    return 0


if __name__ == "__main__":
    sys.exit(main())

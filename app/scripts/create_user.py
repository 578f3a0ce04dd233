"""
Create an account from the command line (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.config import get_auth_config
from app.core.database import session_scope
from app.core.errors import AppError
from app.core.roles import ALLOWED_ROLES
from app.services.accounts import create_user_as_admin
from app.services.user_store import UserStore


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a user account.")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="user", choices=ALLOWED_ROLES)
    parser.add_argument("--full-name", default=None, help="Display name")
    parser.add_argument("--plan", default=None, help="Plan label (default: free)")
    args = parser.parse_args()

    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    try:
        with session_scope() as db:
            created = create_user_as_admin(
                UserStore(db),
                get_auth_config(),
                email=args.email,
                full_name=args.full_name,
                plan=args.plan,
                role=args.role,
                password=args.password,
            )
            print(f"Created user '{created.user.email}' with role '{created.user.role}'.")
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

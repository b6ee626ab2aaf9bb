"""Create an admin user, or promote an existing user to admin.

Usage:
    python -m scripts.create_admin <email> <username> [password]
If the email is already registered, that user is promoted and the password
is left unchanged. If password is omitted for a new user, a random one is printed.
"""

import asyncio
import secrets
import sys

from photofeed.domain.enums import UserRole
from photofeed.infrastructure.persistence import database
from photofeed.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_admin <email> <username> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1]
    username = sys.argv[2]
    password = sys.argv[3] if len(sys.argv) > 3 else None

    database.ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            existing = await user_repo.get_model_by_email(email)
            if existing:
                await user_repo.set_role(existing.id, UserRole.ADMIN)
                print(f"Promoted {existing.username} ({existing.id}) to admin")
            else:
                password = password or secrets.token_urlsafe(12)
                user = await user_repo.create_user(
                    email=email,
                    username=username,
                    password=password,
                    role=UserRole.ADMIN,
                )
                print(f"Created admin: {user.id} ({user.username})")
                print(f"Password: {password}")

    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())

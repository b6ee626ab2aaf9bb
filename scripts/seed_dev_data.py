"""Seed a local database with users, posts, follows, likes and comments.

Usage:
    python -m scripts.seed_dev_data [users] [posts_per_user]

Defaults: 8 users, 6 posts each. Every seeded user has password
"password123" and email user<n>@example.com. Image URLs point at
picsum.photos; nothing is uploaded. Run against an empty database
(alembic upgrade head first).
"""

import asyncio
import random
import sys

from photofeed.application.dtos.post import CaptionCreate, PostCreate, PostImageCreate
from photofeed.domain.enums import ReportReason
from photofeed.infrastructure.persistence import database
from photofeed.infrastructure.persistence.repositories import (
    CommentRepository,
    FollowRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)

SEED_PASSWORD = "password123"
CAPTIONS = [
    "Golden hour",
    "Weekend hike",
    "Coffee first",
    "City lights",
    "New recipe worked out",
    "Throwback",
]
COMMENTS = ["Love this!", "Where is this?", "Great shot", "So good", "Wow"]


def _post_data(rng: random.Random, seed: str) -> PostCreate:
    image_count = rng.randint(1, 4)
    return PostCreate(
        images=tuple(
            PostImageCreate(
                image_url=f"https://picsum.photos/seed/{seed}-{i}/1080/1080",
                original_file_name=f"{seed}-{i}.jpg",
                mime_type="image/jpeg",
            )
            for i in range(image_count)
        ),
        caption=CaptionCreate(
            text=rng.choice(CAPTIONS),
            is_bold=rng.random() < 0.2,
            is_italic=rng.random() < 0.2,
        ),
    )


async def seed(user_count: int, posts_per_user: int) -> None:
    rng = random.Random(42)
    database.ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            users = UserRepository(session)
            posts = PostRepository(session)
            follows = FollowRepository(session)
            likes = LikeRepository(session)
            comments = CommentRepository(session)
            reports = ReportRepository(session)

            created_users = [
                await users.create_user(
                    email=f"user{n}@example.com",
                    username=f"user{n}",
                    password=SEED_PASSWORD,
                )
                for n in range(1, user_count + 1)
            ]
            post_ids: list[str] = []
            for user in created_users:
                for n in range(posts_per_user):
                    post = await posts.create_post(
                        user.id, _post_data(rng, f"{user.username}-{n}")
                    )
                    post_ids.append(post.id)

            for user in created_users:
                others = [u for u in created_users if u.id != user.id]
                for target in rng.sample(others, k=min(len(others), 3)):
                    if not await follows.exists(user.id, target.id):
                        await follows.create_follow(user.id, target.id)
                for post_id in rng.sample(post_ids, k=min(len(post_ids), 5)):
                    await likes.create_like(user.id, post_id)
                for post_id in rng.sample(post_ids, k=min(len(post_ids), 2)):
                    await comments.create_comment(post_id, user.id, rng.choice(COMMENTS))

            if len(created_users) > 1 and post_ids:
                await reports.create_report(
                    created_users[0].id, post_ids[-1], ReportReason.SPAM
                )

    await database.dispose_engine()
    print(
        f"Seeded {user_count} users and {user_count * posts_per_user} posts "
        f"(password: {SEED_PASSWORD})"
    )


def main() -> None:
    user_count = int(sys.argv[1]) if len(sys.argv) > 1 else 8
    posts_per_user = int(sys.argv[2]) if len(sys.argv) > 2 else 6
    asyncio.run(seed(user_count, posts_per_user))


if __name__ == "__main__":
    main()

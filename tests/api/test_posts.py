"""Post endpoints: feed, create, get, like, comments and report."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

from photofeed.domain.enums import PostState

T0 = datetime(2026, 1, 1, 9, 0, 0, tzinfo=UTC)


@pytest.fixture
async def viewer(make_user):
    return await make_user("viewer")


@pytest.fixture
async def author(make_user):
    return await make_user("author")


async def test_feed_pages_with_camel_case_envelope(
    client: AsyncClient, viewer, author, make_post, auth_headers
) -> None:
    for i in range(3):
        await make_post(author.id, created_at=T0 + timedelta(seconds=i))
    first = await client.get("/api/v1/posts?limit=2", headers=auth_headers(viewer))
    assert first.status_code == 200
    body = first.json()
    assert set(body) == {"posts", "hasMore", "nextCursor"}
    assert body["hasMore"] is True
    post = body["posts"][0]
    for key in ("id", "author", "images", "caption", "likeCount", "isLikedByMe",
                "commentCount", "createdAt"):
        assert key in post
    assert post["author"] == {"id": author.id, "username": "author", "avatarUrl": None}
    assert post["images"][0]["imageUrl"].startswith("https://")

    second = await client.get(
        "/api/v1/posts",
        params={"limit": 2, "cursor": body["nextCursor"]},
        headers=auth_headers(viewer),
    )
    assert second.status_code == 200
    assert len(second.json()["posts"]) == 1
    assert second.json()["hasMore"] is False
    assert second.json()["nextCursor"] is None


@pytest.mark.parametrize("limit", [0, 51])
async def test_feed_limit_out_of_range_returns_400(
    client: AsyncClient, viewer, auth_headers, limit
) -> None:
    response = await client.get(f"/api/v1/posts?limit={limit}", headers=auth_headers(viewer))
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "limit"


async def test_feed_non_integer_limit_returns_422(
    client: AsyncClient, viewer, auth_headers
) -> None:
    response = await client.get("/api/v1/posts?limit=ten", headers=auth_headers(viewer))
    assert response.status_code == 422


async def test_feed_bad_cursor_returns_400(client: AsyncClient, viewer, auth_headers) -> None:
    response = await client.get(
        "/api/v1/posts", params={"cursor": "last-tuesday"}, headers=auth_headers(viewer)
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "INVALID_CURSOR"
    assert body["details"]["field"] == "cursor"


async def test_create_and_get_post(client: AsyncClient, author, auth_headers) -> None:
    response = await client.post(
        "/api/v1/posts",
        json={
            "images": [
                {"imageUrl": "https://cdn.example.com/1.jpg", "mimeType": "image/jpeg"},
                {"imageUrl": "https://cdn.example.com/2.jpg"},
            ],
            "caption": {"text": "first light", "isItalic": True},
        },
        headers=auth_headers(author),
    )
    assert response.status_code == 201
    created = response.json()
    assert [img["orderIndex"] for img in created["images"]] == [0, 1]
    assert created["caption"]["isItalic"] is True
    assert created["likeCount"] == 0

    fetched = await client.get(f"/api/v1/posts/{created['id']}", headers=auth_headers(author))
    assert fetched.status_code == 200
    assert fetched.json()["id"] == created["id"]


async def test_create_post_without_images_returns_400(
    client: AsyncClient, author, auth_headers
) -> None:
    response = await client.post(
        "/api/v1/posts", json={"images": []}, headers=auth_headers(author)
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "images"


async def test_create_post_with_ten_images_returns_400(
    client: AsyncClient, author, auth_headers
) -> None:
    images = [{"imageUrl": f"https://cdn.example.com/{i}.jpg"} for i in range(10)]
    response = await client.post(
        "/api/v1/posts", json={"images": images}, headers=auth_headers(author)
    )
    assert response.status_code == 400


async def test_get_missing_or_deleted_post_returns_404(
    client: AsyncClient, author, make_post, auth_headers
) -> None:
    deleted = await make_post(author.id, state=PostState.DELETED)
    for post_id in ("does-not-exist", deleted):
        response = await client.get(f"/api/v1/posts/{post_id}", headers=auth_headers(author))
        assert response.status_code == 404
        assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_like_toggle(client: AsyncClient, viewer, author, make_post, auth_headers) -> None:
    post_id = await make_post(author.id)
    url = f"/api/v1/posts/{post_id}/like"
    liked = await client.post(url, headers=auth_headers(viewer))
    assert liked.status_code == 200
    assert liked.json() == {"liked": True, "likeCount": 1}

    feed = await client.get("/api/v1/posts", headers=auth_headers(viewer))
    assert feed.json()["posts"][0]["isLikedByMe"] is True
    other_view = await client.get("/api/v1/posts", headers=auth_headers(author))
    assert other_view.json()["posts"][0]["isLikedByMe"] is False
    assert other_view.json()["posts"][0]["likeCount"] == 1

    unliked = await client.post(url, headers=auth_headers(viewer))
    assert unliked.json() == {"liked": False, "likeCount": 0}


async def test_like_missing_post_returns_404(client: AsyncClient, viewer, auth_headers) -> None:
    response = await client.post("/api/v1/posts/nope/like", headers=auth_headers(viewer))
    assert response.status_code == 404


async def test_comments_create_list_delete(
    client: AsyncClient, viewer, author, make_post, auth_headers
) -> None:
    post_id = await make_post(author.id)
    created = await client.post(
        f"/api/v1/posts/{post_id}/comments",
        json={"text": "  lovely  "},
        headers=auth_headers(viewer),
    )
    assert created.status_code == 201
    comment = created.json()
    assert comment["text"] == "lovely"
    assert comment["author"]["username"] == "viewer"

    listing = await client.get(
        f"/api/v1/posts/{post_id}/comments", headers=auth_headers(author)
    )
    assert listing.status_code == 200
    body = listing.json()
    assert set(body) == {"comments", "hasMore", "nextCursor"}
    assert [c["id"] for c in body["comments"]] == [comment["id"]]

    forbidden = await client.delete(
        f"/api/v1/comments/{comment['id']}", headers=auth_headers(author)
    )
    assert forbidden.status_code == 403

    deleted = await client.delete(
        f"/api/v1/comments/{comment['id']}", headers=auth_headers(viewer)
    )
    assert deleted.status_code == 204
    gone = await client.delete(
        f"/api/v1/comments/{comment['id']}", headers=auth_headers(viewer)
    )
    assert gone.status_code == 404


async def test_blank_comment_returns_400(
    client: AsyncClient, viewer, author, make_post, auth_headers
) -> None:
    post_id = await make_post(author.id)
    response = await client.post(
        f"/api/v1/posts/{post_id}/comments", json={"text": "   "}, headers=auth_headers(viewer)
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "text"


async def test_comments_of_unknown_post_returns_404(
    client: AsyncClient, viewer, auth_headers
) -> None:
    response = await client.get("/api/v1/posts/nope/comments", headers=auth_headers(viewer))
    assert response.status_code == 404


async def test_report_hides_post_from_reporter_only(
    client: AsyncClient, viewer, author, make_user, make_post, auth_headers
) -> None:
    bystander = await make_user("bystander")
    post_id = await make_post(author.id)
    reported = await client.post(
        f"/api/v1/posts/{post_id}/report",
        json={"reason": "spam"},
        headers=auth_headers(viewer),
    )
    assert reported.status_code == 201
    assert reported.json()["postId"] == post_id
    assert reported.json()["reason"] == "spam"

    again = await client.post(
        f"/api/v1/posts/{post_id}/report",
        json={"reason": "hate_speech"},
        headers=auth_headers(viewer),
    )
    assert again.status_code == 409

    reporter_feed = await client.get("/api/v1/posts", headers=auth_headers(viewer))
    assert reporter_feed.json()["posts"] == []
    bystander_feed = await client.get("/api/v1/posts", headers=auth_headers(bystander))
    assert [p["id"] for p in bystander_feed.json()["posts"]] == [post_id]


async def test_report_invalid_reason_returns_422(
    client: AsyncClient, viewer, author, make_post, auth_headers
) -> None:
    post_id = await make_post(author.id)
    response = await client.post(
        f"/api/v1/posts/{post_id}/report", json={"reason": "boring"}, headers=auth_headers(viewer)
    )
    assert response.status_code == 422


async def test_reporter_can_still_open_reported_post(
    client: AsyncClient, viewer, author, make_post, auth_headers
) -> None:
    post_id = await make_post(author.id)
    await client.post(
        f"/api/v1/posts/{post_id}/report", json={"reason": "spam"}, headers=auth_headers(viewer)
    )
    response = await client.get(f"/api/v1/posts/{post_id}", headers=auth_headers(viewer))
    assert response.status_code == 200
    assert response.json()["id"] == post_id


async def test_cursor_pasted_into_url_unencoded(
    client: AsyncClient, viewer, author, make_post, auth_headers
) -> None:
    for i in range(3):
        await make_post(author.id, created_at=T0 + timedelta(seconds=i))
    first = (await client.get("/api/v1/posts?limit=2", headers=auth_headers(viewer))).json()
    cursor = first["nextCursor"]
    assert cursor.endswith("Z")
    second = await client.get(
        f"/api/v1/posts?limit=2&cursor={cursor}", headers=auth_headers(viewer)
    )
    assert second.status_code == 200
    assert len(second.json()["posts"]) == 1

"""SQL rendering of listing requests.

build_listing_statement is the only place listing queries get their
cursor predicate, ordering and limit + 1 fetch; apply_visibility turns a
VisibilityPolicy into WHERE clauses on a post statement.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import ColumnElement, Select, select

from photofeed.application.listing.pagination import PageRequest
from photofeed.application.listing.visibility import VisibilityPolicy
from photofeed.domain.enums import PostState
from photofeed.infrastructure.persistence.models import Post, Report


@dataclass(frozen=True)
class ListingSort:
    """Columns ordering a listing: creation time, then id as tie-breaker."""

    created_at: Any
    id: Any


@dataclass(frozen=True)
class ListingParams:
    """Everything that shapes one listing query, passed explicitly."""

    sort: ListingSort
    limit: int
    cursor: datetime | None = None
    filters: tuple[ColumnElement[bool], ...] = ()

    @classmethod
    def for_page(
        cls,
        page: PageRequest,
        sort: ListingSort,
        *filters: ColumnElement[bool],
    ) -> ListingParams:
        return cls(sort=sort, limit=page.limit, cursor=page.cursor, filters=filters)


def build_listing_statement(base: Select, params: ListingParams) -> Select:
    """Add filters, the cursor bound, DESC ordering and LIMIT limit + 1 to base."""
    stmt = base
    if params.filters:
        stmt = stmt.where(*params.filters)
    if params.cursor is not None:
        stmt = stmt.where(params.sort.created_at < params.cursor)
    return stmt.order_by(
        params.sort.created_at.desc(),
        params.sort.id.desc(),
    ).limit(params.limit + 1)


def visibility_clauses(
    policy: VisibilityPolicy, viewer_id: str
) -> tuple[ColumnElement[bool], ...]:
    """Return the WHERE clauses on Post that enforce policy for viewer_id."""
    clauses: list[ColumnElement[bool]] = []
    if policy.exclude_deleted:
        clauses.append(Post.state == PostState.ACTIVE)
    if policy.exclude_reported_by_viewer:
        reported = (
            select(Report.id)
            .where(Report.post_id == Post.id, Report.reporter_id == viewer_id)
            .exists()
        )
        clauses.append(~reported)
    return tuple(clauses)


def apply_visibility(stmt: Select, policy: VisibilityPolicy, viewer_id: str) -> Select:
    """Narrow a statement selecting Post to the rows visible to viewer_id."""
    clauses = visibility_clauses(policy, viewer_id)
    return stmt.where(*clauses) if clauses else stmt

"""Batch relationship resolver backed by the edge tables.

One query per requested kind for a whole page of subjects. The resolver
only reads; flags reflect the edge tables at query time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.domain.enums import CountKind, RelationKind
from photofeed.domain.exceptions import DataAccessException
from photofeed.infrastructure.persistence.models import Comment, Follow, PostLike
from photofeed.shared.telemetry import add_span_attributes, traced

logger = logging.getLogger(__name__)

# kind -> (subject column, viewer column) on the edge table
_RELATION_COLUMNS: dict[RelationKind, tuple[Any, Any]] = {
    RelationKind.IS_FOLLOWED_BY_ME: (Follow.following_id, Follow.follower_id),
    RelationKind.IS_FOLLOWING_ME: (Follow.follower_id, Follow.following_id),
    RelationKind.IS_LIKED_BY_ME: (PostLike.post_id, PostLike.user_id),
}

# kind -> grouping column whose rows are counted per subject
_COUNT_COLUMNS: dict[CountKind, Any] = {
    CountKind.LIKE_COUNT: PostLike.post_id,
    CountKind.COMMENT_COUNT: Comment.post_id,
}


def _distinct(ids: Sequence[str]) -> list[str]:
    """Drop duplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


class RelationshipResolver:
    """Resolve viewer flags and per-subject counts for a page of ids."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @traced("listing.resolve_relations")
    async def resolve(
        self,
        viewer_id: str,
        subject_ids: Sequence[str],
        kinds: Sequence[RelationKind],
    ) -> dict[str, dict[RelationKind, bool]]:
        """Return {subject_id: {kind: bool}} for each distinct subject id.

        Raises:
            DataAccessException: If any batch query fails.
        """
        ids = _distinct(subject_ids)
        if not ids or not kinds:
            return {}
        add_span_attributes(subject_count=len(ids))
        resolved: dict[str, dict[RelationKind, bool]] = {sid: {} for sid in ids}
        for kind in dict.fromkeys(kinds):
            subject_col, viewer_col = _RELATION_COLUMNS[kind]
            stmt = select(subject_col).where(viewer_col == viewer_id, subject_col.in_(ids))
            matched = await self._fetch_ids(stmt, kind.value)
            for sid in ids:
                resolved[sid][kind] = sid in matched
        return resolved

    @traced("listing.count_relations")
    async def count(
        self,
        subject_ids: Sequence[str],
        kinds: Sequence[CountKind],
    ) -> dict[str, dict[CountKind, int]]:
        """Return {subject_id: {kind: count}}; ids with no rows get 0.

        Raises:
            DataAccessException: If any batch query fails.
        """
        ids = _distinct(subject_ids)
        if not ids or not kinds:
            return {}
        counted: dict[str, dict[CountKind, int]] = {sid: {} for sid in ids}
        for kind in dict.fromkeys(kinds):
            column = _COUNT_COLUMNS[kind]
            stmt = (
                select(column, func.count())
                .where(column.in_(ids))
                .group_by(column)
            )
            try:
                result = await self.db.execute(stmt)
            except SQLAlchemyError as e:
                logger.error("Count query failed for %s: %s", kind.value, e)
                raise DataAccessException(kind.value, str(e)) from e
            totals = {row[0]: int(row[1]) for row in result.all()}
            for sid in ids:
                counted[sid][kind] = totals.get(sid, 0)
        return counted

    async def _fetch_ids(self, stmt: Any, operation: str) -> set[str]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Relation query failed for %s: %s", operation, e)
            raise DataAccessException(operation, str(e)) from e
        return set(result.scalars().all())

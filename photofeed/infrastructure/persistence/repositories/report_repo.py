"""Report repository. A report hides a post from its reporter's feed."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from photofeed.application.dtos.report import ReportDetail, ReportResult
from photofeed.domain.enums import ReportReason
from photofeed.domain.exceptions import ConflictException
from photofeed.infrastructure.persistence.models import Report
from photofeed.infrastructure.persistence.repositories.base import BaseRepository
from photofeed.infrastructure.persistence.repositories.mappers import user_to_author
from photofeed.shared.utils.datetime import ensure_utc


class ReportRepository(BaseRepository[Report]):
    """One report per (reporter, post)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Report)

    async def exists(self, reporter_id: str, post_id: str) -> bool:
        return (
            await self._count(Report.reporter_id == reporter_id, Report.post_id == post_id)
            > 0
        )

    async def create_report(
        self, reporter_id: str, post_id: str, reason: ReportReason
    ) -> ReportResult:
        """Create report; raise ConflictException on a second report of the same post."""
        try:
            report = await self.create(
                Report(reporter_id=reporter_id, post_id=post_id, reason=reason)
            )
        except IntegrityError:
            raise ConflictException(
                "Post already reported", reporter_id=reporter_id, post_id=post_id
            ) from None
        return ReportResult(
            id=report.id,
            post_id=report.post_id,
            reporter_id=report.reporter_id,
            reason=report.reason,
            created_at=ensure_utc(report.created_at),
        )

    async def list_for_posts(self, post_ids: Sequence[str]) -> dict[str, list[ReportDetail]]:
        """Reports on each post with their reporters, newest first, in one query.

        Every requested id gets a (possibly empty) list. No ids, no query.
        """
        ids = list(dict.fromkeys(post_ids))
        if not ids:
            return {}
        result = await self.db.execute(
            select(Report)
            .options(joinedload(Report.reporter))
            .where(Report.post_id.in_(ids))
            .order_by(Report.created_at.desc(), Report.id.desc())
        )
        grouped: dict[str, list[ReportDetail]] = {post_id: [] for post_id in ids}
        for report in result.scalars().all():
            grouped[report.post_id].append(
                ReportDetail(
                    id=report.id,
                    post_id=report.post_id,
                    reporter=user_to_author(report.reporter),
                    reason=report.reason,
                    created_at=ensure_utc(report.created_at),
                )
            )
        return grouped

    async def delete_for_post(self, post_id: str) -> int:
        result = await self.db.execute(
            delete(Report)
            .where(Report.post_id == post_id)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount

"""Report use case: a viewer reports a post, hiding it from their own feed."""

from __future__ import annotations

from photofeed.application.dtos.report import ReportResult
from photofeed.application.interfaces.repositories import IPostRepository, IReportRepository
from photofeed.application.use_cases.lookups import get_visible_post
from photofeed.domain.enums import ReportReason
from photofeed.domain.exceptions import ConflictException


class ReportService:
    def __init__(self, post_repo: IPostRepository, report_repo: IReportRepository) -> None:
        self.post_repo = post_repo
        self.report_repo = report_repo

    async def report_post(
        self, reporter_id: str, post_id: str, reason: ReportReason
    ) -> ReportResult:
        """File a report. One report per (reporter, post)."""
        await get_visible_post(self.post_repo, post_id)
        if await self.report_repo.exists(reporter_id, post_id):
            raise ConflictException(
                "Post already reported", reporter_id=reporter_id, post_id=post_id
            )
        return await self.report_repo.create_report(reporter_id, post_id, reason)

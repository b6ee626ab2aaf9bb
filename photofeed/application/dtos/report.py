"""DTOs for reporting and moderation."""

from dataclasses import dataclass
from datetime import datetime

from photofeed.application.dtos.user import AuthorSummary
from photofeed.domain.enums import PostState, ReportReason


@dataclass(frozen=True)
class ReportResult:
    id: str
    post_id: str
    reporter_id: str
    reason: ReportReason
    created_at: datetime


@dataclass(frozen=True)
class DismissReportsResult:
    post_id: str
    dismissed: int


@dataclass(frozen=True)
class ReportDetail:
    """A report as shown in the moderation queue, with who filed it."""

    id: str
    post_id: str
    reporter: AuthorSummary
    reason: ReportReason
    created_at: datetime


@dataclass(frozen=True)
class ModerationPostItem:
    """Moderation queue row: post summary plus every report filed on it."""

    id: str
    author: AuthorSummary
    first_image_url: str | None
    state: PostState
    created_at: datetime
    reports: tuple[ReportDetail, ...] = ()

    @property
    def report_count(self) -> int:
        return len(self.reports)

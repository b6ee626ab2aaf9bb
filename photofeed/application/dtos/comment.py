"""DTOs for comment use cases."""

from dataclasses import dataclass
from datetime import datetime

from photofeed.application.dtos.user import AuthorSummary


@dataclass(frozen=True)
class CommentResult:
    """Comment read-model. Also the comment listing item (no enrichment)."""

    id: str
    post_id: str
    text: str
    author: AuthorSummary
    created_at: datetime

"""Comment ORM model."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photofeed.infrastructure.persistence.database import Base
from photofeed.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin
from photofeed.infrastructure.persistence.models.user import User


class Comment(CuidMixin, CreatedAtMixin, Base):
    """Comment on a post. Table: comment."""

    __tablename__ = "comment"

    post_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)

    author: Mapped[User] = relationship(User, lazy="raise")

    __table_args__ = (
        Index("ix_comment_post_created_at_id", "post_id", "created_at", "id"),
    )

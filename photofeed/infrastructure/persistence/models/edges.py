"""Relationship edge ORM models: follow, post_like, report.

Each edge is an ordered pair with at most one row per pair.
"""

from sqlalchemy import CheckConstraint, Enum, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photofeed.domain.enums import ReportReason
from photofeed.infrastructure.persistence.database import Base
from photofeed.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin
from photofeed.infrastructure.persistence.models.user import User


class Follow(CuidMixin, CreatedAtMixin, Base):
    """follower_id follows following_id. Table: follow."""

    __tablename__ = "follow"

    follower_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    following_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    follower: Mapped[User] = relationship(User, foreign_keys=[follower_id], lazy="raise")
    following: Mapped[User] = relationship(User, foreign_keys=[following_id], lazy="raise")

    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follow_pair"),
        CheckConstraint("follower_id <> following_id", name="ck_follow_not_self"),
        Index("ix_follow_following_created_at", "following_id", "created_at"),
        Index("ix_follow_follower_created_at", "follower_id", "created_at"),
    )


class PostLike(CuidMixin, CreatedAtMixin, Base):
    """user_id likes post_id. Table: post_like."""

    __tablename__ = "post_like"

    user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    post_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_post_like_pair"),
    )


class Report(CuidMixin, CreatedAtMixin, Base):
    """reporter_id reported post_id. Table: report.

    A report hides the post from the reporter's feed only.
    """

    __tablename__ = "report"

    reporter_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    post_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reason: Mapped[ReportReason] = mapped_column(
        Enum(
            ReportReason,
            native_enum=False,
            length=32,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )

    reporter: Mapped[User] = relationship(User, lazy="raise")

    __table_args__ = (
        UniqueConstraint("reporter_id", "post_id", name="uq_report_pair"),
        Index("ix_report_post_created_at", "post_id", "created_at"),
    )

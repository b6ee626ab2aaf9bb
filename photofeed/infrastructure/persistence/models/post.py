"""Post ORM models: post, post_image, post_caption."""

from sqlalchemy import Boolean, Enum, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photofeed.domain.enums import PostState
from photofeed.infrastructure.persistence.database import Base
from photofeed.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin
from photofeed.infrastructure.persistence.models.user import User


class Post(CuidMixin, TimestampMixin, Base):
    """Post. Table: post.

    state is the tagged lifecycle (active | deleted); rows are never
    hard-deleted by moderation. Relationships raise on lazy load; queries
    must request them with loader options.
    """

    __tablename__ = "post"

    user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    state: Mapped[PostState] = mapped_column(
        Enum(
            PostState,
            native_enum=False,
            length=16,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=PostState.ACTIVE,
        server_default=PostState.ACTIVE.value,
        index=True,
    )

    author: Mapped[User] = relationship(User, lazy="raise")
    images: Mapped[list["PostImage"]] = relationship(
        "PostImage",
        order_by="PostImage.order_index",
        cascade="all, delete-orphan",
        lazy="raise",
    )
    captions: Mapped[list["PostCaption"]] = relationship(
        "PostCaption",
        order_by="PostCaption.order_index",
        cascade="all, delete-orphan",
        lazy="raise",
    )

    __table_args__ = (
        Index("ix_post_created_at_id", "created_at", "id"),
    )


class PostImage(CuidMixin, Base):
    """Image reference attached to a post (ordered). Table: post_image."""

    __tablename__ = "post_image"

    post_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url: Mapped[str] = mapped_column(String, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    original_file_name: Mapped[str | None] = mapped_column(String, nullable=True)
    mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint("post_id", "order_index", name="uq_post_image_post_order"),
    )


class PostCaption(CuidMixin, Base):
    """Styled caption text. The first by order_index is the post's caption."""

    __tablename__ = "post_caption"

    post_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_bold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_italic: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    font_size: Mapped[int] = mapped_column(Integer, nullable=False, default=14)

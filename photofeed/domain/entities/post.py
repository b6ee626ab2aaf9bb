"""Post domain entity.

Represents a post's lifecycle independent of persistence. Soft delete is a
tagged state with explicit transitions rather than a boolean flag.
"""

from dataclasses import dataclass

from photofeed.domain.enums import PostState
from photofeed.domain.exceptions import ValidationException


@dataclass
class PostEntity:
    """Domain entity for a post's moderation state.

    Validation runs on construction.
    """

    id: str
    author_id: str
    state: PostState = PostState.ACTIVE

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate post business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Post ID is required", field="id")
        if not self.author_id:
            raise ValidationException("Post must have an author", field="author_id")

    @property
    def is_deleted(self) -> bool:
        return self.state is PostState.DELETED

    def soft_delete(self) -> PostState:
        """Transition ACTIVE -> DELETED.

        Raises:
            ValidationException: If the post is already deleted.
        """
        if self.is_deleted:
            raise ValidationException("Post is already deleted", field="state")
        self.state = PostState.DELETED
        return self.state

    def restore(self) -> PostState:
        """Transition DELETED -> ACTIVE. Reports on the post are kept.

        Raises:
            ValidationException: If the post is not deleted.
        """
        if not self.is_deleted:
            raise ValidationException("Post is not deleted", field="state")
        self.state = PostState.ACTIVE
        return self.state

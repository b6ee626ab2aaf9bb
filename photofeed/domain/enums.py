"""Domain enumerations for the photofeed application.

Enums represent fixed sets of domain values (post state, roles, report
reasons) and the relation/count kinds resolved for listings.
"""

from enum import Enum


class PostState(str, Enum):
    """Post lifecycle state.

    Only ACTIVE posts appear in listings. Transitions live on PostEntity.
    """

    ACTIVE = "active"
    DELETED = "deleted"


class UserRole(str, Enum):
    """Account role. ADMIN may moderate posts and suspend accounts."""

    USER = "user"
    ADMIN = "admin"


class ReportReason(str, Enum):
    """Reason given when a viewer reports a post."""

    SPAM = "spam"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    HATE_SPEECH = "hate_speech"


class RelationKind(str, Enum):
    """Boolean relationship between the viewer and a listed subject."""

    IS_FOLLOWED_BY_ME = "is_followed_by_me"
    IS_FOLLOWING_ME = "is_following_me"
    IS_LIKED_BY_ME = "is_liked_by_me"


class CountKind(str, Enum):
    """Per-subject aggregate attached to listed posts."""

    LIKE_COUNT = "like_count"
    COMMENT_COUNT = "comment_count"


class ModerationPostFilter(str, Enum):
    """Which posts the admin moderation queue lists."""

    ALL = "all"
    REPORTED = "reported"
    DELETED = "deleted"


class ModerationUserFilter(str, Enum):
    """Which accounts the admin user list shows."""

    ALL = "all"
    SUSPENDED = "suspended"
    ACTIVE = "active"

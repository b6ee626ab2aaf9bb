"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from photofeed.domain.entities import PostEntity
from photofeed.domain.enums import (
    CountKind,
    ModerationPostFilter,
    ModerationUserFilter,
    PostState,
    RelationKind,
    ReportReason,
    UserRole,
)
from photofeed.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    DataAccessException,
    InvalidCursorException,
    PhotofeedException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserAlreadyExistsException,
    ValidationException,
)

__all__ = [
    # Entities
    "PostEntity",
    # Enums
    "CountKind",
    "ModerationPostFilter",
    "ModerationUserFilter",
    "PostState",
    "RelationKind",
    "ReportReason",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ConflictException",
    "DataAccessException",
    "InvalidCursorException",
    "PhotofeedException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UserAlreadyExistsException",
    "ValidationException",
]

"""Shared API schema base: camelCase JSON keys for every request and response."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases; snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AuthorResponse(CamelModel):
    id: str
    username: str
    avatar_url: str | None = None


class ErrorResponse(CamelModel):
    """Body of every domain error response."""

    error: str
    message: str
    details: dict = {}

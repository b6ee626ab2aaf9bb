"""Request-scoped context using contextvars.

Holds the current request id so log records emitted anywhere during a
request can carry it (see shared.telemetry.logging.RequestIdFilter).
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token:
    """Bind request_id to the current task; return the token for reset."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    return _request_id.get()

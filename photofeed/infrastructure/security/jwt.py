"""JWT access tokens for authentication.

Tokens carry sub (user id) and role. Only short-lived access tokens are
issued; there is no refresh or revocation flow.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from photofeed.core.config import get_settings
from photofeed.domain.enums import UserRole
from photofeed.shared.utils.datetime import utc_now

TOKEN_TYPE = "bearer"


def create_access_token(
    user_id: str,
    role: UserRole = UserRole.USER,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for user_id.

    Args:
        user_id: Subject claim.
        role: Role claim (informational; authorization re-reads the user).
        expires_delta: Optional TTL; else settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {
        "sub": user_id,
        "role": role.value,
        "type": "access",
        "exp": utc_now() + ttl,
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode an access token. Returns the payload.

    Raises:
        ValueError: If the token is invalid, expired, not an access token,
            or missing sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if payload.get("type") != "access":
        raise ValueError("Token is not an access token")
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload

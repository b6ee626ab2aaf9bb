"""Password hashing (bcrypt over a SHA-256 pre-hash).

bcrypt only reads the first 72 bytes of its input, so the password is
hashed with SHA-256 and base64-encoded first. Work factor comes from
settings.bcrypt_rounds.
"""

import base64
import hashlib

import bcrypt

from photofeed.core.config import get_settings


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Return a bcrypt hash string for password."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password; malformed hashes never match."""
    try:
        return bool(bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8")))
    except (ValueError, TypeError):
        return False

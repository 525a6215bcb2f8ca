"""Caller identity resolved from a bearer token.

Tokens are issued elsewhere; this module only verifies them. A missing,
malformed, expired, or badly signed token resolves to no caller at all, and
the absence is carried as ``None`` rather than folded into a flag.
"""

import os
from dataclasses import dataclass

import jwt

from ratings.utils.logging import current_environment, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Caller:
    """An authenticated user as asserted by a verified token."""

    id: str
    is_admin: bool = False


# Only these environments may run without JWT_SECRET
_DEV_ENVIRONMENTS = ("development", "test")
_DEV_SECRET = "dev-secret"


@dataclass(frozen=True)
class TokenSettings:
    secret: str | None
    algorithm: str = "HS256"

    @classmethod
    def from_env(cls) -> "TokenSettings":
        """Read JWT_SECRET and JWT_ALGORITHM.

        Without JWT_SECRET the secret is left unset outside development and
        test, and every token is then refused.
        """
        secret = os.getenv("JWT_SECRET")
        if not secret:
            if current_environment() in _DEV_ENVIRONMENTS:
                secret = _DEV_SECRET
            else:
                logger.error("jwt_secret_missing", environment=current_environment())
        return cls(secret=secret, algorithm=os.getenv("JWT_ALGORITHM", "HS256"))


_current_settings: TokenSettings | None = None


def get_token_settings() -> TokenSettings:
    """Return the active token settings. Defaults to the environment."""
    global _current_settings
    if _current_settings is None:
        _current_settings = TokenSettings.from_env()
    return _current_settings


def set_token_settings(settings: TokenSettings) -> None:
    """Override the active token settings (useful for tests)."""
    global _current_settings
    _current_settings = settings


def reset_token_settings() -> None:
    """Reset to settings read from the environment."""
    global _current_settings
    _current_settings = None


def resolve_caller(token: str | None, settings: TokenSettings | None = None) -> Caller | None:
    """Verify ``token`` and return the caller it names, or None."""
    if not token:
        return None

    settings = settings or get_token_settings()
    if not settings.secret:
        logger.warning("token_refused_without_secret")
        return None

    try:
        payload = jwt.decode(token, settings.secret, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        logger.info("token_expired")
        return None
    except jwt.PyJWTError as exc:
        logger.info("token_rejected", reason=str(exc))
        return None

    user_id = payload.get("id") or payload.get("_id")
    if not user_id:
        logger.info("token_without_subject")
        return None

    return Caller(id=str(user_id), is_admin=payload.get("isAdmin") is True)

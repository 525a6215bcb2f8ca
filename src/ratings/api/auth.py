"""FastAPI dependencies that resolve the caller from a bearer token."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ratings.exceptions import Unauthorized
from ratings.identity import Caller, resolve_caller

bearer = HTTPBearer(auto_error=False)


async def optional_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> Caller | None:
    """Return the caller if the token verifies, else None."""
    if credentials is None:
        return None
    return resolve_caller(credentials.credentials)


async def required_caller(caller: Caller | None = Depends(optional_caller)) -> Caller:
    """Return the caller or raise Unauthorized."""
    if caller is None:
        raise Unauthorized()
    return caller

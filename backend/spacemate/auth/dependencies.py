"""FastAPI authentication dependencies for route protection."""

from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from spacemate.auth.jwt import decode_token
from spacemate.errors import UnauthorizedError

# auto_error=False so a missing header is reported as 401, not 403
_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Verified caller identity supplied by the auth provider."""

    user_id: str
    email: str | None = None
    name: str | None = None


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> Identity:
    """Validate the Bearer token and return the caller's identity.

    Raises:
        UnauthorizedError: If the token is missing, invalid, expired, of the
            wrong type, or has no subject.
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError() from None

    # Only accept access tokens
    token_type: str | None = payload.get("type", "access")
    if token_type != "access":
        raise UnauthorizedError("Invalid token type")

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        raise UnauthorizedError()

    return Identity(user_id=sub, email=payload.get("email"), name=payload.get("name"))

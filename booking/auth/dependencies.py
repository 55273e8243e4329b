import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from booking.auth import jwt_handler
from booking.core.exceptions import AuthenticationRequired

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_owner(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """Resolve the opaque owner id from the bearer token's ``sub`` claim."""
    if credentials is None:
        raise AuthenticationRequired("Authentication required.")

    try:
        payload = jwt_handler.decode_access_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise AuthenticationRequired("Invalid token.") from exc

    owner_id = payload.get("sub")
    if not isinstance(owner_id, str) or not owner_id.strip():
        raise AuthenticationRequired("Invalid token subject.")
    return owner_id

"""Bearer token verification.

Tokens are issued by the identity provider and signed with the shared
``SECRET_KEY``. This service never issues tokens itself.
"""

import jwt
import structlog
from jwt import InvalidTokenError

from mindweave.config import get_settings

ALGORITHM = "HS256"

logger = structlog.get_logger(__name__)


def verify_access_token(token: str) -> int | None:
    """Verify an access token and return the user id (``sub``) if valid."""
    secret_key = get_settings().SECRET_KEY
    if not secret_key:
        logger.error("secret_key_not_configured")
        return None
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
        # Refresh tokens are only good for the identity provider's refresh endpoint
        if payload.get("type") == "refresh":
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None

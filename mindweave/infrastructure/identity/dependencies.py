"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from mindweave.core import container
from mindweave.database import DatabaseSession
from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.identity.entities.user import User
from mindweave.domain.identity.exceptions import UserNotFoundError
from mindweave.exceptions import CredentialsException
from mindweave.infrastructure.common.di import build_with_session
from mindweave.infrastructure.identity.services.token_service import verify_access_token

# Tokens are issued by the external identity provider
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


async def get_current_user_id(token: Annotated[str, Depends(oauth2_scheme)]) -> UserId:
    """
    Resolve the bearer token to a user id without touching the database.

    Raises:
        CredentialsException: If the token is missing or invalid
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException
    return UserId(user_id)


async def get_current_user(
    user_id: Annotated[UserId, Depends(get_current_user_id)], db: DatabaseSession
) -> User:
    """
    Get the current authenticated user from the access token.

    Raises:
        CredentialsException: If token is invalid or the user has no profile
    """
    use_case = build_with_session(container.get_user_by_id_use_case, db)

    try:
        return use_case.get_user(user_id.value)
    except UserNotFoundError:
        raise CredentialsException from None


CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentUserId = Annotated[UserId, Depends(get_current_user_id)]

"""FastAPI dependencies for resolving the calling user."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flashdeck.domain.common.value_objects import MAX_INTEGER_ID, UserId
from flashdeck.exceptions import CredentialsException
from flashdeck.infrastructure.identity.auth.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> UserId:
    """
    Resolve the caller's identity from the Authorization header.

    Args:
        credentials: Bearer credentials, None when the header is missing

    Returns:
        UserId of the caller

    Raises:
        CredentialsException: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise CredentialsException

    user_id = verify_access_token(credentials.credentials)
    if user_id is None or not 0 <= user_id <= MAX_INTEGER_ID:
        raise CredentialsException

    return UserId(user_id)


CurrentUserId = Annotated[UserId, Depends(get_current_user_id)]

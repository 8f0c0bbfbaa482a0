"""
Scribble Backend — Route Dependencies
======================================

What:  FastAPI dependencies shared by the route modules.
How:   The AuthService is built by create_app() and kept on `app.state.auth`,
       next to the Store (see scribble.store.get_store).
"""

from typing import Optional

from fastapi import Depends, Header
from starlette.requests import Request

from scribble.services.auth_service import AuthService, extract_bearer_token


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth


async def require_user_id(
    authorization: Optional[str] = Header(
        default=None,
        description="Session token, raw or as `Bearer <token>`",
    ),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    """
    Dependency for routes that need an authenticated user.

    Returns:
        The user id carried by the token

    Raises:
        AuthenticationError: No Authorization header (401)
        InvalidTokenError: Token fails verification (401)
    """
    token = extract_bearer_token(authorization)
    payload = auth.verify_token(token)
    return payload["id"]

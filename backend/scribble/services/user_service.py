"""
Scribble Backend — User Service
================================

What:  Signup and signin.
How:   Presence-checks the body, reads/writes the Store, and issues a session
       token through AuthService.
Who:   Called by the routes in routes/users.py.
"""

import logging
from typing import List, Optional

from scribble.exceptions import InvalidCredentialsError, ValidationError
from scribble.schemas.user import AuthResponse, SigninRequest, SignupRequest
from scribble.services.auth_service import AuthService
from scribble.store import Store

logger = logging.getLogger(__name__)


def _missing(**fields: Optional[str]) -> List[str]:
    """Names of fields that are absent or empty."""
    return [name for name, value in fields.items() if not value]


class UserService:
    """
    Account operations.

    Error Handling:
        Missing fields      → ValidationError (400)
        Email already taken → DuplicateEmailError (400), raised by the Store
        Wrong credentials   → InvalidCredentialsError (403)
    """

    def signup(self, store: Store, auth: AuthService, body: SignupRequest) -> AuthResponse:
        missing = _missing(email=body.email, password=body.password, name=body.name)
        if missing:
            raise ValidationError(
                message="Missing required fields",
                context={"missing": missing},
            )

        user = store.create_user(body.email, body.password, body.name)
        return AuthResponse(jwt=auth.issue_token(user.id), name=user.name)

    def signin(self, store: Store, auth: AuthService, body: SigninRequest) -> AuthResponse:
        missing = _missing(email=body.email, password=body.password)
        if missing:
            raise ValidationError(
                message="Missing email or password",
                context={"missing": missing},
            )

        user = store.find_user_by_credentials(body.email, body.password)
        if user is None:
            logger.warning("Signin rejected: invalid credentials")
            raise InvalidCredentialsError()

        logger.info("User signed in: %s", user.id)
        return AuthResponse(jwt=auth.issue_token(user.id), name=user.name)


user_service = UserService()

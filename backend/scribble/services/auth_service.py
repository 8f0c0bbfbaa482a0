"""
Scribble Backend — Session Token Service
=========================================

What:  Issues and verifies the signed session tokens returned by signup/signin.
How:   PyJWT, HMAC-signed with the server secret. Payload is `{"id": <user id>}`
       with no `exp` claim, so tokens never expire and are never refreshed.
Who:   Called by UserService after signup/signin and by the `require_user_id`
       route dependency guarding blog creation.

Token Flow:
    signup/signin ──▶ issue_token(user.id) ──▶ {"jwt": "..."} to client
    client ──▶ Authorization: Bearer <jwt> ──▶ extract_bearer_token ──▶ verify_token
"""

import logging
from typing import Dict, Optional

import jwt

from scribble.exceptions import AuthenticationError, InvalidTokenError

logger = logging.getLogger(__name__)

# Token hard-coded into an early frontend build. When the legacy shim is on it
# maps straight to the demo user without a signature check.
LEGACY_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJpZCI6InVzZXJfMiJ9"
    ".L_sf-j2uDKZ_17fzEjEeWPviif4rhubNvr6tJmGhQCw"
)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header value.

    Accepts both `Bearer <token>` and the bare token.

    Raises:
        AuthenticationError: Header missing or empty
    """
    if not authorization:
        raise AuthenticationError()
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip()
    return authorization.strip()


class AuthService:
    """
    Signs and verifies session tokens.

    Args:
        secret:          HMAC key shared by issue and verify
        algorithm:       HS256 unless configured otherwise
        legacy_user_id:  When set, LEGACY_TOKEN resolves to this user id
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        legacy_user_id: Optional[str] = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._legacy_user_id = legacy_user_id

    @property
    def has_secret(self) -> bool:
        return bool(self._secret)

    def issue_token(self, user_id: str) -> str:
        return jwt.encode({"id": user_id}, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> Dict[str, str]:
        """
        Validate a token and return its payload.

        Only the signature is checked; tokens carry no expiry.

        Returns:
            {"id": <user id>}

        Raises:
            InvalidTokenError: Bad signature, malformed token, or no `id` claim
        """
        if self._legacy_user_id is not None and token == LEGACY_TOKEN:
            logger.warning("Accepted legacy token for %s", self._legacy_user_id)
            return {"id": self._legacy_user_id}

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.InvalidTokenError as e:
            logger.warning("Token verification failed: %s", str(e))
            raise InvalidTokenError(context={"reason": str(e)})

        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            logger.warning("Token verification failed: payload has no user id")
            raise InvalidTokenError(context={"reason": "Token payload has no user id"})

        return {"id": user_id}

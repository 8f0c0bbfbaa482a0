"""
Scribble Backend — User Route Handlers
=======================================

What:  Signup and signin, each under its original and its /v1/user path.
Who:   Called by the frontend auth forms; the returned `jwt` is sent back on
       blog creation.
"""

import logging

from fastapi import APIRouter, Depends

from scribble.schemas.common import ErrorResponse
from scribble.schemas.user import AuthResponse, SigninRequest, SignupRequest
from scribble.routes.deps import get_auth_service
from scribble.services.auth_service import AuthService
from scribble.services.user_service import user_service
from scribble.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    responses={400: {"description": "Missing field or email already registered", "model": ErrorResponse}},
    summary="Create an account",
)
@router.post(
    "/v1/user/signup",
    response_model=AuthResponse,
    responses={400: {"description": "Missing field or email already registered", "model": ErrorResponse}},
    summary="Create an account (v1 path)",
)
async def signup(
    body: SignupRequest,
    store: Store = Depends(get_store),
    auth: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a user and return a session token with the display name."""
    return user_service.signup(store, auth, body)


@router.post(
    "/signin",
    response_model=AuthResponse,
    responses={
        400: {"description": "Missing email or password", "model": ErrorResponse},
        403: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Sign in",
)
@router.post(
    "/v1/user/signin",
    response_model=AuthResponse,
    responses={
        400: {"description": "Missing email or password", "model": ErrorResponse},
        403: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Sign in (v1 path)",
)
async def signin(
    body: SigninRequest,
    store: Store = Depends(get_store),
    auth: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange an exact email/password match for a session token."""
    return user_service.signin(store, auth, body)

"""
Scribble Backend — Health & Diagnostics Routes
===============================================

What:  Liveness endpoints and an opt-in debug snapshot of the store.
Who:   `/` and `/health` are for load balancers and uptime checks.
       `/debug` is for local development and is only mounted when
       `debug_endpoint_enabled` is set.
"""

import logging
import time

from fastapi import APIRouter, Depends

from scribble import __version__
from scribble.routes.deps import get_auth_service
from scribble.schemas.common import (
    DebugBlog,
    DebugResponse,
    DebugTestData,
    DebugUser,
    HealthResponse,
    StatusResponse,
)
from scribble.services.auth_service import AuthService
from scribble.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])
debug_router = APIRouter(tags=["Debug"])

_start_time = time.time()


@router.get("/", response_model=StatusResponse, summary="Root status")
async def root() -> StatusResponse:
    return StatusResponse(status="ok", message="Scribble API is running")


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(store: Store = Depends(get_store)) -> HealthResponse:
    """
    Report liveness with store sizes and uptime.

    There are no external dependencies to check; if this handler runs, the
    service can serve requests.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        users=store.user_count,
        blogs=store.blog_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@debug_router.get("/debug", response_model=DebugResponse, summary="Store snapshot")
async def debug_snapshot(
    store: Store = Depends(get_store),
    auth: AuthService = Depends(get_auth_service),
) -> DebugResponse:
    """Users (without passwords) and blog titles currently held in memory."""
    return DebugResponse(
        has_jwt_password=auth.has_secret,
        user_count=store.user_count,
        blog_count=store.blog_count,
        test_data=DebugTestData(
            users=[DebugUser(id=u.id, name=u.name, email=u.email) for u in store.users],
            blogs=[DebugBlog(id=b.id, title=b.title) for b in store.blogs],
        ),
    )

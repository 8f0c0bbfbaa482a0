"""
Scribble Backend — Blog Route Handlers
=======================================

What:  List, fetch and create blogs.
Who:   Called by the frontend feed (`/api/v1/blog/bulk`), post page
       (`/api/v1/blog/{id}`) and editor (`/api/v1/blog`). The `/api/blogs` and
       `/api/blog` paths serve older clients.

Response shape quirk:
    The two list paths return the same blogs in different envelopes.
    `/api/blogs` wraps them as {"blogs": [...]}; `/api/v1/blog/bulk` returns
    the bare array. Both shapes are relied on by clients in the field.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from scribble.exceptions import ValidationError
from scribble.routes.deps import require_user_id
from scribble.schemas.blog import (
    BlogListResponse,
    BlogResponse,
    CreateBlogRequest,
    CreateBlogResponse,
    SingleBlogResponse,
)
from scribble.schemas.common import ErrorResponse
from scribble.services.blog_service import blog_service, parse_blog_id
from scribble.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Blogs"])


@router.get(
    "/blogs",
    response_model=BlogListResponse,
    summary="List published blogs (wrapped)",
)
async def list_blogs_wrapped(store: Store = Depends(get_store)) -> BlogListResponse:
    return BlogListResponse(blogs=blog_service.list_blogs(store))


# Registered before /v1/blog/{blog_id} so "bulk" is never taken for an id.
@router.get(
    "/v1/blog/bulk",
    response_model=List[BlogResponse],
    summary="List published blogs",
)
async def list_blogs_bulk(store: Store = Depends(get_store)) -> List[BlogResponse]:
    return blog_service.list_blogs(store)


@router.get(
    "/v1/blog/{blog_id}",
    response_model=SingleBlogResponse,
    responses={
        400: {"description": "Invalid blog ID", "model": ErrorResponse},
        404: {"description": "Blog not found", "model": ErrorResponse},
    },
    summary="Get a single blog by ID",
)
async def get_blog(blog_id: str, store: Store = Depends(get_store)) -> SingleBlogResponse:
    """
    Args:
        blog_id: Taken as a string and parsed by parse_blog_id, so a
                 non-numeric id is a 400 with the usual error body.
    """
    post = blog_service.get_blog(store, parse_blog_id(blog_id))
    return SingleBlogResponse(post=post)


async def _read_create_blog_body(request: Request) -> CreateBlogRequest:
    """
    Parse the create-blog body inside the handler.

    The body is read here rather than declared as a parameter so that
    require_user_id has already rejected unauthenticated requests (401)
    before a malformed body can produce a 400.

    Raises:
        ValidationError: Body is not JSON or does not match CreateBlogRequest
    """
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError(message="Invalid request body")

    try:
        return CreateBlogRequest.model_validate(payload)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err.get("loc", ())) for err in e.errors()]
        raise ValidationError(message="Invalid request body", context={"fields": fields})


_CREATE_BLOG_OPENAPI = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": CreateBlogRequest.model_json_schema()}},
    }
}


@router.post(
    "/blog",
    response_model=CreateBlogResponse,
    responses={
        400: {"description": "Missing title or content", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="Create a blog",
    openapi_extra=_CREATE_BLOG_OPENAPI,
)
@router.post(
    "/v1/blog",
    response_model=CreateBlogResponse,
    responses={
        400: {"description": "Missing title or content", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="Create a blog (v1 path)",
    openapi_extra=_CREATE_BLOG_OPENAPI,
)
async def create_blog(
    request: Request,
    user_id: str = Depends(require_user_id),
    store: Store = Depends(get_store),
) -> CreateBlogResponse:
    """Publish a blog authored by the token's user."""
    body = await _read_create_blog_body(request)
    return blog_service.create_blog(store, user_id, body)

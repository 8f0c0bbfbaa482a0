"""
Scribble Backend — Blog Service
================================

What:  Create, list and fetch blogs.
How:   Reads/writes the Store and formats each blog with its author's name
       resolved at read time.
Who:   Called by the routes in routes/blogs.py.
"""

import logging
import re
from typing import List

from scribble.exceptions import NotFoundError, ValidationError
from scribble.models import Blog
from scribble.schemas.blog import (
    BlogAuthor,
    BlogResponse,
    CreateBlogRequest,
    CreateBlogResponse,
)
from scribble.store import Store

logger = logging.getLogger(__name__)

# Leading integer, as the frontend's ids are parsed: "7", " 7", "7-my-title"
_BLOG_ID_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def parse_blog_id(raw: str) -> int:
    """
    Parse the `{id}` path segment of GET /api/v1/blog/{id}.

    Raises:
        ValidationError: The segment does not start with an integer
    """
    match = _BLOG_ID_PATTERN.match(raw)
    if match is None:
        raise ValidationError(message="Invalid blog ID", field="id")
    return int(match.group(1))


class BlogService:
    """Blog operations. Stateless: the Store is passed to every call."""

    def create_blog(
        self, store: Store, author_id: str, body: CreateBlogRequest
    ) -> CreateBlogResponse:
        """
        Append a published blog for an authenticated user.

        Raises:
            ValidationError: Title or content missing/empty
        """
        missing = [name for name in ("title", "content") if not getattr(body, name)]
        if missing:
            raise ValidationError(
                message="Missing title or content",
                context={"missing": missing},
            )

        blog = store.create_blog(body.title, body.content, author_id)
        return CreateBlogResponse(id=blog.id, success=True)

    def list_blogs(self, store: Store) -> List[BlogResponse]:
        blogs = [self._to_response(store, blog) for blog in store.list_published_blogs()]
        logger.debug("Listing %d published blogs", len(blogs))
        return blogs

    def get_blog(self, store: Store, blog_id: int) -> BlogResponse:
        """
        Raises:
            NotFoundError: No blog was ever created with this id
        """
        blog = store.get_blog_by_id(blog_id)
        if blog is None:
            logger.info("Blog with ID %d not found", blog_id)
            raise NotFoundError(resource="blog", resource_id=str(blog_id))
        return self._to_response(store, blog)

    @staticmethod
    def _to_response(store: Store, blog: Blog) -> BlogResponse:
        return BlogResponse(
            id=blog.id,
            title=blog.title,
            content=blog.content,
            author_id=blog.author_id,
            published=blog.published,
            author=BlogAuthor(name=store.author_name(blog.author_id)),
        )


blog_service = BlogService()

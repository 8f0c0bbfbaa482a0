"""
Scribble Backend — Blog Request/Response Schemas
=================================================

What:  Create-blog body and the blog shapes returned by the read endpoints.

Response shapes by path:
    GET /api/blogs           → BlogListResponse   {"blogs": [BlogResponse, ...]}
    GET /api/v1/blog/bulk    → List[BlogResponse] [BlogResponse, ...]
    GET /api/v1/blog/{id}    → SingleBlogResponse {"post": BlogResponse}
    POST /api/blog, /api/v1/blog → CreateBlogResponse {"id": n, "success": true}
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateBlogRequest(BaseModel):
    title: Optional[str] = Field(default=None, description="Post title")
    content: Optional[str] = Field(default=None, description="Post body")


class BlogAuthor(BaseModel):
    """Author fields denormalized into every blog response."""
    name: str = Field(description='Author display name, or "Unknown"')


class BlogResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Monotonic blog id")
    title: str
    content: str
    author_id: str = Field(alias="authorId", description="Id of the authoring user")
    published: bool
    author: BlogAuthor


class BlogListResponse(BaseModel):
    blogs: List[BlogResponse] = Field(description="Published blogs in creation order")


class SingleBlogResponse(BaseModel):
    post: BlogResponse


class CreateBlogResponse(BaseModel):
    id: int = Field(description="Id assigned to the new blog")
    success: bool = True

"""
Scribble Backend — Shared Response Schemas
===========================================

What:  Error body, health/status payloads and the development debug snapshot.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    What:  Error format for every failing request.

    Example:
        {
            "error": "Missing required fields",
            "details": {"missing": ["name"]},
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class StatusResponse(BaseModel):
    status: str
    message: str


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    users: int = Field(description="Registered users in the store")
    blogs: int = Field(description="Blogs in the store")
    uptime_seconds: float = Field(description="Seconds since service started")


class DebugUser(BaseModel):
    id: str
    name: str
    email: str


class DebugBlog(BaseModel):
    id: int
    title: str


class DebugTestData(BaseModel):
    users: List[DebugUser]
    blogs: List[DebugBlog]


class DebugResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_jwt_password: bool = Field(alias="hasJwtPassword")
    user_count: int = Field(alias="userCount")
    blog_count: int = Field(alias="blogCount")
    test_data: DebugTestData = Field(alias="testData")

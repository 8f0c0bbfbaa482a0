"""
Scribble Backend — User Request/Response Schemas
=================================================

What:  Bodies for signup/signin and the token response both return.

Request fields are optional at the schema level. Presence (non-empty) is
checked by UserService so that a missing field and an empty string produce
the same 400 "Missing ..." error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="Unique login email")
    password: Optional[str] = Field(default=None, description="Account password")
    name: Optional[str] = Field(default=None, description="Display name shown on posts")


class SigninRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="Registered email")
    password: Optional[str] = Field(default=None, description="Account password")


class AuthResponse(BaseModel):
    """
    What:  Returned by signup and signin.
    Who:   The frontend stores `jwt` and sends it back in the Authorization header.
    """
    jwt: str = Field(description="Signed session token carrying the user id")
    name: str = Field(description="Display name of the authenticated user")

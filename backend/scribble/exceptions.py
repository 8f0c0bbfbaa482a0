"""
Scribble Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for each failure the API reports.
How:   Each exception carries a message and an optional context dict.
       Handlers registered in main.py turn them into JSON error bodies
       `{"error": <message>, ...}` with the matching HTTP status.
Who:   Raised by the store, services and route dependencies.

Exception Hierarchy:
    ScribbleError (base)                → 500 Internal Server Error
    ├── ValidationError                 → 400 Bad Request
    │   └── DuplicateEmailError         → 400 Bad Request
    ├── AuthenticationError             → 401 Unauthorized
    │   └── InvalidTokenError           → 401 Unauthorized
    ├── InvalidCredentialsError         → 403 Forbidden
    └── NotFoundError                   → 404 Not Found
"""

from typing import Any, Dict, Optional


class ScribbleError(Exception):
    """
    Base exception for all Scribble application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional info returned as `details` when non-empty
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ScribbleError):
    """
    Raised when client input fails a presence or format check.

    When:    Missing body field, malformed JSON body, non-numeric blog id.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateEmailError(ValidationError):
    """
    Raised by the store when a signup reuses a registered email.

    HTTP:    400 Bad Request
    """

    def __init__(self, email: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Email already registered", context=context)
        self.email = email


class AuthenticationError(ScribbleError):
    """
    Raised when a protected route is called without usable credentials.

    When:    No Authorization header on POST /api/blog or /api/v1/blog.
    HTTP:    401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Unauthorized - No auth header",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidTokenError(AuthenticationError):
    """
    Raised when a session token fails signature verification or carries no user id.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Invalid token",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialsError(ScribbleError):
    """
    Raised when signin email/password do not match a stored user.

    HTTP:    403 Forbidden
    """

    status_code = 403

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ScribbleError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/v1/blog/{id} with an id that was never issued.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id

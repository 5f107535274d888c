"""
Error kinds raised by the bloglist service.

Every error carries the HTTP status it maps to. Route handlers never catch
these; the exception handlers installed by `bloglist.api.app` turn them into
`{"error": message}` responses.
"""

from __future__ import annotations


class BloglistError(Exception):
    """Base class for all expected service errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BloglistError):
    """Malformed or missing required fields."""
    status_code = 400


class AuthenticationError(BloglistError):
    """Bad credentials, or a bad or absent token."""
    status_code = 401


class AuthorizationError(BloglistError):
    """Authenticated, but not permitted to touch the resource."""
    # Ownership mismatch is reported as a bad request, not 403.
    status_code = 400


class NotFoundError(BloglistError):
    """Unknown identifier."""
    status_code = 404


class ConflictError(BloglistError):
    """Duplicate value for a unique key."""
    status_code = 400


class InfrastructureError(BloglistError):
    """The storage backend is unreachable or failed."""
    status_code = 500

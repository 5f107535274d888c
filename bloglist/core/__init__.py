"""
Core types shared across the bloglist service.
"""

from bloglist.core.errors import (
    BloglistError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    InfrastructureError,
)
from bloglist.core.models import (
    Post,
    PostCreate,
    PostUpdate,
    PostWithOwner,
    AccountCreate,
    AccountInDB,
    AccountResponse,
    AccountWithPosts,
)

__all__ = [
    # Errors
    "BloglistError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "InfrastructureError",
    # Models
    "Post",
    "PostCreate",
    "PostUpdate",
    "PostWithOwner",
    "AccountCreate",
    "AccountInDB",
    "AccountResponse",
    "AccountWithPosts",
]

"""
Authentication - password credentials and bearer tokens.

Design principles:
1. One dependency resolves the request's AuthContext
2. Anonymous requests pass through; handlers decide if that is an error
3. Ownership is the only authorization rule
"""

from bloglist.auth.context import AuthContext
from bloglist.auth.policies import (
    get_auth_context,
    require_account,
    extract_bearer_token,
)
from bloglist.auth.jwt import TokenService, TokenPayload
from bloglist.auth.credentials import (
    CredentialStore,
    hash_password,
    verify_password,
)
from bloglist.auth.routes import router as auth_router

__all__ = [
    # Main interface
    "AuthContext",
    "get_auth_context",
    "require_account",
    "extract_bearer_token",
    # Tokens
    "TokenService",
    "TokenPayload",
    # Credentials
    "CredentialStore",
    "hash_password",
    "verify_password",
    # Router
    "auth_router",
]

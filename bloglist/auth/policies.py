"""
Policies - the FastAPI dependencies that authenticate requests.

Usage:
    async def route(ctx: AuthContext = Depends(get_auth_context)): ...
    async def route(account: AccountInDB = Depends(require_account)): ...

Design:
- `get_auth_context` never rejects an anonymous request, it only attaches
  what the Authorization header proves
- A header that is present but does not verify raises AuthenticationError,
  which the app's exception handler turns into a 401
- `require_account` additionally insists that a token was sent
"""

from __future__ import annotations

from fastapi import Depends, Request

from bloglist.auth.context import AuthContext
from bloglist.auth.credentials import CredentialStore
from bloglist.auth.jwt import TokenService
from bloglist.core.errors import AuthenticationError
from bloglist.core.models import AccountInDB

BEARER_PREFIX = "Bearer "


# =============================================================================
# Token Extraction
# =============================================================================


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an Authorization header.

    Only the exact, case-sensitive "Bearer <token>" form is recognised;
    anything else counts as no token at all.
    """
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX):].strip()
        return token or None
    return None


# =============================================================================
# App-state accessors
# =============================================================================


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credentials


# =============================================================================
# Dependencies
# =============================================================================


async def get_auth_context(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
    credentials: CredentialStore = Depends(get_credential_store),
) -> AuthContext:
    """Resolve the Authorization header into an AuthContext."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        return AuthContext.anonymous()

    account_id = tokens.verify(token)

    account = await credentials.get(account_id)
    if account is None:
        raise AuthenticationError("token refers to an unknown user")

    return AuthContext(account=account, token=token)


async def require_account(
    ctx: AuthContext = Depends(get_auth_context),
) -> AccountInDB:
    """Require an authenticated account."""
    return ctx.require_account()

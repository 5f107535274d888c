"""
Auth context - who is making the request.

This is the lightweight object passed from the auth dependency to route
handlers. It is built per request and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from bloglist.core.errors import AuthenticationError
from bloglist.core.models import AccountInDB


@dataclass
class AuthContext:
    """
    Authentication context for a request.

    Usage in routes:
        async def my_route(ctx: AuthContext = Depends(get_auth_context)):
            account = ctx.require_account()
    """

    account: AccountInDB | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Is there a verified account attached?"""
        return self.account is not None

    @property
    def account_id(self) -> str | None:
        return self.account.id if self.account else None

    def require_account(self) -> AccountInDB:
        """Return the attached account, or raise 401 if the request carried no token."""
        if self.account is None:
            raise AuthenticationError("token missing")
        return self.account

    @classmethod
    def anonymous(cls) -> AuthContext:
        """Create an anonymous context (no token, no account)."""
        return cls()

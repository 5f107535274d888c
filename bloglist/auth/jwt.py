# =============================================================================
# JWT Token Service
# =============================================================================
#
# Issues and verifies the bearer tokens handed out by POST /api/login.
#
#   - HS256 signed with the server secret (JWT_SECRET_KEY)
#   - "sub" carries the account id
#   - No expiry unless JWT_EXPIRE_MINUTES is set
#
# =============================================================================

from __future__ import annotations

from datetime import datetime, timedelta
import logging

from pydantic import BaseModel
import jwt

from bloglist.config import Settings
from bloglist.core.errors import AuthenticationError
from bloglist.core.models import AccountInDB
from bloglist.core.utils import utc_now

logger = logging.getLogger(__name__)


# =============================================================================
# Models
# =============================================================================

class TokenPayload(BaseModel):
    """JWT token payload."""
    sub: str  # account id
    username: str
    iat: datetime
    exp: datetime | None = None


# =============================================================================
# Token Service
# =============================================================================

class TokenService:
    """
    Signs and checks bearer tokens.

    `verify()` only proves the token was issued by us; it does not check
    that the account it names still exists.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int | None = None,
    ):
        if not secret_key:
            raise ValueError("jwt_secret_blank")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenService:
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.jwt_expire_minutes,
        )

    def issue(self, account: AccountInDB) -> str:
        """Create a signed token binding the account id."""
        now = utc_now()
        payload = {
            "sub": account.id,
            "username": account.username,
            "iat": now,
        }
        if self.expire_minutes:
            payload["exp"] = now + timedelta(minutes=self.expire_minutes)

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenPayload:
        """
        Decode and validate a JWT token.

        Raises:
            AuthenticationError: token is malformed, unsigned, forged or expired
        """
        if not token:
            raise AuthenticationError("token missing")

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("token expired")
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise AuthenticationError("token invalid")

        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise AuthenticationError("token invalid")

        return TokenPayload(
            sub=sub,
            username=payload.get("username", ""),
            iat=payload.get("iat", 0),
            exp=payload.get("exp"),
        )

    def verify(self, token: str) -> str:
        """Return the account id embedded in a valid token."""
        return self.decode(token).sub

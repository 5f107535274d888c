# =============================================================================
# Credential Store
# =============================================================================
#
# Account registration and password verification.
#
#   - bcrypt hashes with a fixed cost factor (PASSWORD_HASH_ROUNDS, default 10)
#   - Length rules are checked before any hashing work
#   - Login failures use one message whether the user exists or not
#
# =============================================================================

from __future__ import annotations

import logging

import bcrypt

from bloglist.config import Settings
from bloglist.core.errors import AuthenticationError, ConflictError, ValidationError
from bloglist.core.models import AccountInDB
from bloglist.storage.base import Collections, DocumentStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid username or password"

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


# =============================================================================
# Password Hashing
# =============================================================================

def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with bcrypt. Returns the modular-crypt string."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash."""
    if not password or not password_hash:
        return False
    encoded = password.encode("utf-8")
    # Registration never accepts these, so no stored hash can match.
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


# =============================================================================
# Store
# =============================================================================

class CredentialStore:
    """Account records with hashed passwords."""

    def __init__(
        self,
        storage: DocumentStore,
        rounds: int = 10,
        min_password_length: int = 3,
        min_username_length: int = 3,
    ):
        self.storage = storage
        self.rounds = rounds
        self.min_password_length = min_password_length
        self.min_username_length = min_username_length

    @classmethod
    def from_settings(cls, storage: DocumentStore, settings: Settings) -> CredentialStore:
        return cls(
            storage,
            rounds=settings.password_hash_rounds,
            min_password_length=settings.min_password_length,
            min_username_length=settings.min_username_length,
        )

    async def register(
        self,
        username: str,
        name: str | None,
        password: str,
    ) -> AccountInDB:
        """
        Create a new account.

        Raises:
            ValidationError: password too short or too long, username too short
            ConflictError: username already taken
        """
        password = password or ""
        if len(password) < self.min_password_length:
            raise ValidationError(
                f"password must be at least {self.min_password_length} characters long"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )

        username = (username or "").strip()
        if not username:
            raise ValidationError("username is required")
        if len(username) < self.min_username_length:
            raise ValidationError(
                f"username must be at least {self.min_username_length} characters long"
            )

        if await self.get_by_username(username) is not None:
            raise ConflictError("expected `username` to be unique")

        doc = await self.storage.create(Collections.USERS, {
            "username": username,
            "name": name,
            "password_hash": hash_password(password, self.rounds),
            "blogs": [],
        })
        logger.info("Registered account %s (%s)", doc["id"], username)
        return AccountInDB.model_validate(doc)

    async def verify(self, username: str, password: str) -> AccountInDB:
        """Authenticate by username and password."""
        account = await self.get_by_username(username)
        if account is None or not verify_password(password, account.password_hash):
            logger.info("Failed login for username %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)
        return account

    async def get(self, account_id: str) -> AccountInDB | None:
        doc = await self.storage.find_by_id(Collections.USERS, account_id)
        return AccountInDB.model_validate(doc) if doc else None

    async def get_by_username(self, username: str) -> AccountInDB | None:
        doc = await self.storage.find_one(Collections.USERS, {"username": username})
        return AccountInDB.model_validate(doc) if doc else None

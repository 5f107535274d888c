"""
Core data models for the bloglist service.

Two entities: Accounts (who writes) and Posts (what they write). Posts
carry a reference to the account that created them; accounts carry
back-references to their posts for convenience only.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# =============================================================================
# Posts
# =============================================================================


class Post(BaseModel):
    """A post as stored and returned from write operations."""

    id: str
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: str | None = None  # owning account id, absent on legacy records


class PostCreate(BaseModel):
    """Body of POST /api/blogs."""

    title: str = Field(min_length=1)
    author: str | None = None
    url: str = Field(min_length=1)
    likes: int = 0


class PostUpdate(BaseModel):
    """Body of PUT /api/blogs/{id}. Only the fields sent are replaced."""

    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


class PostOwner(BaseModel):
    """Owner projection embedded in post listings."""

    username: str
    name: str | None = None


class PostWithOwner(BaseModel):
    """A post with its owning account expanded."""

    id: str
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: PostOwner | None = None


# =============================================================================
# Accounts
# =============================================================================


class AccountCreate(BaseModel):
    """Body of POST /api/users."""

    username: str = ""
    name: str | None = None
    password: str = ""


class AccountInDB(BaseModel):
    """Account stored in the database."""

    id: str
    username: str
    name: str | None = None
    password_hash: str
    blogs: list[str] = Field(default_factory=list)


class AccountResponse(BaseModel):
    """Account data returned to clients (no password hash)."""

    id: str
    username: str
    name: str | None = None
    blogs: list[str] = Field(default_factory=list)

    @classmethod
    def from_db(cls, account: AccountInDB) -> AccountResponse:
        return cls(
            id=account.id,
            username=account.username,
            name=account.name,
            blogs=list(account.blogs),
        )


class PostSummary(BaseModel):
    """Post projection embedded in account listings."""

    url: str
    title: str
    author: str | None = None


class AccountWithPosts(BaseModel):
    """An account with its posts expanded."""

    id: str
    username: str
    name: str | None = None
    blogs: list[PostSummary] = Field(default_factory=list)


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    # Missing fields fall through to the uniform 401
    username: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    token: str
    username: str
    name: str | None = None

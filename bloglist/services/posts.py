"""
Post service - list, create, update and delete posts.

Only deletion is gated on ownership: the caller must be the account that
created the post. Updates are open to anyone (existing API behaviour).
"""

from __future__ import annotations

import logging

from bloglist.core.errors import (
    AuthorizationError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from bloglist.core.models import (
    AccountInDB,
    Post,
    PostCreate,
    PostUpdate,
    PostWithOwner,
)
from bloglist.core.utils import is_valid_id
from bloglist.storage.base import Collections, DocumentStore

logger = logging.getLogger(__name__)

OWNER_FIELDS = ("username", "name")


def check_id(post_id: str) -> str:
    """Reject IDs that could never have been issued by the store."""
    if not is_valid_id(post_id):
        raise ValidationError("malformatted id")
    return post_id


class PostService:
    """CRUD over posts, with the owner check on delete."""

    def __init__(self, storage: DocumentStore):
        self.storage = storage

    async def list_posts(self) -> list[PostWithOwner]:
        """All posts, each with its owner expanded to username and name."""
        posts = []
        for doc in await self.storage.find_all(Collections.BLOGS):
            doc = await self.storage.populate(doc, "user", Collections.USERS, OWNER_FIELDS)
            posts.append(PostWithOwner.model_validate(doc))
        return posts

    async def get(self, post_id: str) -> Post:
        doc = await self.storage.find_by_id(Collections.BLOGS, check_id(post_id))
        if doc is None:
            raise NotFoundError("blog not found")
        return Post.model_validate(doc)

    async def create(self, account: AccountInDB, data: PostCreate) -> Post:
        """
        Persist a post owned by `account` and record it on the account.

        Two writes. If the back-reference write fails, the post is deleted
        again and the error re-raised, so callers never see a post that
        its owner does not list.
        """
        doc = await self.storage.create(Collections.BLOGS, {
            "title": data.title,
            "author": data.author,
            "url": data.url,
            "likes": data.likes,
            "user": account.id,
        })

        try:
            await self._append_to_owner(account.id, doc["id"])
        except Exception:
            logger.warning(
                "Rolling back post %s: could not update account %s",
                doc["id"], account.id,
            )
            await self.storage.delete_by_id(Collections.BLOGS, doc["id"])
            raise

        logger.info("Account %s created post %s", account.id, doc["id"])
        return Post.model_validate(doc)

    async def _append_to_owner(self, account_id: str, post_id: str) -> None:
        owner = await self.storage.find_by_id(Collections.USERS, account_id)
        if owner is None:
            raise InfrastructureError(f"account {account_id} disappeared")
        blogs = list(owner.get("blogs") or []) + [post_id]
        updated = await self.storage.update_by_id(
            Collections.USERS, account_id, {"blogs": blogs}
        )
        if updated is None:
            raise InfrastructureError(f"account {account_id} disappeared")

    async def update(self, post_id: str, data: PostUpdate) -> Post:
        """Replace the fields present in `data`. No ownership check."""
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        doc = await self.storage.update_by_id(Collections.BLOGS, check_id(post_id), patch)
        if doc is None:
            raise NotFoundError("blog not found")
        return Post.model_validate(doc)

    async def delete(self, account: AccountInDB, post_id: str) -> None:
        """
        Delete a post owned by `account`.

        The owner's back-reference list is left as is.
        """
        post = await self.get(post_id)

        if str(post.user) != str(account.id):
            logger.info(
                "Account %s denied delete of post %s owned by %s",
                account.id, post.id, post.user,
            )
            raise AuthorizationError("only the creator can delete a blog")

        await self.storage.delete_by_id(Collections.BLOGS, post.id)
        logger.info("Account %s deleted post %s", account.id, post.id)

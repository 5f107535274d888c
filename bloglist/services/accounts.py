"""
Account service - registration and listing.
"""

from __future__ import annotations

from bloglist.auth.credentials import CredentialStore
from bloglist.core.models import AccountCreate, AccountResponse, AccountWithPosts
from bloglist.storage.base import Collections, DocumentStore

POST_FIELDS = ("url", "title", "author")


class AccountService:
    def __init__(self, storage: DocumentStore, credentials: CredentialStore):
        self.storage = storage
        self.credentials = credentials

    async def register(self, data: AccountCreate) -> AccountResponse:
        account = await self.credentials.register(data.username, data.name, data.password)
        return AccountResponse.from_db(account)

    async def list_accounts(self) -> list[AccountWithPosts]:
        """All accounts with their posts expanded. Password hashes never leave here."""
        accounts = []
        for doc in await self.storage.find_all(Collections.USERS):
            doc = await self.storage.populate(doc, "blogs", Collections.BLOGS, POST_FIELDS)
            accounts.append(AccountWithPosts.model_validate(doc))
        return accounts

"""
Shared test data and database helpers.
"""

import asyncio

from bloglist.storage import Collections, DocumentStore


INITIAL_USERS = [
    {"username": "alice123", "name": "Alice Johnson", "password": "alicePassword"},
    {"username": "bob456", "name": "Bob Smith", "password": "bobSecure"},
]

INITIAL_BLOGS = [
    {"title": "Favourite food", "author": "John Smith", "url": "http://something.com", "likes": 10},
    {"title": "Music", "author": "Julia May", "url": "http://somethingelse.com", "likes": 3},
]

UNKNOWN_ID = "5e9f8f8f8f8f8f8f8f8f8f8f"


def blogs_in_db(store: DocumentStore) -> list[dict]:
    return asyncio.run(store.find_all(Collections.BLOGS))


def users_in_db(store: DocumentStore) -> list[dict]:
    return asyncio.run(store.find_all(Collections.USERS))


def non_existing_id(store: DocumentStore) -> str:
    """An ID that was valid once but no longer exists."""
    doc = asyncio.run(store.create(Collections.BLOGS, {"title": "Travel", "url": "http://x.com"}))
    asyncio.run(store.delete_by_id(Collections.BLOGS, doc["id"]))
    return doc["id"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}

"""
Services - the operations behind each route.
"""

from bloglist.services.posts import PostService
from bloglist.services.accounts import AccountService

__all__ = [
    "PostService",
    "AccountService",
]

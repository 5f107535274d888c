"""
User routes.

    GET  /api/users  - list accounts with their posts
    POST /api/users  - register an account
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from bloglist.core.models import AccountCreate, AccountResponse, AccountWithPosts
from bloglist.services.accounts import AccountService

router = APIRouter(prefix="/api/users", tags=["users"])


def get_account_service(request: Request) -> AccountService:
    return request.app.state.accounts


# Listing answers 201, as it always has.
@router.get("", response_model=list[AccountWithPosts], status_code=201)
async def list_users(accounts: AccountService = Depends(get_account_service)):
    return await accounts.list_accounts()


@router.post("", response_model=AccountResponse, status_code=201)
async def register_user(
    data: AccountCreate,
    accounts: AccountService = Depends(get_account_service),
):
    return await accounts.register(data)

"""
Blog routes.

    GET    /api/blogs        - list posts (public)
    POST   /api/blogs        - create a post (token required)
    PUT    /api/blogs/{id}   - update a post (public)
    DELETE /api/blogs/{id}   - delete a post (token required, owner only)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from bloglist.auth import require_account
from bloglist.core import AccountInDB, Post, PostCreate, PostUpdate, PostWithOwner
from bloglist.services.posts import PostService

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


def get_post_service(request: Request) -> PostService:
    return request.app.state.posts


@router.get("", response_model=list[PostWithOwner])
async def list_blogs(posts: PostService = Depends(get_post_service)):
    return await posts.list_posts()


@router.post("", response_model=Post, status_code=201)
async def create_blog(
    data: PostCreate,
    account: AccountInDB = Depends(require_account),
    posts: PostService = Depends(get_post_service),
):
    """Create a post owned by the caller. `likes` defaults to 0."""
    return await posts.create(account, data)


@router.put("/{blog_id}", response_model=Post)
async def update_blog(
    blog_id: str,
    data: PostUpdate,
    posts: PostService = Depends(get_post_service),
):
    return await posts.update(blog_id, data)


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(
    blog_id: str,
    account: AccountInDB = Depends(require_account),
    posts: PostService = Depends(get_post_service),
):
    """Delete a post. Only the account that created it may do so."""
    await posts.delete(account, blog_id)
    return Response(status_code=204)

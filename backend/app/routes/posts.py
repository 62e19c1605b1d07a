"""
Posts API — Post Route Handlers
=================================

What:  HTTP surface for the Post resource under /api/posts.
How:   Extracts path/query/body data, delegates to PostService, sets status
       codes and headers. No business logic lives here.

Endpoints:
    POST   /api/posts          → 201, stored post (no Location header)
    GET    /api/posts          → 200, list of posts; ?page=&size= for one page
    GET    /api/posts/{id}     → 200 | 404
    PUT    /api/posts/{id}     → 200 | 404
    PATCH  /api/posts/{id}     → 200 | 404
    DELETE /api/posts/{id}     → 204 | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.schemas.post import (
    ErrorResponse,
    PostCreate,
    PostPatch,
    PostResponse,
    PostUpdate,
)
from app.services.post_service import PostService, get_post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["Posts"])

_NOT_FOUND = {404: {"description": "Post not found", "model": ErrorResponse}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PostResponse,
    summary="Create a post",
)
async def create_post(
    data: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.create_post(data)


@router.get(
    "",
    response_model=List[PostResponse],
    responses={400: {"description": "page or size out of bounds", "model": ErrorResponse}},
    summary="List posts",
    description=(
        "Returns every post in ascending id order. When both `page` (zero-indexed) "
        "and `size` are supplied, returns only that page. The X-Total-Count header "
        "carries the total number of stored posts."
    ),
)
async def list_posts(
    response: Response,
    page: Optional[int] = Query(default=None, description="Zero-indexed page number"),
    size: Optional[int] = Query(default=None, description="Posts per page"),
    service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    posts, total_count = await service.list_posts(page=page, size=size)
    response.headers["X-Total-Count"] = str(total_count)
    return posts


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses=_NOT_FOUND,
    summary="Get a post by id",
)
async def get_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.get_post(post_id)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses=_NOT_FOUND,
    summary="Replace a post's fields",
    description="Overwrites author, content and imageUrl. Omitted fields are set to null.",
)
async def update_post(
    post_id: int,
    data: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.update_post(post_id, data)


@router.patch(
    "/{post_id}",
    response_model=PostResponse,
    responses=_NOT_FOUND,
    summary="Update some of a post's fields",
    description="Overwrites only the fields present with a non-null value.",
)
async def patch_post(
    post_id: int,
    data: PostPatch,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.patch_post(post_id, data)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a post",
)
async def delete_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> Response:
    await service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

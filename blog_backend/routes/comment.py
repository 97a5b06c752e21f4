"""Comment routes: creation, moderation and the public listing."""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_backend.auth import AdminDep
from blog_backend.dependencies import CommentRepoDep, IdentityDep
from blog_backend.errors import NotFoundError, failure_boundary
from blog_backend.schemas.comment import (
    CommentCreate,
    CommentDetailResponse,
    CommentResponse,
)
from blog_backend.utils import json_body

router = APIRouter(prefix="/api/comments", tags=["💬 Comments"])

COMMENT_EXAMPLE = {
    "id": "9b2d6c1e-2f44-4c1a-8a51-5d0e0e6f1a10",
    "post": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "author": "123e4567-e89b-12d3-a456-426614174000",
    "content": "Nice post",
    "created_at": "2025-01-01T00:00:00Z",
    "approved": False,
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    status_code=HTTP_201_CREATED,
    summary="Create comment",
    description="Comment on a post. The comment stays hidden until an admin approves it.",
    responses={
        201: {"content": {"application/json": {"example": COMMENT_EXAMPLE}}},
        500: {
            "description": "Internal Server Error",
            "content": {"application/json": {"example": {"error": "Failed to create comment"}}},
        },
    },
    operation_id="comments_create",
    openapi_extra=json_body(CommentCreate),
)
async def create_comment(
    request: Request,
    repo: CommentRepoDep,
    identity: IdentityDep,
) -> CommentResponse:
    """
    Create a comment.

    Parameters
    ----------
    request : Request
        Incoming request; its JSON body holds the post ID and content.
        The post is not checked for existence.
    repo : CommentRepository
        Repository dependency.
    identity : Identity
        Authenticated caller, recorded as the author.

    Returns
    -------
    CommentResponse
        Created, unapproved comment.
    """
    with failure_boundary("Failed to create comment"):
        comment = CommentCreate.model_validate(await request.json())
        created = await repo.create(identity.id, comment)
        return CommentResponse.model_validate(created)


@router.put(
    "/{comment_id}/approve",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    summary="Approve comment",
    description="Make a comment publicly visible. Admins only.",
    responses={
        403: {
            "description": "Caller is not an admin",
            "content": {"application/json": {"example": {"error": "Not authorized"}}},
        },
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"error": "Comment not found"}}},
        },
        500: {
            "description": "Internal Server Error",
            "content": {"application/json": {"example": {"error": "Failed to approve comment"}}},
        },
    },
    operation_id="comments_approve",
)
async def approve_comment(
    comment_id: str,
    repo: CommentRepoDep,
    admin: AdminDep,
) -> CommentResponse:
    """
    Approve a comment.

    Parameters
    ----------
    comment_id : str
        Comment identifier; anything but a UUID fails with the route message.
    repo : CommentRepository
        Repository dependency.
    admin : Identity
        Authenticated caller holding the admin role.

    Returns
    -------
    CommentResponse
        Approved comment.

    Raises
    ------
    NotFoundError
        If the comment does not exist.
    """
    with failure_boundary("Failed to approve comment"):
        comment = await repo.get_by_id(UUID(comment_id))
        if comment is None:
            raise NotFoundError("Comment not found")
        approved = await repo.approve(comment)
        return CommentResponse.model_validate(approved)


@router.get(
    "/post/{post_id}",
    response_class=ORJSONResponse,
    response_model=list[CommentDetailResponse],
    summary="List comments of a post",
    description="Approved comments of a post with the author's username.",
    responses={
        500: {
            "description": "Internal Server Error",
            "content": {"application/json": {"example": {"error": "Failed to fetch comments"}}},
        },
    },
    operation_id="comments_by_post",
)
async def list_post_comments(post_id: str, repo: CommentRepoDep) -> list[CommentDetailResponse]:
    """List the approved comments of a post, which need not exist anymore."""
    with failure_boundary("Failed to fetch comments"):
        rows = await repo.list_approved_for_post(UUID(post_id))
        return [CommentDetailResponse.from_row(comment, username) for comment, username in rows]

"""Blog post routes: CRUD and the two public reports."""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_backend.auth import can_modify
from blog_backend.dependencies import IdentityDep, PostFiltersDep, PostRepoDep
from blog_backend.errors import ForbiddenError, NotFoundError, failure_boundary
from blog_backend.schemas.blog_post import (
    AuthorPostCount,
    PostCreate,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
    TopCommentedPost,
)
from blog_backend.schemas.common import MessageResponse
from blog_backend.utils import json_body

router = APIRouter(prefix="/api/blogposts", tags=["📝 Blog posts"])

POST_EXAMPLE = {
    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "title": "Hello world",
    "content": "First post",
    "author": "123e4567-e89b-12d3-a456-426614174000",
    "status": "draft",
    "created_at": "2025-01-01T00:00:00Z",
    "updated_at": "2025-01-01T00:00:00Z",
}
NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "Post not found"}}},
}
FORBIDDEN = {
    "description": "Caller is not the author",
    "content": {"application/json": {"example": {"error": "Not authorized"}}},
}


def _server_error(message: str) -> dict:
    return {
        "description": "Internal Server Error",
        "content": {"application/json": {"example": {"error": message}}},
    }


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    status_code=HTTP_201_CREATED,
    summary="Create post",
    description="Create a post authored by the caller. Status defaults to draft.",
    responses={
        201: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        500: _server_error("Failed to create post"),
    },
    operation_id="blogposts_create",
    openapi_extra=json_body(PostCreate),
)
async def create_post(
    request: Request,
    repo: PostRepoDep,
    identity: IdentityDep,
) -> PostResponse:
    """
    Create a new post.

    Parameters
    ----------
    request : Request
        Incoming request; its JSON body holds title, content and optional status.
    repo : BlogPostRepository
        Repository dependency.
    identity : Identity
        Authenticated caller, recorded as the author.

    Returns
    -------
    PostResponse
        Created post.
    """
    with failure_boundary("Failed to create post"):
        post = PostCreate.model_validate(await request.json())
        created = await repo.create(identity.id, post)
        return PostResponse.model_validate(created)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[PostDetailResponse],
    summary="List posts",
    description=(
        "List all posts with the author's username. Filters are optional and combined: "
        "title is a case-insensitive substring, author and status match exactly."
    ),
    responses={500: _server_error("Failed to fetch posts")},
    operation_id="blogposts_list",
)
async def list_posts(filters: PostFiltersDep, repo: PostRepoDep) -> list[PostDetailResponse]:
    """
    List posts matching the optional filters.

    Parameters
    ----------
    filters : PostFilters
        Title, author and status filters. An author that is not a UUID fails the listing.
    repo : BlogPostRepository
        Repository dependency.

    Returns
    -------
    list[PostDetailResponse]
        Matching posts, unpaginated.
    """
    with failure_boundary("Failed to fetch posts"):
        rows = await repo.search(
            title=filters.title,
            author=UUID(filters.author) if filters.author else None,
            status=filters.status,
        )
        return [PostDetailResponse.from_row(post, username) for post, username in rows]


@router.get(
    "/top-commented",
    response_class=ORJSONResponse,
    response_model=list[TopCommentedPost],
    summary="Top commented posts",
    description=(
        "The five posts with the most comments, approved or not, "
        "each annotated with commentCount."
    ),
    responses={500: _server_error("Failed to fetch top commented posts")},
    operation_id="blogposts_top_commented",
)
async def top_commented_posts(repo: PostRepoDep) -> list[TopCommentedPost]:
    """Rank posts by comment count."""
    with failure_boundary("Failed to fetch top commented posts"):
        rows = await repo.top_commented()
        return [
            TopCommentedPost(
                **PostResponse.model_validate(post).model_dump(),
                comment_count=count,
            )
            for post, count in rows
        ]


@router.get(
    "/posts-by-author",
    response_class=ORJSONResponse,
    response_model=list[AuthorPostCount],
    summary="Posts count by author",
    description="Number of posts per existing author, keyed by username.",
    responses={
        200: {
            "content": {"application/json": {"example": [{"author": "alice", "postCount": 3}]}},
        },
        500: _server_error("Failed to fetch posts count by author"),
    },
    operation_id="blogposts_by_author",
)
async def posts_count_by_author(repo: PostRepoDep) -> list[AuthorPostCount]:
    """Count posts per author."""
    with failure_boundary("Failed to fetch posts count by author"):
        rows = await repo.posts_by_author()
        return [AuthorPostCount(author=username, post_count=count) for username, count in rows]


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostDetailResponse,
    summary="Get post",
    description="Get one post with the author's username.",
    responses={404: NOT_FOUND, 500: _server_error("Failed to fetch post")},
    operation_id="blogposts_get",
)
async def get_post(post_id: str, repo: PostRepoDep) -> PostDetailResponse:
    """
    Get post by ID.

    Parameters
    ----------
    post_id : str
        Post identifier; anything but a UUID fails with the route message.
    repo : BlogPostRepository
        Repository dependency.

    Returns
    -------
    PostDetailResponse
        The post.

    Raises
    ------
    NotFoundError
        If the post does not exist.
    """
    with failure_boundary("Failed to fetch post"):
        row = await repo.get_with_author(UUID(post_id))
        if row is None:
            raise NotFoundError("Post not found")
        return PostDetailResponse.from_row(*row)


@router.put(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Update post",
    description=(
        "Overwrite title, content and status of a post owned by the caller. "
        "A missing status is cleared; a missing title or content fails the update."
    ),
    responses={
        403: FORBIDDEN,
        404: NOT_FOUND,
        500: _server_error("Failed to update post"),
    },
    operation_id="blogposts_update",
    openapi_extra=json_body(PostUpdate),
)
async def update_post(
    post_id: str,
    request: Request,
    repo: PostRepoDep,
    identity: IdentityDep,
) -> PostResponse:
    """
    Update a post.

    Parameters
    ----------
    post_id : str
        Post identifier; anything but a UUID fails with the route message.
    request : Request
        Incoming request; its JSON body holds the replacement title, content and status.
    repo : BlogPostRepository
        Repository dependency.
    identity : Identity
        Authenticated caller.

    Returns
    -------
    PostResponse
        Updated post.

    Raises
    ------
    NotFoundError
        If the post does not exist.
    ForbiddenError
        If the caller is not the author.
    """
    with failure_boundary("Failed to update post"):
        post = await repo.get_by_id(UUID(post_id))
        if post is None:
            raise NotFoundError("Post not found")
        if not can_modify(identity, post):
            raise ForbiddenError

        data = PostUpdate.model_validate(await request.json())
        updated = await repo.update(post, data)
        return PostResponse.model_validate(updated)


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete post",
    description="Hard-delete a post owned by the caller. Its comments are kept.",
    responses={
        200: {"content": {"application/json": {"example": {"message": "Post deleted"}}}},
        403: FORBIDDEN,
        404: NOT_FOUND,
        500: _server_error("Failed to delete post"),
    },
    operation_id="blogposts_delete",
)
async def delete_post(post_id: str, repo: PostRepoDep, identity: IdentityDep) -> MessageResponse:
    """
    Delete a post.

    Parameters
    ----------
    post_id : str
        Post identifier; anything but a UUID fails with the route message.
    repo : BlogPostRepository
        Repository dependency.
    identity : Identity
        Authenticated caller.

    Returns
    -------
    MessageResponse
        Confirmation message.

    Raises
    ------
    NotFoundError
        If the post does not exist.
    ForbiddenError
        If the caller is not the author.
    """
    with failure_boundary("Failed to delete post"):
        post = await repo.get_by_id(UUID(post_id))
        if post is None:
            raise NotFoundError("Post not found")
        if not can_modify(identity, post):
            raise ForbiddenError

        await repo.delete(post)
    return MessageResponse(message="Post deleted")

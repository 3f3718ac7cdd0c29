"""Post API endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import CurrentUser, Posts
from src.schemas.post import PostCreate, PostResponse, PostUpdate

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


def post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@router.get("", response_model=list[PostResponse])
def get_posts(current_user: CurrentUser, posts: Posts, mine: bool = False):
    """Get published posts and the current user's drafts, newest first."""
    if mine:
        return posts.find_many(author_id=current_user.id)
    return posts.find_many(visible_to=current_user.id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(post_data: PostCreate, current_user: CurrentUser, posts: Posts):
    """Write a new post."""
    return posts.create(current_user.id, post_data.model_dump())


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, current_user: CurrentUser, posts: Posts):
    """Get a post that is published or written by the current user."""
    post = posts.find_by_id(post_id, visible_to=current_user.id)
    if post is None:
        raise post_not_found()
    return post


@router.put("/{post_id}", response_model=PostResponse)
def update_post(post_id: int, post_data: PostUpdate, current_user: CurrentUser, posts: Posts):
    """Update one of the current user's posts."""
    post = posts.update(post_id, post_data.model_dump(exclude_unset=True), owner_id=current_user.id)
    if post is None:
        raise post_not_found()
    return post


@router.delete("/{post_id}")
def delete_post(post_id: int, current_user: CurrentUser, posts: Posts):
    """Delete one of the current user's posts."""
    if not posts.delete(post_id, owner_id=current_user.id):
        raise post_not_found()
    return {"message": "Post deleted successfully"}

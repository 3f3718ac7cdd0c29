"""Post repository."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, joinedload

from src.models.post import Post
from src.repositories.base import Repository
from src.schemas.post import PostAuthor, PostResponse

logger = logging.getLogger(__name__)


class PostRepository(Repository[Post, PostResponse]):
    """Blog posts with their author embedded."""

    model = Post

    def _filter_owner(self, query: Query, owner_id: int) -> Query:
        return query.filter(Post.author_id == owner_id)

    def _filter_visible(self, query: Query, viewer_id: int) -> Query:
        """Published posts, plus the viewer's own drafts."""
        return query.filter(or_(Post.published.is_(True), Post.author_id == viewer_id))

    def _shape(self, row: Post) -> PostResponse:
        return PostResponse(
            id=row.id,
            title=row.title,
            content=row.content,
            published=bool(row.published),
            author_id=row.author_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
            author=PostAuthor.model_validate(row.author),
        )

    def find_by_id(
        self,
        entity_id: int,
        owner_id: int | None = None,
        visible_to: int | None = None,
    ) -> PostResponse | None:
        query = self.db.query(Post).options(joinedload(Post.author)).filter(Post.id == entity_id)
        if owner_id is not None:
            query = self._filter_owner(query, owner_id)
        if visible_to is not None:
            query = self._filter_visible(query, visible_to)
        row = query.first()
        if row is None:
            return None
        return self._shape(row)

    def create(self, author_id: int, fields: Mapping[str, Any]) -> PostResponse:
        """Write a new post."""
        post = Post(
            title=fields["title"],
            content=fields.get("content"),
            published=bool(fields.get("published", False)),
            author_id=author_id,
        )
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)

        logger.info(f"Created post {post.id} by user {author_id}")
        return self._shape(post)

    def find_many(
        self,
        author_id: int | None = None,
        published: bool | None = None,
        visible_to: int | None = None,
    ) -> list[PostResponse]:
        """List posts newest first, filtered by author, state or visibility."""
        query = self.db.query(Post).options(joinedload(Post.author))
        if author_id is not None:
            query = self._filter_owner(query, author_id)
        if published is not None:
            query = query.filter(Post.published.is_(published))
        if visible_to is not None:
            query = self._filter_visible(query, visible_to)

        posts = query.order_by(Post.created_at.desc(), Post.id.desc()).all()
        return [self._shape(post) for post in posts]

    def update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        owner_id: int | None = None,
    ) -> PostResponse | None:
        allowed = {
            name: value
            for name, value in fields.items()
            if name in ("title", "content", "published")
        }
        return super().update(entity_id, allowed, owner_id)

    def count(self, author_id: int, published: bool | None = None) -> int:
        query = self._filter_owner(self.db.query(Post), author_id)
        if published is not None:
            query = query.filter(Post.published.is_(published))
        return query.count()

"""FastAPI dependencies for authentication and data access."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.user import User
from src.repositories.note import NoteRepository
from src.repositories.post import PostRepository
from src.repositories.subtask import SubtaskRepository
from src.repositories.todo import TodoRepository
from src.repositories.user import UserRepository
from src.services.auth import decode_access_token
from src.services.stats import StatsService

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Invalid authentication credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized()

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise _unauthorized()

    user = UserRepository(db).find_by_id(int(user_id))
    if user is None:
        raise _unauthorized("User not found")

    return user


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_todo_repository(db: Annotated[Session, Depends(get_db)]) -> TodoRepository:
    return TodoRepository(db)


def get_subtask_repository(db: Annotated[Session, Depends(get_db)]) -> SubtaskRepository:
    return SubtaskRepository(db)


def get_note_repository(db: Annotated[Session, Depends(get_db)]) -> NoteRepository:
    return NoteRepository(db)


def get_post_repository(db: Annotated[Session, Depends(get_db)]) -> PostRepository:
    return PostRepository(db)


def get_stats_service(db: Annotated[Session, Depends(get_db)]) -> StatsService:
    """Get stats service with dependencies."""
    return StatsService(db)


CurrentUser = Annotated[User, Depends(get_current_user)]
Todos = Annotated[TodoRepository, Depends(get_todo_repository)]
Subtasks = Annotated[SubtaskRepository, Depends(get_subtask_repository)]
Notes = Annotated[NoteRepository, Depends(get_note_repository)]
Posts = Annotated[PostRepository, Depends(get_post_repository)]


def ensure_todo_owned(todos: TodoRepository, todo_id: int, user: User) -> None:
    """Raise 404 unless the todo exists and belongs to the user."""
    if not todos.exists(todo_id, owner_id=user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")

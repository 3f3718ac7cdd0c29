"""Subtask API endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import CurrentUser, Subtasks, Todos, ensure_todo_owned
from src.schemas.todo import SubtaskCreate, SubtaskResponse, SubtaskUpdate

router = APIRouter(prefix="/api/v1/todos/{todo_id}/subtasks", tags=["subtasks"])


def subtask_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subtask not found")


@router.get("", response_model=list[SubtaskResponse])
def get_subtasks(
    todo_id: int,
    current_user: CurrentUser,
    todos: Todos,
    subtasks: Subtasks,
):
    """Get a todo's subtasks, oldest first."""
    ensure_todo_owned(todos, todo_id, current_user)
    return subtasks.find_many(todo_id)


@router.post("", response_model=SubtaskResponse, status_code=status.HTTP_201_CREATED)
def create_subtask(
    todo_id: int,
    subtask_data: SubtaskCreate,
    current_user: CurrentUser,
    todos: Todos,
    subtasks: Subtasks,
):
    """Add a subtask to a todo."""
    ensure_todo_owned(todos, todo_id, current_user)
    return subtasks.create(todo_id, subtask_data.model_dump())


@router.put("/{subtask_id}", response_model=SubtaskResponse)
def update_subtask(
    todo_id: int,
    subtask_id: int,
    subtask_data: SubtaskUpdate,
    current_user: CurrentUser,
    todos: Todos,
    subtasks: Subtasks,
):
    """Update a subtask's title or completion."""
    ensure_todo_owned(todos, todo_id, current_user)
    if subtasks.find_by_id(subtask_id, owner_id=current_user.id, todo_id=todo_id) is None:
        raise subtask_not_found()

    subtask = subtasks.update(subtask_id, subtask_data.model_dump(exclude_unset=True))
    if subtask is None:
        raise subtask_not_found()
    return subtask


@router.delete("/{subtask_id}")
def delete_subtask(
    todo_id: int,
    subtask_id: int,
    current_user: CurrentUser,
    todos: Todos,
    subtasks: Subtasks,
):
    """Delete a subtask."""
    ensure_todo_owned(todos, todo_id, current_user)
    if subtasks.find_by_id(subtask_id, owner_id=current_user.id, todo_id=todo_id) is None:
        raise subtask_not_found()

    subtasks.delete(subtask_id)
    return {"message": "Subtask deleted successfully"}

"""Todo API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import CurrentUser, Todos
from src.models.enums import TodoOrder
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

router = APIRouter(prefix="/api/v1/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse])
def get_todos(
    current_user: CurrentUser,
    todos: Todos,
    completed: bool | None = Query(default=None, description="Filter by completion"),
    order: TodoOrder = Query(default=TodoOrder.CREATED_DESC, description="Sort order"),
):
    """Get the current user's todos with subtasks and notes."""
    return todos.find_many(current_user.id, order=order, completed=completed)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoCreate,
    current_user: CurrentUser,
    todos: Todos,
):
    """Create a new todo."""
    return todos.create(current_user.id, todo_data.model_dump())


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(
    todo_id: int,
    current_user: CurrentUser,
    todos: Todos,
):
    """Get a specific todo."""
    todo = todos.find_by_id(todo_id, owner_id=current_user.id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return todo


@router.put("/{todo_id}", response_model=TodoResponse)
def update_todo(
    todo_id: int,
    todo_data: TodoUpdate,
    current_user: CurrentUser,
    todos: Todos,
):
    """Update a todo. Fields left out of the body keep their value."""
    todo = todos.update(todo_id, todo_data.model_dump(exclude_unset=True), owner_id=current_user.id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return todo


@router.delete("/{todo_id}")
def delete_todo(
    todo_id: int,
    current_user: CurrentUser,
    todos: Todos,
):
    """Delete a todo along with its subtasks and notes."""
    if not todos.delete(todo_id, owner_id=current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return {"message": "Todo deleted successfully"}

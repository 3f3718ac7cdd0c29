"""Note API endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import CurrentUser, Notes, Todos, ensure_todo_owned
from src.schemas.todo import NoteCreate, NoteResponse, NoteUpdate

router = APIRouter(prefix="/api/v1/todos/{todo_id}/notes", tags=["notes"])


def note_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")


@router.get("", response_model=list[NoteResponse])
def get_notes(
    todo_id: int,
    current_user: CurrentUser,
    todos: Todos,
    notes: Notes,
):
    """Get a todo's notes, oldest first."""
    ensure_todo_owned(todos, todo_id, current_user)
    return notes.find_many(todo_id)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    todo_id: int,
    note_data: NoteCreate,
    current_user: CurrentUser,
    todos: Todos,
    notes: Notes,
):
    """Attach a note to a todo."""
    ensure_todo_owned(todos, todo_id, current_user)
    return notes.create(todo_id, note_data.model_dump())


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    todo_id: int,
    note_id: int,
    note_data: NoteUpdate,
    current_user: CurrentUser,
    todos: Todos,
    notes: Notes,
):
    ensure_todo_owned(todos, todo_id, current_user)
    if notes.find_by_id(note_id, owner_id=current_user.id, todo_id=todo_id) is None:
        raise note_not_found()

    note = notes.update(note_id, note_data.model_dump(exclude_unset=True))
    if note is None:
        raise note_not_found()
    return note


@router.delete("/{note_id}")
def delete_note(
    todo_id: int,
    note_id: int,
    current_user: CurrentUser,
    todos: Todos,
    notes: Notes,
):
    """Delete a note."""
    ensure_todo_owned(todos, todo_id, current_user)
    if notes.find_by_id(note_id, owner_id=current_user.id, todo_id=todo_id) is None:
        raise note_not_found()

    notes.delete(note_id)
    return {"message": "Note deleted successfully"}

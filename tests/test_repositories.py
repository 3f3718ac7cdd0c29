"""Data-access layer tests, run directly against the session."""

import pytest

from src.models.enums import TodoInclude, TodoOrder
from src.models.todo import Note, Subtask, Todo
from src.repositories.note import NoteRepository
from src.repositories.post import PostRepository
from src.repositories.subtask import SubtaskRepository
from src.repositories.todo import TodoRepository
from src.repositories.user import UserAlreadyExistsError, UserRepository


@pytest.fixture
def other_user(db):
    return UserRepository(db).create(
        email="second@example.com", username="second", password_hash="not-a-real-hash"
    )


def test_user_email_is_unique(db, user):
    with pytest.raises(UserAlreadyExistsError):
        UserRepository(db).create(
            email=user.email, username="different", password_hash="not-a-real-hash"
        )
    # Session is still usable after the rollback
    assert UserRepository(db).count() == 1


def test_user_username_is_unique(db, user):
    with pytest.raises(UserAlreadyExistsError):
        UserRepository(db).create(
            email="different@example.com", username=user.username, password_hash="x"
        )


def test_user_lookups(db, user):
    users = UserRepository(db)
    assert users.find_by_email(user.email).id == user.id
    assert users.find_by_username(user.username).id == user.id
    assert users.find_by_email_or_username("nobody@example.com", user.username).id == user.id
    assert users.find_by_email_or_username("nobody@example.com", "nobody") is None
    assert [u.id for u in users.find_many()] == [user.id]


def test_create_todo_returns_empty_collections(db, user):
    todo = TodoRepository(db).create(user.id, {"title": "Fresh"})
    assert todo.subtasks == []
    assert todo.notes == []
    assert todo.completed is False


def test_find_by_id_respects_owner(db, user, other_user):
    todos = TodoRepository(db)
    todo = todos.create(user.id, {"title": "Mine"})

    assert todos.find_by_id(todo.id).id == todo.id
    assert todos.find_by_id(todo.id, owner_id=user.id).id == todo.id
    assert todos.find_by_id(todo.id, owner_id=other_user.id) is None
    assert todos.find_by_id(123456) is None


def test_include_controls_embedding(db, user):
    todos = TodoRepository(db)
    todo = todos.create(
        user.id,
        {"title": "Parent", "subtasks": [{"title": "s"}], "notes": [{"content": "n"}]},
    )

    everything = todos.find_by_id(todo.id)
    assert len(everything.subtasks) == 1
    assert len(everything.notes) == 1

    only_subtasks = todos.find_by_id(todo.id, include=TodoInclude.SUBTASKS)
    assert len(only_subtasks.subtasks) == 1
    assert only_subtasks.notes == []

    bare = todos.find_many(user.id, include=TodoInclude.NONE)[0]
    assert bare.subtasks == []
    assert bare.notes == []


def test_embedded_children_match_child_listings(db, user):
    """Embedded subtasks and notes come back exactly as their own listings do."""
    todos = TodoRepository(db)
    todo = todos.create(
        user.id,
        {
            "title": "Parent",
            "subtasks": [{"title": "one"}, {"title": "two"}],
            "notes": [{"content": "first"}],
        },
    )
    SubtaskRepository(db).create(todo.id, {"title": "three"})
    NoteRepository(db).create(todo.id, {"content": "second"})

    embedded = todos.find_by_id(todo.id)
    assert embedded.subtasks == SubtaskRepository(db).find_many(todo.id)
    assert embedded.notes == NoteRepository(db).find_many(todo.id)
    assert [s.title for s in embedded.subtasks] == ["one", "two", "three"]
    assert [n.content for n in embedded.notes] == ["first", "second"]


def test_find_many_ordering(db, user):
    todos = TodoRepository(db)
    first = todos.create(user.id, {"title": "first"})
    second = todos.create(user.id, {"title": "second"})

    newest_first = todos.find_many(user.id)
    assert [t.id for t in newest_first] == [second.id, first.id]

    oldest_first = todos.find_many(user.id, order=TodoOrder.CREATED_ASC)
    assert [t.id for t in oldest_first] == [first.id, second.id]

    todos.update(first.id, {"title": "first, edited"})
    recently_updated = todos.find_many(user.id, order=TodoOrder.UPDATED_DESC, limit=1)
    assert [t.id for t in recently_updated] == [first.id]


def test_update_merges_only_given_fields(db, user):
    todos = TodoRepository(db)
    todo = todos.create(user.id, {"title": "Title", "description": "Desc"})

    updated = todos.update(todo.id, {"completed": True})
    assert updated.completed is True
    assert updated.title == "Title"
    assert updated.description == "Desc"
    assert updated.created_at == todo.created_at
    assert updated.updated_at > todo.updated_at


def test_update_ignores_unknown_fields(db, user, other_user):
    todos = TodoRepository(db)
    todo = todos.create(user.id, {"title": "Title"})

    updated = todos.update(todo.id, {"owner_id": other_user.id, "title": "New"})
    assert updated.owner_id == user.id
    assert updated.title == "New"


def test_update_missing_or_foreign_returns_none(db, user, other_user):
    todos = TodoRepository(db)
    todo = todos.create(user.id, {"title": "Mine"})

    assert todos.update(98765, {"title": "x"}) is None
    assert todos.update(todo.id, {"title": "x"}, owner_id=other_user.id) is None
    assert todos.find_by_id(todo.id).title == "Mine"


def test_delete_cascades_and_tolerates_missing(db, user):
    todos = TodoRepository(db)
    todo = todos.create(
        user.id,
        {"title": "Parent", "subtasks": [{"title": "s"}], "notes": [{"content": "n"}]},
    )

    assert todos.delete(todo.id) is True
    assert db.query(Todo).count() == 0
    assert db.query(Subtask).count() == 0
    assert db.query(Note).count() == 0
    assert todos.delete(todo.id) is False


def test_deleting_user_removes_everything_they_own(db, user):
    todo = TodoRepository(db).create(user.id, {"title": "Parent", "subtasks": [{"title": "s"}]})
    PostRepository(db).create(user.id, {"title": "Post"})

    assert UserRepository(db).delete(user.id) is True
    assert TodoRepository(db).find_by_id(todo.id) is None
    assert db.query(Subtask).count() == 0
    assert PostRepository(db).count(user.id) == 0


def test_counts(db, user, other_user):
    todos = TodoRepository(db)
    subtasks = SubtaskRepository(db)
    first = todos.create(user.id, {"title": "a", "completed": True})
    todos.create(user.id, {"title": "b"})
    todos.create(other_user.id, {"title": "c"})
    subtasks.create(first.id, {"title": "s1", "completed": True})
    subtasks.create(first.id, {"title": "s2"})

    assert todos.count(user.id) == 2
    assert todos.count(user.id, completed=True) == 1
    assert todos.count(user.id, completed=False) == 1
    assert todos.count(other_user.id) == 1
    assert subtasks.count(user.id) == 2
    assert subtasks.count(user.id, completed=True) == 1
    assert subtasks.count(other_user.id) == 0


def test_subtask_ownership_is_transitive(db, user, other_user):
    todo = TodoRepository(db).create(user.id, {"title": "Parent"})
    subtasks = SubtaskRepository(db)
    subtask = subtasks.create(todo.id, {"title": "child"})

    assert subtasks.find_by_id(subtask.id, owner_id=user.id).id == subtask.id
    assert subtasks.find_by_id(subtask.id, owner_id=other_user.id) is None
    assert subtasks.find_by_id(subtask.id, owner_id=user.id, todo_id=todo.id + 1) is None
    assert subtasks.update(subtask.id, {"completed": True}, owner_id=other_user.id) is None
    assert subtasks.delete(subtask.id, owner_id=other_user.id) is False


def test_note_repository(db, user):
    todo = TodoRepository(db).create(user.id, {"title": "Parent"})
    notes = NoteRepository(db)
    first = notes.create(todo.id, {"content": "one"})
    notes.create(todo.id, {"content": "two"})

    assert [n.content for n in notes.find_many(todo.id)] == ["one", "two"]
    assert notes.count(user.id) == 2

    edited = notes.update(first.id, {"content": "uno"})
    assert edited.content == "uno"
    assert edited.updated_at > first.updated_at


def test_post_visibility(db, user, other_user):
    posts = PostRepository(db)
    draft = posts.create(user.id, {"title": "Draft"})
    public = posts.create(user.id, {"title": "Public", "published": True})

    assert {p.id for p in posts.find_many(visible_to=user.id)} == {draft.id, public.id}
    assert [p.id for p in posts.find_many(visible_to=other_user.id)] == [public.id]
    assert posts.find_by_id(draft.id, visible_to=other_user.id) is None
    assert posts.find_by_id(public.id).author.username == user.username
    assert posts.count(user.id) == 2
    assert posts.count(user.id, published=True) == 1

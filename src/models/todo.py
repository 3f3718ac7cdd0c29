"""Todo, subtask and note models."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Text, false
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Todo(Base, TimestampMixin):
    """A task owned by a user."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, default=False, server_default=false(), nullable=False, index=True)
    due_date = Column(Date, nullable=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    owner = relationship("User", back_populates="todos")
    subtasks = relationship(
        "Subtask",
        back_populates="todo",
        cascade="all, delete-orphan",
        order_by="Subtask.created_at",
    )
    notes = relationship(
        "Note",
        back_populates="todo",
        cascade="all, delete-orphan",
        order_by="Note.created_at",
    )


class Subtask(Base, TimestampMixin):
    """A checklist entry inside a todo."""

    __tablename__ = "subtasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    completed = Column(Boolean, default=False, server_default=false(), nullable=False)
    todo_id = Column(
        Integer, ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    todo = relationship("Todo", back_populates="subtasks")


class Note(Base, TimestampMixin):
    """A free-text note attached to a todo."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    todo_id = Column(
        Integer, ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    todo = relationship("Todo", back_populates="notes")

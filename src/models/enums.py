"""Enums for model fields and query options."""

from enum import Enum, Flag, auto


class TodoInclude(Flag):
    """Related collections to embed in a todo record."""

    NONE = 0
    SUBTASKS = auto()
    NOTES = auto()
    ALL = SUBTASKS | NOTES


class TodoOrder(str, Enum):
    """Sort orders available when listing todos."""

    CREATED_DESC = "created_desc"
    CREATED_ASC = "created_asc"
    UPDATED_DESC = "updated_desc"
    DUE_DATE_ASC = "due_date_asc"

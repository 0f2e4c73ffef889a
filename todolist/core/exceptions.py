from typing import Any


class ToDoListException(Exception):
    """Base class for all the exceptions raised by the to-do list."""


class ValidationError(ToDoListException):
    def __init__(self, text: "Any"):
        super().__init__(f"Item text can't be empty or blank. Received: {text!r}.")


class NotFoundError(ToDoListException):
    def __init__(self, item_id: "Any", count: "int"):
        super().__init__(
            f"Item with ID '{item_id}' not found. The list has {count} item(s)."
        )


class PersistenceError(ToDoListException):
    pass


class MalformedRecordError(ToDoListException):
    def __init__(self, record: "Any", reason: "str"):
        super().__init__(f"Malformed record {record!r}: {reason}")

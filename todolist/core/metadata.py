from enum import Enum


class ToDoItem:
    """A single entry of the to-do list.

    Attributes:
        text (str): Text displayed for the item.
        completed (bool): Whether the item was marked as done.
    """

    text: "str"
    completed: "bool"

    def __init__(self, text: "str", completed: "bool" = False):
        self.text = text
        self.completed = completed

    def __repr__(self):  # pragma: no cover
        return f"ToDoItem(text='{self.text}', completed={self.completed})"

    def __eq__(self, other: "object"):
        if not isinstance(other, ToDoItem):
            return NotImplemented

        return self.text == other.text and self.completed == other.completed

    def toggle(self):
        """Flips the completion flag."""
        self.completed = not self.completed


class Operation(Enum):

    """Represents a mutation performed on the list."""

    ADD = "ADD"
    EDIT = "EDIT"
    REMOVE = "REMOVE"
    TOGGLE = "TOGGLE"

from typing import Any
from todolist.core.exceptions import ValidationError


def validate_text(text: "Any") -> "str":
    """Checks that the text can be used for an item.

    Args:
        text (Any): Text typed by the user.

    Returns:
        str: The same text, unchanged.

    Raises:
        ValidationError: If the text is not a string or is empty after trimming.
    """
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(text=text)

    return text


def is_valid_index(index: "Any", count: "int") -> "bool":
    """Checks if a value is a position inside a list with the given size."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < count

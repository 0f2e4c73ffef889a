from typing import Any, Dict
from abc import ABC, abstractmethod
from todolist.core.metadata import ToDoItem
from todolist.core.exceptions import MalformedRecordError


class BaseItemSerializer(ABC):

    """Abstract class that converts items to records that can be persisted and back."""

    @abstractmethod
    def serialize_item(self, item: "ToDoItem") -> "Any":  # pragma: no cover
        """Converts the item to a record.

        Args:
            item (ToDoItem): Item to be serialized.
        """

    @abstractmethod
    def deserialize_item(self, record: "Any") -> "ToDoItem":  # pragma: no cover
        """Converts a record to an item.

        Args:
            record (Any): Record read from the storage.

        Raises:
            MalformedRecordError: If the record can't be converted to an item.
        """


class RecordItemSerializer(BaseItemSerializer):

    """Converts items to dictionaries of primitive types.

    Attributes:
        text_field (str): Key used for the item's text.
        completed_field (str): Key used for the completion flag when writing.
        completed_aliases (tuple): Keys accepted for the completion flag when reading, in order of preference.
    """

    text_field = "text"
    completed_field = "isCompleted"
    completed_aliases = ("isCompleted", "completed")

    def serialize_item(self, item: "ToDoItem") -> "Dict":
        return {self.text_field: item.text, self.completed_field: item.completed}

    def _get_completed(self, record: "Dict") -> "bool":
        for field_name in self.completed_aliases:
            if field_name in record:
                value = record[field_name]
                if not isinstance(value, bool):
                    raise MalformedRecordError(
                        record=record, reason=f"'{field_name}' is not a boolean"
                    )
                return value

        raise MalformedRecordError(
            record=record, reason="missing the completion flag"
        )

    def deserialize_item(self, record: "Any") -> "ToDoItem":
        if not isinstance(record, dict):
            raise MalformedRecordError(record=record, reason="not a dictionary")

        text = record.get(self.text_field)
        if text is None:
            raise MalformedRecordError(
                record=record, reason=f"missing '{self.text_field}'"
            )
        if not isinstance(text, str):
            raise MalformedRecordError(
                record=record, reason=f"'{self.text_field}' is not a string"
            )

        completed = self._get_completed(record)
        return ToDoItem(text=text, completed=completed)

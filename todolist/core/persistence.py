from typing import Any, List, Optional
from abc import ABC, abstractmethod
from todolist.core.metadata import ToDoItem
from todolist.core.serializer import BaseItemSerializer, RecordItemSerializer
from todolist.core.exceptions import MalformedRecordError
import logging

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "items"


class BasePersistenceAdapter(ABC):
    """Abstract class that encapsulates the access to the key-value storage where the list is kept.

    Concrete backends only know how to read and write the raw records stored under the key. Converting
    them to items and skipping the ones that are malformed is handled here.

    Attributes:
        key (str): Key under which the list of records is stored.
        item_serializer (BaseItemSerializer): Instance used to convert items to records and back.
    """

    key: "str"
    item_serializer: "BaseItemSerializer"

    def __init__(
        self,
        key: "str" = DEFAULT_STORAGE_KEY,
        item_serializer: "Optional[BaseItemSerializer]" = None,
    ):
        self.key = key
        self.item_serializer = (
            item_serializer if item_serializer is not None else RecordItemSerializer()
        )

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(key='{self.key}')"

    def load(self) -> "List[ToDoItem]":
        """Reads the items from the storage. Returns an empty list if nothing is stored.
        Records that can't be converted to items are skipped.

        Raises:
            PersistenceError: If the storage can't be read.
        """
        records = self.read_records()
        if records is None:
            return []

        if not isinstance(records, list):
            logger.warning(
                "Value stored under key '%s' is not a list, ignoring it: %r",
                self.key,
                records,
            )
            return []

        items: "List[ToDoItem]" = []
        for position, record in enumerate(records):
            try:
                item = self.item_serializer.deserialize_item(record)
            except MalformedRecordError as e:
                logger.warning(
                    "Skipping record %d stored under key '%s': %s", position, self.key, e
                )
                continue
            items.append(item)

        logger.debug("Loaded %d item(s) from key '%s'", len(items), self.key)
        return items

    def save(self, items: "List[ToDoItem]"):
        """Replaces everything stored under the key with the given items.

        Args:
            items (List[ToDoItem]): The full list, in order.

        Raises:
            PersistenceError: If the storage can't be written.
        """
        records = [self.item_serializer.serialize_item(item) for item in items]
        self.write_records(records=records)
        logger.debug("Saved %d item(s) to key '%s'", len(records), self.key)

    @abstractmethod
    def read_records(self) -> "Optional[Any]":  # pragma: no cover
        """Returns the raw value stored under the key or None if there's nothing stored.

        Raises:
            PersistenceError: If the storage can't be read.
        """

    @abstractmethod
    def write_records(self, records: "List[Any]"):  # pragma: no cover
        """Stores the records under the key, replacing the previous value.

        Args:
            records (List[Any]): Records to be stored.

        Raises:
            PersistenceError: If the storage can't be written.
        """

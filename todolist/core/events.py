from typing import List
from .metadata import ToDoItem, Operation
import logging

logger = logging.getLogger(__name__)


class EventsManager:
    """Handles the events that happen to the list. The presentation layer should subclass it
    and override the hooks it needs, usually to re-render after each change.

    The items received are copies, changing them doesn't change the list."""

    def on_items_loaded(self, items: "List[ToDoItem]"):
        """Called after the list is loaded from the storage.

        Args:
            items (List[ToDoItem]): Items that were loaded.
        """
        logger.debug("Loaded %d item(s)", len(items))

    def on_item_added(self, index: "int", item: "ToDoItem"):
        """Called after an item is appended and the list is saved.

        Args:
            index (int): Position of the new item.
            item (ToDoItem): The new item.
        """
        logger.debug("Added item %d: %r", index, item)

    def on_item_edited(self, index: "int", item: "ToDoItem"):
        """Called after an item's text is replaced and the list is saved.

        Args:
            index (int): Position of the item.
            item (ToDoItem): The item with its new text.
        """
        logger.debug("Edited item %d: %r", index, item)

    def on_item_removed(self, index: "int", item: "ToDoItem"):
        """Called after an item is removed and the list is saved.

        Args:
            index (int): Position the item had before being removed.
            item (ToDoItem): The removed item.
        """
        logger.debug("Removed item %d: %r", index, item)

    def on_item_toggled(self, index: "int", item: "ToDoItem"):
        """Called after an item's completion flag is flipped and the list is saved.

        Args:
            index (int): Position of the item.
            item (ToDoItem): The item with its new flag.
        """
        logger.debug("Toggled item %d: %r", index, item)

    def on_save_failed(self, operation: "Operation", exception: "Exception"):
        """Called when saving the list after a change raised an exception. The change is kept in memory
        and the exception is raised again after this returns.

        Args:
            operation (Operation): The change that was being saved.
            exception (Exception): Exception that was raised.
        """

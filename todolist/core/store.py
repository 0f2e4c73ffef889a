from typing import List, Any, Optional
from .metadata import ToDoItem, Operation
from .persistence import BasePersistenceAdapter
from .events import EventsManager
from .exceptions import NotFoundError, PersistenceError
from .utils import validate_text, is_valid_index
import copy
import logging

logger = logging.getLogger(__name__)


class ToDoStore:
    """Keeps the ordered list of items and writes it to the storage after every change.

    The store is the only owner of the list. Callers receive copies of the items and change them
    through the store's operations. Items are identified by their position in the list.

    Attributes:
        persistence_adapter (BasePersistenceAdapter): Storage where the list is saved.
        events_manager (EventsManager): Instance notified after each change.
        is_loaded (bool): Whether the list was already read from the storage.
    """

    persistence_adapter: "BasePersistenceAdapter"
    events_manager: "EventsManager"
    is_loaded: "bool"
    _items: "List[ToDoItem]"

    def __init__(
        self,
        persistence_adapter: "BasePersistenceAdapter",
        events_manager: "Optional[EventsManager]" = None,
        autoload: "bool" = True,
    ):
        """
        Args:
            persistence_adapter (BasePersistenceAdapter): Storage where the list is saved.
            events_manager (Optional[EventsManager]): Instance notified after each change.
            autoload (bool): Whether the list should be read from the storage right away. If False, it's read
            by the first operation.
        """
        self.persistence_adapter = persistence_adapter
        self.events_manager = (
            events_manager if events_manager is not None else EventsManager()
        )
        self.is_loaded = False
        self._items = []

        if autoload:
            self.load()

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(persistence_adapter={self.persistence_adapter!r})"

    def __len__(self):
        self._ensure_loaded()
        return len(self._items)

    def load(self) -> "List[ToDoItem]":
        """Reads the list from the storage, replacing the one in memory.

        Raises:
            PersistenceError: If the storage can't be read.
        """
        self._items = self.persistence_adapter.load()
        self.is_loaded = True
        items = self.list()
        self.events_manager.on_items_loaded(items=items)
        return items

    def _ensure_loaded(self):
        if not self.is_loaded:
            self.load()

    def _check_index(self, id: "Any") -> "int":
        self._ensure_loaded()
        if not is_valid_index(index=id, count=len(self._items)):
            raise NotFoundError(item_id=id, count=len(self._items))
        return id

    def _persist(self, operation: "Operation"):
        """Saves the whole list. If it fails, the change stays in memory and the exception is raised again.

        Args:
            operation (Operation): The change being saved.
        """
        try:
            self.persistence_adapter.save(items=self._items)
        except PersistenceError as e:
            logger.error(
                "Could not save the list after %s, keeping unsaved changes in memory: %s",
                operation.value,
                e,
            )
            self.events_manager.on_save_failed(operation=operation, exception=e)
            raise

    def add(self, text: "str") -> "int":
        """Appends a new item that isn't completed.

        Args:
            text (str): Text of the new item.

        Returns:
            int: Position of the new item.

        Raises:
            ValidationError: If the text is empty or blank.
            PersistenceError: If the list can't be saved. The item is still added.
        """
        validate_text(text)
        self._ensure_loaded()

        item = ToDoItem(text=text, completed=False)
        self._items.append(item)
        index = len(self._items) - 1
        self._persist(operation=Operation.ADD)

        self.events_manager.on_item_added(index=index, item=copy.deepcopy(item))
        return index

    def edit(self, id: "int", new_text: "str"):
        """Replaces an item's text, keeping its position and completion flag.

        Args:
            id (int): Position of the item.
            new_text (str): The new text.

        Raises:
            NotFoundError: If there's no item at the position.
            ValidationError: If the text is empty or blank.
            PersistenceError: If the list can't be saved. The item is still edited.
        """
        index = self._check_index(id)
        validate_text(new_text)

        item = self._items[index]
        item.text = new_text
        self._persist(operation=Operation.EDIT)

        self.events_manager.on_item_edited(index=index, item=copy.deepcopy(item))

    def remove(self, id: "int"):
        """Removes an item. The items after it move one position up.

        Args:
            id (int): Position of the item.

        Raises:
            NotFoundError: If there's no item at the position.
            PersistenceError: If the list can't be saved. The item is still removed.
        """
        index = self._check_index(id)

        item = self._items.pop(index)
        self._persist(operation=Operation.REMOVE)

        self.events_manager.on_item_removed(index=index, item=item)

    def toggle_completed(self, id: "int"):
        """Flips an item's completion flag.

        Args:
            id (int): Position of the item.

        Raises:
            NotFoundError: If there's no item at the position.
            PersistenceError: If the list can't be saved. The item is still toggled.
        """
        index = self._check_index(id)

        item = self._items[index]
        item.toggle()
        self._persist(operation=Operation.TOGGLE)

        self.events_manager.on_item_toggled(index=index, item=copy.deepcopy(item))

    def get(self, id: "int") -> "ToDoItem":
        """Returns a copy of the item at the given position.

        Raises:
            NotFoundError: If there's no item at the position.
        """
        index = self._check_index(id)
        return copy.deepcopy(self._items[index])

    def list(self) -> "List[ToDoItem]":
        """Returns a copy of all the items in their current order."""
        self._ensure_loaded()
        return copy.deepcopy(self._items)

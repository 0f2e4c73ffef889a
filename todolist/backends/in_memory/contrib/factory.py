from todolist.core.events import EventsManager
from todolist.core.persistence import DEFAULT_STORAGE_KEY
from todolist.core.serializer import RecordItemSerializer
from todolist.core.store import ToDoStore
from todolist.backends.in_memory import InMemoryPersistenceAdapter
from typing import Any, Dict, Optional


def create_in_memory_store(
    storage: "Optional[Dict[str, Any]]" = None,
    key: "str" = DEFAULT_STORAGE_KEY,
    item_serializer=None,
    events_manager_class=EventsManager,
    autoload: "bool" = True,
) -> ToDoStore:

    if item_serializer is None:
        item_serializer = RecordItemSerializer()

    persistence_adapter = InMemoryPersistenceAdapter(
        key=key, item_serializer=item_serializer, storage=storage
    )

    return ToDoStore(
        persistence_adapter=persistence_adapter,
        events_manager=events_manager_class(),
        autoload=autoload,
    )
